"""
Unit tests for the payment and seat reservation stand-ins
"""

import pytest

from src.service.ticket_purchase.driven_adapter.third_party.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.third_party.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)


@pytest.mark.unit
class TestTicketPaymentServiceImpl:
    def test_make_payment_always_succeeds(self, log_messages: list[str]) -> None:
        result = TicketPaymentServiceImpl().make_payment(42, 120)

        assert result is None
        assert any('Charged account 42: £120' in m for m in log_messages)

    def test_zero_amount_is_accepted(self) -> None:
        assert TicketPaymentServiceImpl().make_payment(1, 0) is None


@pytest.mark.unit
class TestSeatReservationServiceImpl:
    def test_reserve_seat_always_succeeds(self, log_messages: list[str]) -> None:
        result = SeatReservationServiceImpl().reserve_seat(42, 11)

        assert result is None
        assert any('Reserved 11 seats for account 42' in m for m in log_messages)
