from typing import Any

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain.value_object.purchase_order import PurchaseOrder


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case

    Flow:
    1. Build the PurchaseOrder (every business rule, Fail Fast)
    2. Take payment for the total price
    3. Reserve seats for every CHILD and ADULT ticket

    Nothing is paid or reserved unless step 1 passes. Payment always comes
    before reservation.

    Dependencies:
    - payment_service: external payment gateway
    - seat_reservation_service: external seat booking system
    """

    def __init__(
        self,
        *,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
    ) -> None:
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def purchase_tickets(self, account_id: Any, *ticket_type_requests: Any) -> None:
        """
        Purchase tickets for an account.

        Args:
            account_id: Account making the purchase
            *ticket_type_requests: TicketTypeRequest values, several may share a type

        Raises:
            InvalidPurchaseError: If any purchase rule is broken
        """
        with self.tracer.start_as_current_span('use_case.purchase_tickets'):
            order = PurchaseOrder.create(
                account_id=account_id, ticket_type_requests=ticket_type_requests
            )

            total_price = order.total_price
            total_seats = order.total_seats
            Logger.base.info(
                f'🎟️ [PURCHASE] Account {order.account_id} accepted: '
                f'{order.total_ticket_count} tickets, £{total_price}, {total_seats} seats'
            )

            self.payment_service.make_payment(order.account_id, total_price)
            self.seat_reservation_service.reserve_seat(order.account_id, total_seats)
