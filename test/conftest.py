"""
Test Configuration and Fixtures

This module provides:
- Test log directory setup (must run before application imports)
- Stub collaborators for the purchase flow
- A loguru sink fixture for asserting on log output
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# loguru_io_config reads TEST_LOG_DIR at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    # Call-level debug logging on, so @Logger.io formats every input it sees
    os.environ['DEBUG'] = 'True'


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from src.platform.logging.loguru_io import Logger  # noqa: E402
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (  # noqa: E402
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (  # noqa: E402
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (  # noqa: E402
    ITicketPaymentService,
)


@pytest.fixture
def collaborator_calls() -> Mock:
    """Parent mock shared by both collaborators, so call order is recorded"""
    return Mock()


@pytest.fixture
def mock_payment_service(collaborator_calls: Mock) -> Mock:
    payment_service = Mock(spec=ITicketPaymentService)
    collaborator_calls.attach_mock(payment_service.make_payment, 'make_payment')
    return payment_service


@pytest.fixture
def mock_seat_reservation_service(collaborator_calls: Mock) -> Mock:
    seat_reservation_service = Mock(spec=ISeatReservationService)
    collaborator_calls.attach_mock(seat_reservation_service.reserve_seat, 'reserve_seat')
    return seat_reservation_service


@pytest.fixture
def purchase_tickets_use_case(
    mock_payment_service: Mock, mock_seat_reservation_service: Mock
) -> PurchaseTicketsUseCase:
    return PurchaseTicketsUseCase(
        payment_service=mock_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
    )


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Collect every loguru message emitted during the test"""
    messages: list[str] = []
    handler_id = Logger.base.add(messages.append, format='{level} | {message}', level='DEBUG')
    yield messages
    Logger.base.remove(handler_id)
