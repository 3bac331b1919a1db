"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.driven_adapter.third_party.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.third_party.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # External collaborators
    ticket_payment_service = providers.Singleton(TicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(SeatReservationServiceImpl)

    # Use cases
    purchase_tickets_use_case = providers.Factory(
        PurchaseTicketsUseCase,
        payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.ticket_payment_service()
    container.seat_reservation_service()


def cleanup() -> None:
    container.reset_singletons()
