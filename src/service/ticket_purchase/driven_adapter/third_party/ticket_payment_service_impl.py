from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class TicketPaymentServiceImpl(ITicketPaymentService):
    """Stand-in for the external payment gateway; always succeeds."""

    @Logger.io
    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        Logger.base.info(f'💳 [PAYMENT] Charged account {account_id}: £{amount_to_pay}')
