"""
Ticket Payment Service Interface

Port to the external payment gateway. The gateway is trusted to succeed once
called; the purchase flow never inspects a result.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, account_id: int, amount_to_pay: int) -> None:
        """
        Charge an account for a purchase.

        Args:
            account_id: Paying account, always greater than zero
            amount_to_pay: Total price in whole pounds, never negative
        """
        pass
