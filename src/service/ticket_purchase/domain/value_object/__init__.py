"""Ticket Purchase Domain Value Objects"""

from src.service.ticket_purchase.domain.value_object.purchase_order import PurchaseOrder
from src.service.ticket_purchase.domain.value_object.ticket_type_request import TicketTypeRequest

__all__ = ['PurchaseOrder', 'TicketTypeRequest']
