"""Ticket Purchase Domain Enums"""

from src.service.ticket_purchase.domain.enum.ticket_type import TicketType

__all__ = ['TicketType']
