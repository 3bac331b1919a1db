"""
Ticket Type Enum - Domain Value Object

Closed set of ticket types. The type decides the price and whether the
ticket takes a seat.
"""

from enum import StrEnum


class TicketType(StrEnum):
    INFANT = 'INFANT'
    CHILD = 'CHILD'
    ADULT = 'ADULT'
