"""Purchase business rules: limits, prices and seating."""

from types import MappingProxyType
from typing import Final, Mapping

from src.service.ticket_purchase.domain.enum.ticket_type import TicketType


class PurchaseLimits:
    """Per-purchase ticket limits."""

    MAX_TICKETS_PER_PURCHASE: Final[int] = 20


class TicketPrices:
    """Fixed price per ticket, in whole pounds."""

    PRICE_BY_TYPE: Final[Mapping[TicketType, int]] = MappingProxyType(
        {
            TicketType.INFANT: 0,
            TicketType.CHILD: 10,
            TicketType.ADULT: 20,
        }
    )


class SeatAllocation:
    """Ticket types that occupy a seat (infants sit on an adult's lap)."""

    SEATED_TYPES: Final[frozenset[TicketType]] = frozenset({TicketType.CHILD, TicketType.ADULT})
