from types import MappingProxyType
from typing import Any, Mapping, Sequence

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.domain.enum.ticket_type import TicketType
from src.service.ticket_purchase.domain.purchase_error import (
    EmptyPurchaseError,
    InvalidAccountIdError,
    NonPositiveQuantityError,
    NotATicketRequestError,
    TooManyTicketsError,
    UnaccompaniedMinorError,
)
from src.service.ticket_purchase.domain.purchase_rule import (
    PurchaseLimits,
    SeatAllocation,
    TicketPrices,
)
from src.service.ticket_purchase.domain.validators import IntegerValidators
from src.service.ticket_purchase.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


@attrs.define(frozen=True)
class PurchaseOrder:
    """Validated totals of one purchase, priced and seated on demand."""

    account_id: int
    totals_by_type: Mapping[TicketType, int]

    @classmethod
    @Logger.io
    def create(
        cls, *, account_id: Any, ticket_type_requests: Sequence[Any]
    ) -> 'PurchaseOrder':
        """
        Build an order from raw purchase input.

        Checks run in a fixed order and the first failing one raises:
        account id type, account id range, empty purchase, request count,
        each request's shape and quantity, total ticket count, and finally
        adult accompaniment.

        Raises:
            InvalidPurchaseError: subclass describing the first broken rule
        """
        # Checked by type, not by comparison, so nothing on account_id gets called
        if not IntegerValidators.is_strict_integer(account_id):
            raise InvalidAccountIdError(InvalidAccountIdError.NOT_AN_INTEGER)
        if account_id <= 0:
            raise InvalidAccountIdError(InvalidAccountIdError.NOT_POSITIVE)

        if not ticket_type_requests:
            raise EmptyPurchaseError()

        # Every valid request holds at least one ticket
        if len(ticket_type_requests) > PurchaseLimits.MAX_TICKETS_PER_PURCHASE:
            raise TooManyTicketsError(PurchaseLimits.MAX_TICKETS_PER_PURCHASE)

        totals_by_type = dict.fromkeys(TicketType, 0)
        for request in ticket_type_requests:
            if not isinstance(request, TicketTypeRequest):
                raise NotATicketRequestError()

            no_of_tickets = request.get_no_of_tickets()
            if no_of_tickets <= 0:
                raise NonPositiveQuantityError()

            totals_by_type[request.get_ticket_type()] += no_of_tickets

        if sum(totals_by_type.values()) > PurchaseLimits.MAX_TICKETS_PER_PURCHASE:
            raise TooManyTicketsError(PurchaseLimits.MAX_TICKETS_PER_PURCHASE)

        has_minor = totals_by_type[TicketType.INFANT] > 0 or totals_by_type[TicketType.CHILD] > 0
        if has_minor and totals_by_type[TicketType.ADULT] == 0:
            raise UnaccompaniedMinorError()

        return cls(account_id=account_id, totals_by_type=MappingProxyType(totals_by_type))

    @property
    def total_ticket_count(self) -> int:
        return sum(self.totals_by_type.values())

    @property
    def total_price(self) -> int:
        return sum(
            TicketPrices.PRICE_BY_TYPE[ticket_type] * count
            for ticket_type, count in self.totals_by_type.items()
        )

    @property
    def total_seats(self) -> int:
        return sum(
            count
            for ticket_type, count in self.totals_by_type.items()
            if ticket_type in SeatAllocation.SEATED_TYPES
        )
