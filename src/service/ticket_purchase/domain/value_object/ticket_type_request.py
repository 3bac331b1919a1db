import attrs

from src.service.ticket_purchase.domain.enum.ticket_type import TicketType
from src.service.ticket_purchase.domain.validators import IntegerValidators, TicketTypeValidators


@attrs.define(frozen=True)
class TicketTypeRequest:
    """
    Immutable request for ``no_of_tickets`` tickets of one ``ticket_type``.

    Construction only checks that the type is a known literal and the quantity
    is an integer. Positivity and cross-request limits are purchase rules,
    checked when the purchase is built.
    """

    ticket_type: TicketType = attrs.field(converter=TicketTypeValidators.to_ticket_type)
    no_of_tickets: int = attrs.field(validator=IntegerValidators.validate_ticket_quantity)

    def get_ticket_type(self) -> TicketType:
        return self.ticket_type

    def get_no_of_tickets(self) -> int:
        return self.no_of_tickets
