"""Domain validation utilities."""

from typing import Any

from src.service.ticket_purchase.domain.enum.ticket_type import TicketType
from src.service.ticket_purchase.domain.purchase_error import (
    InvalidTicketQuantityError,
    InvalidTicketTypeError,
)


class IntegerValidators:
    @staticmethod
    def is_strict_integer(value: Any) -> bool:
        """True only for real ``int`` values.

        ``bool``, ``int`` subclasses and objects implementing ``__index__`` or
        ``__int__`` are rejected, and no conversion is attempted on ``value``.
        """
        return type(value) is int

    @staticmethod
    def validate_ticket_quantity(_instance: Any, _attribute: Any, value: Any) -> None:
        """Validate that a ticket quantity is an integer (for attrs validators)."""
        if not IntegerValidators.is_strict_integer(value):
            raise InvalidTicketQuantityError()


class TicketTypeValidators:
    @staticmethod
    def to_ticket_type(value: Any) -> TicketType:
        """Resolve an exact ``TicketType`` literal (for attrs converters)."""
        if isinstance(value, TicketType):
            return value
        if type(value) is str and value in TicketType.__members__:
            return TicketType[value]
        raise InvalidTicketTypeError()
