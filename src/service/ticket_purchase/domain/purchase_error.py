"""
Purchase errors.

Every rejected purchase raises an ``InvalidPurchaseError`` subclass. Callers
match on the subclass or on the message, so messages are fixed.
"""

from src.platform.exception.exceptions import DomainError


class InvalidTicketTypeRequestError(DomainError):
    """A ticket type request could not be constructed."""


class InvalidTicketTypeError(InvalidTicketTypeRequestError):
    def __init__(self) -> None:
        super().__init__('Ticket type must be one of INFANT, CHILD, ADULT')


class InvalidTicketQuantityError(InvalidTicketTypeRequestError):
    def __init__(self) -> None:
        super().__init__('Number of tickets must be an integer')


class InvalidPurchaseError(DomainError):
    """A purchase was rejected by a business rule."""


class InvalidAccountIdError(InvalidPurchaseError):
    NOT_AN_INTEGER = 'Account ID is not an integer'
    NOT_POSITIVE = 'Account ID must be greater than zero'


class EmptyPurchaseError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__('Must make at least one ticket type request')


class TooManyTicketsError(InvalidPurchaseError):
    def __init__(self, max_tickets: int) -> None:
        super().__init__(f'Only a maximum of {max_tickets} tickets can be purchased at a time')
        self.max_tickets = max_tickets


class NotATicketRequestError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__('The ticket requests contain a non-request value')


class NonPositiveQuantityError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__('A ticket request is requesting zero or less tickets')


class UnaccompaniedMinorError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            'Child and Infant tickets cannot be purchased without purchasing an Adult ticket'
        )
