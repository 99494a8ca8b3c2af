"""
Ticket Sales Errors

Recoverable failures raised to the caller of an engine operation. Each keeps
the platform status code so a transport layer can map it directly.
"""

from src.platform.exception.exceptions import (
    ConflictError,
    CustomBaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)


class UnauthorizedError(ForbiddenError):
    """A non-administrator called an administrator-only operation."""


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f'Event {event_id} not found')


class EventClosedError(ConflictError):
    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f'Event {event_id} is closed')


class InsufficientPaymentError(DomainError):
    def __init__(self, *, required: int, paid: int) -> None:
        self.required = required
        self.paid = paid
        super().__init__(f'Payment of {paid} is below the required {required}', 402)


class InsufficientInventoryError(ConflictError):
    def __init__(self, *, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(f'Requested {requested} tickets but only {remaining} remain')


class NoHoldingsError(DomainError):
    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f'No tickets held for event {event_id}')


class InvalidTicketCountError(DomainError):
    pass


class TransferFailedError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 502)


class ArithmeticOverflowError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 422)
