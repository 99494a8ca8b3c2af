"""Ticket sales validation and checked arithmetic."""

from typing import Any

from src.platform.config.business_config import AmountLimits, PurchaseLimits
from src.platform.exception.exceptions import DomainError
from src.service.ticket_sales.domain.exception.ticket_sales_exceptions import (
    ArithmeticOverflowError,
    InvalidTicketCountError,
)


class NumericValidators:
    """Common numeric validation functions."""

    @staticmethod
    def validate_amount(value: Any, field_name: str = 'Value') -> int:
        """Validate a non-negative int within the amount range."""
        # bool is an int subclass but never a quantity
        if isinstance(value, bool) or not isinstance(value, int):
            raise DomainError(f'{field_name} must be an integer')
        if value < AmountLimits.MIN_AMOUNT:
            raise DomainError(f'{field_name} cannot be negative')
        if value > AmountLimits.MAX_AMOUNT:
            raise ArithmeticOverflowError(f'{field_name} exceeds the maximum amount')
        return value

    @staticmethod
    def validate_non_negative(_instance: Any, attribute: Any, value: int) -> None:
        """attrs validator form of validate_amount."""
        NumericValidators.validate_amount(value, attribute.name)


class BusinessRuleValidators:
    @staticmethod
    def validate_ticket_count(count: Any) -> int:
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidTicketCountError('Ticket count must be an integer')
        if count < PurchaseLimits.MIN_TICKETS_PER_PURCHASE:
            raise InvalidTicketCountError(
                f'Minimum {PurchaseLimits.MIN_TICKETS_PER_PURCHASE} ticket required'
            )
        return NumericValidators.validate_amount(count, 'Ticket count')


class CheckedArithmetic:
    """Integer arithmetic that fails closed instead of exceeding MAX_AMOUNT."""

    @staticmethod
    def add(a: int, b: int) -> int:
        result = a + b
        if result > AmountLimits.MAX_AMOUNT:
            raise ArithmeticOverflowError(f'Addition overflow: {a} + {b}')
        return result

    @staticmethod
    def mul(a: int, b: int) -> int:
        result = a * b
        if result > AmountLimits.MAX_AMOUNT:
            raise ArithmeticOverflowError(f'Multiplication overflow: {a} * {b}')
        return result

    @staticmethod
    def sub(a: int, b: int) -> int:
        if b > a:
            raise ArithmeticOverflowError(f'Subtraction underflow: {a} - {b}')
        return a - b
