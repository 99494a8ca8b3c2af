import pytest

from src.platform.config.business_config import AmountLimits
from src.platform.exception.exceptions import DomainError
from src.service.ticket_sales.domain.exception.ticket_sales_exceptions import (
    ArithmeticOverflowError,
    InvalidTicketCountError,
)
from src.service.ticket_sales.domain.validators import (
    BusinessRuleValidators,
    CheckedArithmetic,
    NumericValidators,
)


class TestCheckedArithmetic:
    def test_mul_within_range(self):
        assert CheckedArithmetic.mul(100, 3) == 300

    def test_mul_overflow(self):
        with pytest.raises(ArithmeticOverflowError, match='Multiplication overflow'):
            CheckedArithmetic.mul(AmountLimits.MAX_AMOUNT, 2)

    def test_add_overflow(self):
        with pytest.raises(ArithmeticOverflowError, match='Addition overflow'):
            CheckedArithmetic.add(AmountLimits.MAX_AMOUNT, 1)

    def test_sub_underflow(self):
        with pytest.raises(ArithmeticOverflowError, match='underflow'):
            CheckedArithmetic.sub(1, 2)


class TestNumericValidators:
    @pytest.mark.parametrize('value', [-1, 1.5, '3', True])
    def test_rejects_non_amounts(self, value):
        with pytest.raises(DomainError):
            NumericValidators.validate_amount(value, 'Paid amount')

    def test_rejects_amount_past_max(self):
        with pytest.raises(ArithmeticOverflowError):
            NumericValidators.validate_amount(AmountLimits.MAX_AMOUNT + 1)

    def test_accepts_zero(self):
        assert NumericValidators.validate_amount(0) == 0


class TestTicketCount:
    @pytest.mark.parametrize('count', [0, -2, False])
    def test_rejects_less_than_one_ticket(self, count):
        with pytest.raises(InvalidTicketCountError):
            BusinessRuleValidators.validate_ticket_count(count)

    def test_accepts_one_ticket(self):
        assert BusinessRuleValidators.validate_ticket_count(1) == 1
