"""Business logic configuration and constants."""

from typing import Final


class AmountLimits:
    """Bounds for ticket counts and currency amounts (smallest currency unit)."""

    MAX_AMOUNT: Final[int] = 2**256 - 1
    MIN_AMOUNT: Final[int] = 0


class PurchaseLimits:
    """Purchase-related business limits."""

    MIN_TICKETS_PER_PURCHASE: Final[int] = 1


class LockKeyFormat:
    """Key format for per-event locks."""

    PREFIX: Final[str] = 'lock:event'
