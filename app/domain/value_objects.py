"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self

from app.domain.base import ValueObject


# ============================================================================
# Price
# ============================================================================


@dataclass(frozen=True)
class Price(ValueObject):
    """Exact decimal price.

    Zero doubles as the "unset" marker: a variant stored with a zero
    price has no price of its own and inherits its product's price.
    A genuinely free variant cannot be represented.

    Attributes:
        amount: Exact decimal amount in major currency units.
    """

    amount: Decimal

    @classmethod
    def unset(cls) -> Self:
        """Create the unset (zero) price.

        Returns:
            Price with zero amount.
        """
        return cls(amount=Decimal("0"))

    @classmethod
    def of(cls, amount: Decimal | int | str | None) -> Self:
        """Wrap a stored amount, treating NULL as unset.

        Args:
            amount: Amount as read from storage.

        Returns:
            Price instance.
        """
        if amount is None:
            return cls.unset()
        return cls(amount=Decimal(amount))

    @classmethod
    def parse(cls, raw: str | None) -> Self | None:
        """Parse a text-encoded decimal.

        Args:
            raw: Text such as ``"12.50"``.

        Returns:
            Price, or None when the text is empty, malformed or not finite.
        """
        if raw is None or raw == "":
            return None
        try:
            amount = Decimal(raw)
        except (InvalidOperation, ValueError):
            return None
        if not amount.is_finite():
            return None
        return cls(amount=amount)

    @property
    def is_set(self) -> bool:
        """Whether this price carries a real (nonzero) value."""
        return not self.amount.is_zero()

    def to_float(self) -> float:
        """Nearest float, for display at the JSON boundary.

        Returns:
            Float approximation of the amount.
        """
        return float(self.amount)

    def __str__(self) -> str:
        return str(self.amount)
