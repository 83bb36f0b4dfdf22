"""Value objects for the transaction domain.

Value objects validate themselves on construction, are immutable (frozen
dataclasses), and compare by value.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional, Union
from uuid import UUID, uuid4

from cashtrack.domain.errors import ValidationError, cannot_be_null

DESCRIPTION_MAX_LENGTH = 255


@dataclass(frozen=True)
class TransactionId:
    """Opaque transaction identifier wrapping a UUID."""

    value: UUID

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValidationError(cannot_be_null("Transaction ID"))
        if not isinstance(self.value, UUID):
            raise ValidationError(f"Transaction ID must be a UUID, got {type(self.value).__name__}")

    @classmethod
    def generate(cls) -> "TransactionId":
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def from_string(cls, text: Optional[str]) -> "TransactionId":
        """Parse the canonical hyphenated UUID form.

        Raises:
            ValidationError: If text is None, blank or not a canonical UUID
        """
        if text is None or not text.strip():
            raise ValidationError("Transaction ID string cannot be null or empty")
        candidate = text.strip()
        try:
            parsed = UUID(candidate)
        except ValueError as e:
            raise ValidationError("Invalid transaction ID format") from e
        if str(parsed) != candidate.lower():
            raise ValidationError("Invalid transaction ID format")
        return cls(parsed)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Amount:
    """Strictly positive monetary quantity.

    Decimal is immutable, so ``value`` can be handed out directly without
    exposing internal state.
    """

    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _to_decimal(self.value))
        if self.value <= 0:
            raise ValidationError("Amount must be positive")

    def add(self, other: Optional["Amount"]) -> "Amount":
        """Return a new Amount holding the sum."""
        if other is None:
            raise ValidationError("Other amount cannot be null")
        return Amount(self.value + other.value)

    def subtract(self, other: Optional["Amount"]) -> "Amount":
        """Return a new Amount holding the difference.

        Raises:
            ValidationError: If other is None or the result is not positive
        """
        if other is None:
            raise ValidationError("Other amount cannot be null")
        result = self.value - other.value
        if result <= 0:
            raise ValidationError("Subtraction result must be positive")
        return Amount(result)

    def is_greater_than(self, other: Optional["Amount"]) -> bool:
        if other is None:
            raise ValidationError("Other amount cannot be null")
        return self.value > other.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Description:
    """Trimmed, non-empty free text of at most 255 characters."""

    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValidationError(cannot_be_null("Description"))
        trimmed = self.value.strip()
        if not trimmed:
            raise ValidationError("Description cannot be empty")
        if len(trimmed) > DESCRIPTION_MAX_LENGTH:
            raise ValidationError(
                f"Description cannot be longer than {DESCRIPTION_MAX_LENGTH} characters"
            )
        object.__setattr__(self, "value", trimmed)

    def contains(self, keyword: Optional[str]) -> bool:
        """Case-insensitive substring check. None never matches."""
        if keyword is None:
            return False
        return keyword.casefold() in self.value.casefold()

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TransactionDate:
    """Calendar date that is not in the future."""

    value: date

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValidationError(cannot_be_null("Transaction date"))
        if isinstance(self.value, datetime):
            object.__setattr__(self, "value", self.value.date())
        elif not isinstance(self.value, date):
            raise ValidationError(
                f"Transaction date must be a date, got {type(self.value).__name__}"
            )
        if self.value > date.today():
            raise ValidationError("Transaction date cannot be in the future")

    @classmethod
    def now(cls) -> "TransactionDate":
        """Return today's date."""
        return cls(date.today())

    def is_before(self, other: Optional["TransactionDate"]) -> bool:
        if other is None:
            raise ValidationError("Other transaction date cannot be null")
        return self.value < other.value

    def is_after(self, other: Optional["TransactionDate"]) -> bool:
        if other is None:
            raise ValidationError("Other transaction date cannot be null")
        return self.value > other.value

    def __str__(self) -> str:
        return self.value.isoformat()


def _to_decimal(value: Union[Decimal, int, str, None]) -> Decimal:
    if value is None:
        raise ValidationError(cannot_be_null("Amount"))
    if isinstance(value, (bool, float)):
        raise ValidationError(f"Amount must be a Decimal, int or str, got {type(value).__name__}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValidationError(f"Invalid amount: {value}") from e
    if not result.is_finite():
        raise ValidationError(f"Invalid amount: {value}")
    return result
