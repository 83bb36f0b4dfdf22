"""Transaction type and status enumerations.

Both enumerations are closed sets. The per-variant behavior is read from the
rule tables below so that each table is the single place the rules live.
"""

from enum import Enum
from typing import NamedTuple, Optional

from cashtrack.domain.errors import ValidationError, cannot_be_null, invalid_choice


class TransactionType(Enum):
    """Kind of money movement."""

    TRANSFER = "TRANSFER"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    PAYMENT = "PAYMENT"
    REFUND = "REFUND"

    def __str__(self) -> str:
        return self.name

    @property
    def _rules(self) -> "_TypeRules":
        return _TYPE_RULES[self]

    def requires_source_account(self) -> bool:
        """Whether money must leave a known account."""
        return self._rules.source_required

    def requires_destination_account(self) -> bool:
        """Whether money must arrive in a known account."""
        return self._rules.destination_required

    def can_link_to_expense(self) -> bool:
        return self._rules.expense_link

    def can_link_to_income(self) -> bool:
        return self._rules.income_link

    @classmethod
    def from_string(cls, value: Optional[str]) -> "TransactionType":
        """Parse a type name, ignoring surrounding whitespace and case.

        Raises:
            ValidationError: If value is None or names no known type
        """
        return _parse_member(cls, value, "transaction type")


class TransactionStatus(Enum):
    """Lifecycle state of a transaction.

    PENDING is the only non-terminal state.
    """

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"

    def __str__(self) -> str:
        return self.name

    def can_transition_to(self, target: Optional["TransactionStatus"]) -> bool:
        """Return True if moving from this status to target is allowed."""
        return target in _ALLOWED_TRANSITIONS[self]

    def is_final(self) -> bool:
        """Return True for terminal states."""
        return self is not TransactionStatus.PENDING

    @classmethod
    def from_string(cls, value: Optional[str]) -> "TransactionStatus":
        """Parse a status name, ignoring surrounding whitespace and case.

        Raises:
            ValidationError: If value is None or names no known status
        """
        return _parse_member(cls, value, "transaction status")


class _TypeRules(NamedTuple):
    source_required: bool
    destination_required: bool
    expense_link: bool
    income_link: bool


_TYPE_RULES: dict[TransactionType, _TypeRules] = {
    TransactionType.TRANSFER: _TypeRules(True, True, False, False),
    TransactionType.DEPOSIT: _TypeRules(False, True, False, False),
    TransactionType.WITHDRAWAL: _TypeRules(True, False, False, False),
    TransactionType.PAYMENT: _TypeRules(True, False, True, False),
    TransactionType.REFUND: _TypeRules(False, True, False, True),
}

_ALLOWED_TRANSITIONS: dict[TransactionStatus, frozenset[TransactionStatus]] = {
    TransactionStatus.PENDING: frozenset(
        {
            TransactionStatus.COMPLETED,
            TransactionStatus.FAILED,
            TransactionStatus.CANCELLED,
        }
    ),
    TransactionStatus.COMPLETED: frozenset(),
    TransactionStatus.FAILED: frozenset(),
    TransactionStatus.CANCELLED: frozenset(),
}


def _parse_member(enum_cls, value: Optional[str], kind: str):
    if value is None:
        raise ValidationError(cannot_be_null(kind.capitalize()))
    normalized = value.strip().upper()
    member = enum_cls.__members__.get(normalized)
    if member is None:
        raise ValidationError(invalid_choice(kind, value, list(enum_cls.__members__)))
    return member
