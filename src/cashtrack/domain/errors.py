"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Input that can never produce a valid value object or entity."""


class InvalidStateError(DomainError):
    """Operation not permitted in the transaction's current status."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction not found with id: {transaction_id}"


def cannot_be_blank(field: str) -> str:
    """Return message for a required text field that is missing or blank."""
    return f"{field} cannot be null or empty"


def cannot_be_null(field: str) -> str:
    """Return message for a required field that is missing."""
    return f"{field} cannot be null"


def requires_account(type_name: str, role: str) -> str:
    """Return message when a transaction type is missing an account role."""
    return f"{type_name} requires a {role} account"


def must_not_have_account(type_name: str, role: str) -> str:
    """Return message when a transaction type carries a forbidden account role."""
    return f"{type_name} must not have a {role} account"


def cannot_link(type_name: str, target: str) -> str:
    """Return message when a transaction type cannot be linked to a record."""
    return f"{type_name} cannot be linked to an {target}"


def invalid_transition(current: str, target: str) -> str:
    """Return message for an illegal status transition."""
    return f"Cannot transition from {current} to {target}"


def invalid_choice(kind: str, value: str, choices: list[str]) -> str:
    """Return message for text that matches no enumeration member."""
    return f"Invalid {kind}: {value}. Must be one of: [{', '.join(choices)}]"
