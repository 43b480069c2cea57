"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class StorageError(DomainError):
    """The store could not persist a change."""


def expense_not_found(expense_id: str) -> str:
    """Return message for missing active expense."""
    return f"Expense {expense_id} not found"


def batch_not_found(batch_id: str) -> str:
    """Return message for missing batch."""
    return f"Batch {batch_id} not found"


def category_not_found(category_id: str) -> str:
    """Return message for missing category by ID or name."""
    return f"Category '{category_id}' not found"


def unknown_payer(value: str) -> str:
    """Return message for a payer that is not one of the two identities."""
    return f"Unknown payer '{value}'"


def nothing_to_settle() -> str:
    """Return message when settling an empty period."""
    return "There are no active expenses to settle"


def non_positive_amount(amount) -> str:
    """Return message for an amount that is zero or negative."""
    return f"Amount must be positive, got {amount}"
