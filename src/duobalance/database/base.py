"""Abstract database interface."""

from abc import ABC, abstractmethod

# Import entities directly to avoid circular import through domain/__init__.py
from duobalance.domain.entities import AppState, Batch, Category, Expense


class Database(ABC):
    """Abstract store for the duobalance ledger.

    Every mutating operation is applied wholly or not at all.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Create the store if needed and seed the default categories."""
        pass

    @abstractmethod
    def load_state(self) -> AppState:
        """Load the full application state snapshot."""
        pass

    @abstractmethod
    def replace_state(self, state: AppState) -> None:
        """Overwrite the whole store with ``state``."""
        pass

    # Expense operations
    @abstractmethod
    def add_expense(self, expense: Expense) -> None:
        """Add an expense to the active period."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: str) -> None:
        """Delete an active expense. Raises NotFoundError if it is not active."""
        pass

    # Batch operations
    @abstractmethod
    def create_batch(self, batch: Batch) -> None:
        """Store ``batch`` and move every active expense into it."""
        pass

    @abstractmethod
    def delete_batch(self, batch_id: str) -> None:
        """Release a batch's expenses to the active period and remove it.

        Raises NotFoundError if the batch does not exist.
        """
        pass

    # Category operations
    @abstractmethod
    def add_category(self, category: Category) -> None:
        """Append a category."""
        pass

    @abstractmethod
    def delete_category(self, category_id: str) -> None:
        """Remove a category, leaving expenses that reference it untouched.

        Raises NotFoundError if the category does not exist.
        """
        pass
