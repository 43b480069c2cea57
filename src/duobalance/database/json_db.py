"""JSON document store.

The whole application state is kept as a single JSON document under a fixed
key, read wholesale on load and rewritten wholesale on every change.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog

from duobalance.database.base import Database
from duobalance.database.documents import STORAGE_KEY, state_from_document, state_to_document
from duobalance.domain.defaults import initial_state
from duobalance.domain.entities import AppState, Batch, Category, Expense
from duobalance.domain.errors import (
    NotFoundError,
    StorageError,
    ValidationError,
    batch_not_found,
    category_not_found,
    expense_not_found,
)

logger = structlog.get_logger(__name__)


class JSONDatabase(Database):
    """Database implementation backed by one JSON file."""

    def __init__(self, path: str | Path):
        """Initialize JSON database.

        Args:
            path: Path to the JSON document file
        """
        self.path = Path(path)

    def connect(self) -> None:
        """Connect to the store."""
        # Every operation reads the file, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    def initialize_schema(self) -> None:
        """Write the initial state if the document does not exist yet."""
        if not self.path.exists() or self.path.stat().st_size == 0:
            self._write(initial_state())

    def _read_document(self) -> Any:
        with open(self.path, encoding="utf-8") as f:
            raw = json.load(f, parse_float=str)
        if not isinstance(raw, dict) or STORAGE_KEY not in raw:
            raise ValidationError(f"Missing '{STORAGE_KEY}' entry")
        return raw[STORAGE_KEY]

    def load_state(self) -> AppState:
        """Load the state, falling back to the initial state if unreadable."""
        if not self.path.exists():
            return initial_state()
        try:
            return state_from_document(self._read_document())
        except (OSError, ValueError) as e:
            logger.warning("state_unreadable", path=str(self.path), error=str(e))
            return initial_state()

    def _write(self, state: AppState) -> None:
        payload = json.dumps({STORAGE_KEY: state_to_document(state)}, ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".duobalance-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Could not save data to {self.path}: {e}") from e

    def replace_state(self, state: AppState) -> None:
        """Overwrite the whole store with ``state``."""
        self._write(state)

    # Expense operations
    def add_expense(self, expense: Expense) -> None:
        """Add an expense to the active period."""
        state = self.load_state()
        self._write(state.with_changes(expenses=(expense,) + state.expenses))

    def delete_expense(self, expense_id: str) -> None:
        """Delete an active expense."""
        state = self.load_state()
        remaining = tuple(e for e in state.expenses if e.id != expense_id)
        if len(remaining) == len(state.expenses):
            raise NotFoundError(expense_not_found(expense_id))
        self._write(state.with_changes(expenses=remaining))

    # Batch operations
    def create_batch(self, batch: Batch) -> None:
        """Store ``batch`` and clear the active period."""
        state = self.load_state()
        self._write(state.with_changes(expenses=(), batches=(batch,) + state.batches))

    def delete_batch(self, batch_id: str) -> None:
        """Release a batch's expenses to the active period and remove it."""
        state = self.load_state()
        batch = state.find_batch(batch_id)
        if batch is None:
            raise NotFoundError(batch_not_found(batch_id))

        expenses = sorted(batch.expenses + state.expenses, key=lambda e: e.created_at, reverse=True)
        self._write(
            state.with_changes(
                expenses=tuple(expenses),
                batches=tuple(b for b in state.batches if b.id != batch_id),
            )
        )

    # Category operations
    def add_category(self, category: Category) -> None:
        """Append a category."""
        state = self.load_state()
        self._write(state.with_changes(categories=state.categories + (category,)))

    def delete_category(self, category_id: str) -> None:
        """Remove a category."""
        state = self.load_state()
        if state.find_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))
        self._write(
            state.with_changes(categories=tuple(c for c in state.categories if c.id != category_id))
        )
