"""Whole-state operations: reset, export and import."""

import json
from pathlib import Path

import structlog

from duobalance.database.base import Database
from duobalance.database.documents import STORAGE_KEY, state_from_document, state_to_document
from duobalance.domain.defaults import initial_state
from duobalance.domain.entities import AppState
from duobalance.domain.errors import StorageError, ValidationError

logger = structlog.get_logger(__name__)


class MaintenanceService:
    """Service for operations that touch the whole ledger."""

    def __init__(self, db: Database):
        """Initialize maintenance service.

        Args:
            db: Database instance
        """
        self.db = db

    def reset(self) -> AppState:
        """Delete all expenses and batches and restore the default categories."""
        state = initial_state()
        self.db.replace_state(state)
        logger.info("state_reset")
        return state

    def export_state(self, path: str | Path) -> AppState:
        """Write the full state to ``path`` as a JSON document.

        Raises:
            StorageError: If the file cannot be written
        """
        state = self.db.load_state()
        payload = json.dumps({STORAGE_KEY: state_to_document(state)}, ensure_ascii=False, indent=2)
        try:
            Path(path).write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e
        logger.info("state_exported", path=str(path))
        return state

    def import_state(self, path: str | Path) -> AppState:
        """Replace the current state with the JSON document at ``path``.

        Unlike loading the store itself, a malformed file is an error here
        rather than a silent fallback.

        Raises:
            StorageError: If the file cannot be read
            ValidationError: If the document is malformed
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"), parse_float=str)
        except OSError as e:
            raise StorageError(f"Could not read {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ValidationError(f"{path} is not valid JSON: {e}") from e

        document = raw.get(STORAGE_KEY, raw) if isinstance(raw, dict) else raw
        state = state_from_document(document)
        self.db.replace_state(state)
        logger.info(
            "state_imported",
            path=str(path),
            expenses=len(state.expenses),
            batches=len(state.batches),
        )
        return state
