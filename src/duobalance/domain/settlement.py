"""Settle and revert domain service."""

import uuid
from datetime import datetime
from typing import Optional

import structlog

from duobalance.database.base import Database
from duobalance.domain.balance import calculate_balance
from duobalance.domain.entities import Batch
from duobalance.domain.errors import NotFoundError, ValidationError, batch_not_found, nothing_to_settle
from duobalance.utils.timestamps import now

logger = structlog.get_logger(__name__)


def default_batch_name(settled_at: datetime) -> str:
    """Batch name derived from the settlement date."""
    return f"Settlement {settled_at:%d/%m/%Y}"


class SettlementService:
    """Service for archiving the active period into batches and undoing it."""

    def __init__(self, db: Database):
        """Initialize settlement service.

        Args:
            db: Database instance
        """
        self.db = db

    def settle(self, name: Optional[str] = None, settled_at: Optional[datetime] = None) -> Batch:
        """Archive every active expense into a new batch.

        The batch records the balance of the active period at this instant.
        Afterwards the active period is empty and the batch is the newest one.

        Args:
            name: Batch name (defaults to one derived from the settlement date)
            settled_at: Settlement time (defaults to now)

        Returns:
            The created batch

        Raises:
            ValidationError: If there are no active expenses
        """
        state = self.db.load_state()
        if not state.expenses:
            raise ValidationError(nothing_to_settle())

        settled_at = settled_at or now()
        balance = calculate_balance(state.expenses)
        batch = Batch(
            id=uuid.uuid4().hex,
            name=(name or "").strip() or default_batch_name(settled_at),
            expenses=state.expenses,
            settled_at=settled_at,
            total_ricardo=balance.total_ricardo,
            total_rafaela=balance.total_rafaela,
            balance=balance.balance_owed,
            payer_who_owes=balance.who_owes,
        )
        self.db.create_batch(batch)
        logger.info(
            "batch_settled",
            batch_id=batch.id,
            expenses=len(batch.expenses),
            balance=str(batch.balance),
        )
        return batch

    def revert(self, batch_id: str) -> Batch:
        """Return a batch's expenses to the active period and remove the batch.

        Args:
            batch_id: Batch ID

        Returns:
            The removed batch

        Raises:
            NotFoundError: If the batch doesn't exist
        """
        batch = self.get_batch(batch_id)
        if batch is None:
            raise NotFoundError(batch_not_found(batch_id))

        self.db.delete_batch(batch_id)
        logger.info("batch_reverted", batch_id=batch_id, expenses=len(batch.expenses))
        return batch

    def get_batch(self, batch_id: str) -> Optional[Batch]:
        """Get batch by ID.

        Returns:
            Batch or None if not found
        """
        return self.db.load_state().find_batch(batch_id)

    def list_batches(self) -> list[Batch]:
        """List batches, newest first."""
        return list(self.db.load_state().batches)
