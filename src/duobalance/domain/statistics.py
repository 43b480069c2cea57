"""Statistics domain service."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from duobalance.database.base import Database
from duobalance.domain.balance import calculate_balance
from duobalance.domain.entities import (
    AppState,
    Batch,
    Category,
    CategoryTotal,
    Expense,
    PeriodStats,
    Statistics,
)

CURRENT_PERIOD_NAME = "Open period"


def category_breakdown(
    expenses: Iterable[Expense], categories: Sequence[Category]
) -> tuple[CategoryTotal, ...]:
    """Sum amounts per category, highest total first.

    Expenses without a category, or whose category was deleted, are left
    out. Categories with nothing spent are dropped. Ties keep the order of
    the category list.
    """
    totals: dict[Optional[str], Decimal] = defaultdict(Decimal)
    for expense in expenses:
        totals[expense.category_id] += expense.amount

    breakdown = [
        CategoryTotal(category=category, total=totals.get(category.id, Decimal("0")))
        for category in categories
    ]
    breakdown = [item for item in breakdown if item.total > 0]
    breakdown.sort(key=lambda item: item.total, reverse=True)
    return tuple(breakdown)


def percentage(part: Decimal, whole: Decimal) -> Decimal:
    """Share of ``part`` in ``whole`` as a percentage; 0 when ``whole`` is 0."""
    if not whole:
        return Decimal("0")
    return part / whole * 100


class StatisticsService:
    """Service for building ledger statistics."""

    def __init__(self, db: Database):
        """Initialize statistics service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_statistics(self) -> Statistics:
        """Load the state and build statistics for it."""
        return self.build_statistics(self.db.load_state())

    def build_statistics(self, state: AppState) -> Statistics:
        """Build statistics for the active period, each batch and all history.

        Args:
            state: Application state

        Returns:
            Statistics for the state
        """
        current = self.build_current_period(state)
        batches = tuple(self.build_batch_period(batch, state.categories) for batch in state.batches)

        everything = state.all_expenses()
        all_time = calculate_balance(everything)

        return Statistics(
            current=current,
            batches=batches,
            global_categories=category_breakdown(everything, state.categories),
            ricardo_all_time=all_time.total_ricardo,
            rafaela_all_time=all_time.total_rafaela,
        )

    def build_current_period(self, state: AppState) -> PeriodStats:
        """Statistics for the active (not yet settled) expenses."""
        balance = calculate_balance(state.expenses)
        return PeriodStats(
            name=CURRENT_PERIOD_NAME,
            total=balance.total,
            total_ricardo=balance.total_ricardo,
            total_rafaela=balance.total_rafaela,
            categories=category_breakdown(state.expenses, state.categories),
        )

    def build_batch_period(self, batch: Batch, categories: Sequence[Category]) -> PeriodStats:
        """Statistics for one settled batch, using the totals it recorded."""
        return PeriodStats(
            name=batch.name,
            total=batch.total_ricardo + batch.total_rafaela,
            total_ricardo=batch.total_ricardo,
            total_rafaela=batch.total_rafaela,
            categories=category_breakdown(batch.expenses, categories),
            batch_id=batch.id,
            settled_at=batch.settled_at,
        )
