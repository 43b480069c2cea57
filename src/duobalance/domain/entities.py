"""Domain model entities for duobalance.

These are pure data classes representing the ledger, independent of how a
store lays them out. Both the JSON document store and the relational store
map their records onto these types.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class Payer(str, Enum):
    """The two fixed identities that pay for expenses."""

    RICARDO = "Ricardo"
    RAFAELA = "Rafaela"


@dataclass(frozen=True)
class Category:
    """Expense category domain entity."""

    id: str
    name: str
    color: str


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: str
    amount: Decimal
    payer: Payer
    date: date
    category_id: Optional[str]
    description: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Batch:
    """Settled period: a snapshot of expenses and the balance at settle time."""

    id: str
    name: str
    expenses: tuple[Expense, ...]
    settled_at: datetime
    total_ricardo: Decimal
    total_rafaela: Decimal
    balance: Decimal
    payer_who_owes: Optional[Payer]


@dataclass(frozen=True)
class AppState:
    """Aggregate root of the ledger.

    Every expense lives either in ``expenses`` (the active period) or in the
    snapshot of exactly one batch.
    """

    expenses: tuple[Expense, ...] = ()
    batches: tuple[Batch, ...] = ()
    categories: tuple[Category, ...] = ()
    users: dict[Payer, str] = field(
        default_factory=lambda: {payer: payer.value for payer in Payer}
    )

    def with_changes(self, **changes) -> "AppState":
        """Return a copy of the state with the given fields replaced."""
        return replace(self, **changes)

    def find_batch(self, batch_id: str) -> Optional[Batch]:
        for batch in self.batches:
            if batch.id == batch_id:
                return batch
        return None

    def find_category(self, category_id: Optional[str]) -> Optional[Category]:
        if category_id is None:
            return None
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def all_expenses(self) -> tuple[Expense, ...]:
        """Active expenses followed by every archived expense."""
        archived = tuple(e for batch in self.batches for e in batch.expenses)
        return self.expenses + archived


@dataclass(frozen=True)
class Balance:
    """Balance calculator output for a set of expenses."""

    total_ricardo: Decimal
    total_rafaela: Decimal
    diff: Decimal
    balance_owed: Decimal
    who_owes: Optional[Payer]

    @property
    def total(self) -> Decimal:
        return self.total_ricardo + self.total_rafaela

    def total_for(self, payer: Payer) -> Decimal:
        if payer == Payer.RICARDO:
            return self.total_ricardo
        return self.total_rafaela


@dataclass(frozen=True)
class CategoryTotal:
    """Sum of expense amounts for one category."""

    category: Category
    total: Decimal


@dataclass(frozen=True)
class PeriodStats:
    """Statistics for one period: the active one or a settled batch."""

    name: str
    total: Decimal
    total_ricardo: Decimal
    total_rafaela: Decimal
    categories: tuple[CategoryTotal, ...]
    batch_id: Optional[str] = None
    settled_at: Optional[datetime] = None


@dataclass(frozen=True)
class Statistics:
    """Statistics for the active period, each batch, and all recorded history."""

    current: PeriodStats
    batches: tuple[PeriodStats, ...]
    global_categories: tuple[CategoryTotal, ...]
    ricardo_all_time: Decimal
    rafaela_all_time: Decimal

    @property
    def total_all_time(self) -> Decimal:
        return self.ricardo_all_time + self.rafaela_all_time
