"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic: amounts stay Decimal, timestamps
are epoch milliseconds in the tables and aware datetimes in the domain.
"""

from duobalance.database.documents import NOBODY
from duobalance.database.models import (
    Batch as ORMBatch,
    Category as ORMCategory,
    Expense as ORMExpense,
)
from duobalance.domain import entities as domain
from duobalance.utils.timestamps import from_millis, to_millis


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        color=orm_category.color,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        amount=orm_expense.amount,
        payer=domain.Payer(orm_expense.payer),
        date=orm_expense.date,
        category_id=orm_expense.category_id,
        description=orm_expense.description,
        created_at=from_millis(orm_expense.created_at),
    )


def batch_to_domain(orm_batch: ORMBatch, expenses: list[ORMExpense]) -> domain.Batch:
    """Convert SQLAlchemy Batch model and its expenses to a domain Batch entity."""
    who_owes = orm_batch.payer_who_owes
    return domain.Batch(
        id=orm_batch.id,
        name=orm_batch.name,
        expenses=tuple(expense_to_domain(e) for e in expenses),
        settled_at=from_millis(orm_batch.settled_at),
        total_ricardo=orm_batch.total_ricardo,
        total_rafaela=orm_batch.total_rafaela,
        balance=orm_batch.balance,
        payer_who_owes=None if who_owes == NOBODY else domain.Payer(who_owes),
    )


def category_to_orm(category: domain.Category, position: int) -> ORMCategory:
    """Convert domain Category entity to a new SQLAlchemy row."""
    return ORMCategory(id=category.id, name=category.name, color=category.color, position=position)


def expense_to_orm(expense: domain.Expense, seq: int, batch_id: str | None = None) -> ORMExpense:
    """Convert domain Expense entity to a new SQLAlchemy row."""
    return ORMExpense(
        id=expense.id,
        amount=expense.amount,
        payer=expense.payer.value,
        date=expense.date,
        category_id=expense.category_id,
        description=expense.description,
        created_at=to_millis(expense.created_at),
        seq=seq,
        batch_id=batch_id,
    )


def batch_to_orm(batch: domain.Batch, seq: int) -> ORMBatch:
    """Convert domain Batch entity to a new SQLAlchemy row (without expenses)."""
    return ORMBatch(
        id=batch.id,
        name=batch.name,
        settled_at=to_millis(batch.settled_at),
        total_ricardo=batch.total_ricardo,
        total_rafaela=batch.total_rafaela,
        balance=batch.balance,
        payer_who_owes=batch.payer_who_owes.value if batch.payer_who_owes else NOBODY,
        seq=seq,
    )
