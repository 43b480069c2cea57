"""Expense domain service."""

import uuid
from datetime import date as date_type
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

import structlog

from duobalance.database.base import Database
from duobalance.domain.balance import calculate_balance
from duobalance.domain.entities import Balance, Expense, Payer
from duobalance.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    expense_not_found,
    non_positive_amount,
    unknown_payer,
)
from duobalance.utils.timestamps import now

logger = structlog.get_logger(__name__)

CENT = Decimal("0.01")


def resolve_payer(value: str | Payer) -> Payer:
    """Resolve a payer from an enum member or a case-insensitive name.

    Raises:
        ValidationError: If the value names neither payer
    """
    if isinstance(value, Payer):
        return value
    for payer in Payer:
        if value.strip().lower() in (payer.value.lower(), payer.name.lower()):
            return payer
    raise ValidationError(unknown_payer(value))


class ExpenseService:
    """Service for managing active expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_expense(
        self,
        amount: Decimal,
        payer: str | Payer,
        date: Optional[date_type] = None,
        category_id: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Expense:
        """Add an expense to the active period.

        Args:
            amount: Amount paid; must be positive, rounded to cents
            payer: Who paid
            date: Expense date (defaults to today)
            category_id: Optional category ID
            description: Optional description

        Returns:
            The created expense

        Raises:
            ValidationError: If the amount is not positive or the payer is unknown
            NotFoundError: If the category doesn't exist
        """
        amount = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
        if amount <= 0:
            raise ValidationError(non_positive_amount(amount))

        resolved_payer = resolve_payer(payer)

        if category_id is not None:
            state = self.db.load_state()
            if state.find_category(category_id) is None:
                raise NotFoundError(category_not_found(category_id))

        expense = Expense(
            id=uuid.uuid4().hex,
            amount=amount,
            payer=resolved_payer,
            date=date or date_type.today(),
            category_id=category_id,
            description=(description or "").strip() or None,
            created_at=now(),
        )
        self.db.add_expense(expense)
        logger.info(
            "expense_added",
            expense_id=expense.id,
            amount=str(expense.amount),
            payer=expense.payer.value,
        )
        return expense

    def get_expense(self, expense_id: str) -> Optional[Expense]:
        """Get an active expense by ID.

        Returns:
            Expense or None if no active expense has this ID
        """
        for expense in self.list_expenses():
            if expense.id == expense_id:
                return expense
        return None

    def delete_expense(self, expense_id: str) -> None:
        """Delete an active expense.

        Raises:
            NotFoundError: If no active expense has this ID
        """
        if self.get_expense(expense_id) is None:
            raise NotFoundError(expense_not_found(expense_id))
        self.db.delete_expense(expense_id)
        logger.info("expense_deleted", expense_id=expense_id)

    def list_expenses(self) -> list[Expense]:
        """List active expenses, newest first."""
        return list(self.db.load_state().expenses)

    def get_balance(self) -> Balance:
        """Balance of the active period."""
        return calculate_balance(self.db.load_state().expenses)
