"""Tests for database mappers."""

from datetime import date, datetime, UTC
from decimal import Decimal

from duobalance.database.mappers import (
    batch_to_domain,
    batch_to_orm,
    category_to_domain,
    category_to_orm,
    expense_to_domain,
    expense_to_orm,
)
from duobalance.database.models import (
    Batch as ORMBatch,
    Category as ORMCategory,
    Expense as ORMExpense,
)
from duobalance.domain.entities import Batch, Category, Expense, Payer

CREATED_MS = 1709662930512
CREATED_AT = datetime(2024, 3, 5, 18, 22, 10, 512000, tzinfo=UTC)


def _orm_expense(**overrides):
    values = dict(
        id="e1",
        amount=Decimal("12.50"),
        payer="Rafaela",
        date=date(2024, 3, 5),
        category_id="1",
        description=None,
        created_at=CREATED_MS,
        batch_id=None,
    )
    values.update(overrides)
    return ORMExpense(**values)


class TestCategoryMapper:
    """Tests for Category mapper."""

    def test_category_to_domain(self):
        """Test converting ORM Category to domain Category."""
        orm_category = ORMCategory(id="1", name="Supermercado", color="blue", position=0)
        domain_category = category_to_domain(orm_category)

        assert isinstance(domain_category, Category)
        assert domain_category == Category(id="1", name="Supermercado", color="blue")

    def test_category_to_orm_keeps_position(self):
        orm_category = category_to_orm(Category(id="7", name="Viagens", color="blue"), position=6)
        assert orm_category.position == 6
        assert orm_category.name == "Viagens"


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        """Test converting ORM Expense to domain Expense."""
        domain_expense = expense_to_domain(_orm_expense(description="Pão"))

        assert isinstance(domain_expense, Expense)
        assert domain_expense.payer == Payer.RAFAELA
        assert domain_expense.amount == Decimal("12.50")
        assert domain_expense.description == "Pão"
        assert domain_expense.created_at == CREATED_AT

    def test_expense_to_orm(self):
        expense = expense_to_domain(_orm_expense())
        orm_expense = expense_to_orm(expense, seq=3, batch_id="b1")

        assert orm_expense.payer == "Rafaela"
        assert orm_expense.created_at == CREATED_MS
        assert orm_expense.seq == 3
        assert orm_expense.batch_id == "b1"


class TestBatchMapper:
    """Tests for Batch mapper."""

    def test_batch_to_domain(self):
        """Test converting ORM Batch with its expenses to domain Batch."""
        orm_batch = ORMBatch(
            id="b1",
            name="Settlement 05/03/2024",
            settled_at=CREATED_MS,
            total_ricardo=Decimal("0"),
            total_rafaela=Decimal("12.50"),
            balance=Decimal("6.25"),
            payer_who_owes="Ricardo",
        )
        domain_batch = batch_to_domain(orm_batch, [_orm_expense(batch_id="b1")])

        assert isinstance(domain_batch, Batch)
        assert domain_batch.settled_at == CREATED_AT
        assert domain_batch.payer_who_owes == Payer.RICARDO
        assert [e.id for e in domain_batch.expenses] == ["e1"]

    def test_nobody_owes(self):
        batch = Batch(
            id="b2",
            name="Even",
            expenses=(),
            settled_at=CREATED_AT,
            total_ricardo=Decimal("5"),
            total_rafaela=Decimal("5"),
            balance=Decimal("0"),
            payer_who_owes=None,
        )

        orm_batch = batch_to_orm(batch, seq=0)

        assert orm_batch.payer_who_owes == "None"
        assert batch_to_domain(orm_batch, []).payer_who_owes is None
