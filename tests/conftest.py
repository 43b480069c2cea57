"""Shared pytest fixtures for duobalance tests."""

import tempfile
import os
from datetime import date, datetime, timedelta, UTC
from decimal import Decimal
import pytest

from duobalance.database.factories import create_database
from duobalance.domain.category import CategoryService
from duobalance.domain.entities import Expense, Payer
from duobalance.domain.expense import ExpenseService
from duobalance.domain.maintenance import MaintenanceService
from duobalance.domain.settlement import SettlementService
from duobalance.domain.statistics import StatisticsService


def _make_store(backend: str):
    suffix = ".json" if backend == "json" else ".db"
    fd, store_path = tempfile.mkstemp(suffix=suffix)
    os.close(fd)
    os.unlink(store_path)

    db = create_database(backend=backend, store_path=store_path)
    # Store the path and backend for tests that need them
    db.store_path = store_path
    db.backend = backend
    db.connect()
    db.initialize_schema()
    return db


def _cleanup(db):
    db.disconnect()
    if os.path.exists(db.store_path):
        os.unlink(db.store_path)


@pytest.fixture(params=["json", "sqlite"])
def temp_db(request):
    """Create a temporary store for each backend."""
    db = _make_store(request.param)
    yield db
    _cleanup(db)


@pytest.fixture
def json_db():
    """Create a temporary JSON document store."""
    db = _make_store("json")
    yield db
    _cleanup(db)


@pytest.fixture
def sqlite_db():
    """Create a temporary SQLite store."""
    db = _make_store("sqlite")
    yield db
    _cleanup(db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary store."""
    return ExpenseService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary store."""
    return CategoryService(temp_db)


@pytest.fixture
def settlement_service(temp_db):
    """Create a SettlementService with a temporary store."""
    return SettlementService(temp_db)


@pytest.fixture
def statistics_service(temp_db):
    """Create a StatisticsService with a temporary store."""
    return StatisticsService(temp_db)


@pytest.fixture
def maintenance_service(temp_db):
    """Create a MaintenanceService with a temporary store."""
    return MaintenanceService(temp_db)


@pytest.fixture
def make_expense():
    """Build Expense entities with distinct, increasing creation times."""
    counter = {"n": 0}
    start = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)

    def _make(amount, payer=Payer.RICARDO, category_id="1", description=None):
        counter["n"] += 1
        n = counter["n"]
        return Expense(
            id=f"e{n}",
            amount=Decimal(str(amount)),
            payer=payer,
            date=date(2024, 3, 1),
            category_id=category_id,
            description=description,
            created_at=start + timedelta(seconds=n),
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def cli_args(temp_db):
    """Global CLI options pointing at the temporary store."""
    return ["--store-path", temp_db.store_path, "--backend", temp_db.backend]


@pytest.fixture
def frozen_clock(monkeypatch):
    """Make every new expense and batch share one creation time."""
    moment = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)
    monkeypatch.setattr("duobalance.domain.expense.now", lambda: moment)
    monkeypatch.setattr("duobalance.domain.settlement.now", lambda: moment)
    return moment
