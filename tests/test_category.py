"""Tests for category management."""

from decimal import Decimal

import pytest

from duobalance.domain.defaults import COLOR_PALETTE, DEFAULT_CATEGORIES, palette_color
from duobalance.domain.entities import Payer
from duobalance.domain.errors import NotFoundError, ValidationError
from duobalance.domain.statistics import category_breakdown


def test_fresh_store_has_default_categories(category_service):
    assert category_service.list_categories() == list(DEFAULT_CATEGORIES)


def test_add_category_appends_with_cyclic_color(category_service):
    category = category_service.add_category("Viagens")

    categories = category_service.list_categories()
    assert categories[-1] == category
    assert category.name == "Viagens"
    # Six defaults already exist, so the palette wraps around to its first color
    assert category.color == COLOR_PALETTE[len(DEFAULT_CATEGORIES) % len(COLOR_PALETTE)]

    second = category_service.add_category("Saúde")
    assert second.color == palette_color(len(DEFAULT_CATEGORIES) + 1)
    assert category.id != second.id


def test_add_blank_category(category_service):
    with pytest.raises(ValidationError):
        category_service.add_category("   ")


def test_find_category_by_id_or_name(category_service):
    assert category_service.find_category("4").name == "Casa"
    assert category_service.find_category("lazer").id == "5"
    assert category_service.find_category("nothing") is None


def test_require_category(category_service):
    with pytest.raises(NotFoundError):
        category_service.require_category("nothing")


def test_delete_category(category_service):
    category_service.delete_category("6")

    assert "6" not in [c.id for c in category_service.list_categories()]


def test_delete_unknown_category(category_service):
    with pytest.raises(NotFoundError):
        category_service.delete_category("missing")


def test_delete_category_keeps_expenses(temp_db, category_service, expense_service, settlement_service):
    archived = expense_service.add_expense(Decimal("8"), Payer.RICARDO, category_id="2")
    settlement_service.settle()
    active = expense_service.add_expense(Decimal("5"), Payer.RAFAELA, category_id="2")

    category_service.delete_category("2")

    state = temp_db.load_state()
    assert [e.id for e in state.expenses] == [active.id]
    assert state.expenses[0].category_id == "2"
    assert state.expenses[0].amount == Decimal("5")
    assert state.batches[0].expenses[0].id == archived.id
    assert state.batches[0].expenses[0].category_id == "2"

    assert category_breakdown(state.all_expenses(), state.categories) == ()
    assert category_service.category_name("2") == "Uncategorized"


def test_category_name(category_service):
    assert category_service.category_name("1") == "Supermercado"
    assert category_service.category_name(None) == "Uncategorized"
