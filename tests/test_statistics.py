"""Tests for the statistics aggregator."""

from datetime import datetime, UTC
from decimal import Decimal

from duobalance.domain.defaults import DEFAULT_CATEGORIES
from duobalance.domain.entities import AppState, Batch, Category, Payer
from duobalance.domain.statistics import (
    CURRENT_PERIOD_NAME,
    StatisticsService,
    category_breakdown,
    percentage,
)

SUPERMERCADO, COMBUSTIVEL, PRENDAS, CASA, LAZER, OUTROS = DEFAULT_CATEGORIES


def _names(breakdown):
    return [item.category.name for item in breakdown]


def test_breakdown_sorted_descending_and_drops_empty(make_expense):
    expenses = [
        make_expense(10, category_id="1"),
        make_expense(50, category_id="4"),
        make_expense(5, category_id="1"),
    ]

    breakdown = category_breakdown(expenses, DEFAULT_CATEGORIES)

    assert _names(breakdown) == ["Casa", "Supermercado"]
    assert [item.total for item in breakdown] == [Decimal("50"), Decimal("15")]


def test_breakdown_ties_keep_category_order(make_expense):
    expenses = [make_expense(20, category_id="5"), make_expense(20, category_id="2")]

    breakdown = category_breakdown(expenses, DEFAULT_CATEGORIES)

    assert _names(breakdown) == ["Combustível", "Lazer"]


def test_breakdown_excludes_uncategorized_and_dangling(make_expense):
    expenses = [
        make_expense(10, category_id=None),
        make_expense(20, category_id="deleted-category"),
        make_expense(30, category_id="3"),
    ]

    breakdown = category_breakdown(expenses, DEFAULT_CATEGORIES)

    assert _names(breakdown) == ["Prendas"]


def test_breakdown_of_nothing_is_empty():
    assert category_breakdown([], DEFAULT_CATEGORIES) == ()


def test_percentage_guards_zero_whole():
    assert percentage(Decimal("0"), Decimal("0")) == 0
    assert percentage(Decimal("5"), Decimal("0")) == 0
    assert percentage(Decimal("25"), Decimal("100")) == Decimal("25")
    assert percentage(Decimal("1"), Decimal("4")) == Decimal("25")


def test_build_statistics(json_db, make_expense):
    archived = [make_expense(40, Payer.RICARDO, "4"), make_expense(10, Payer.RAFAELA, "1")]
    batch = Batch(
        id="b1",
        name="Settlement 01/03/2024",
        expenses=tuple(archived),
        settled_at=datetime(2024, 3, 2, tzinfo=UTC),
        total_ricardo=Decimal("40"),
        total_rafaela=Decimal("10"),
        balance=Decimal("15"),
        payer_who_owes=Payer.RAFAELA,
    )
    active = [make_expense(6, Payer.RAFAELA, "1"), make_expense(4, Payer.RICARDO, None)]
    state = AppState(expenses=tuple(active), batches=(batch,), categories=DEFAULT_CATEGORIES)

    stats = StatisticsService(json_db).build_statistics(state)

    assert stats.current.name == CURRENT_PERIOD_NAME
    assert stats.current.total == Decimal("10")
    assert stats.current.total_ricardo == Decimal("4")
    assert stats.current.total_rafaela == Decimal("6")
    assert _names(stats.current.categories) == ["Supermercado"]

    assert len(stats.batches) == 1
    batch_stats = stats.batches[0]
    assert batch_stats.batch_id == "b1"
    assert batch_stats.name == "Settlement 01/03/2024"
    assert batch_stats.total == Decimal("50")
    assert _names(batch_stats.categories) == ["Casa", "Supermercado"]

    assert stats.ricardo_all_time == Decimal("44")
    assert stats.rafaela_all_time == Decimal("16")
    assert stats.total_all_time == Decimal("60")
    assert _names(stats.global_categories) == ["Casa", "Supermercado"]
    assert stats.global_categories[1].total == Decimal("16")


def test_uncategorized_counted_in_payer_totals_only(json_db, make_expense):
    category = Category(id="x", name="Viagens", color="blue")
    state = AppState(
        expenses=(make_expense(12, Payer.RAFAELA, "x"), make_expense(8, Payer.RAFAELA, "gone")),
        categories=(category,),
    )

    stats = StatisticsService(json_db).build_statistics(state)

    assert stats.rafaela_all_time == Decimal("20")
    assert [item.total for item in stats.global_categories] == [Decimal("12")]


def test_get_statistics_reads_store(statistics_service, expense_service):
    expense_service.add_expense(Decimal("30"), Payer.RICARDO, category_id="2")

    stats = statistics_service.get_statistics()

    assert stats.current.total == Decimal("30")
    assert _names(stats.global_categories) == ["Combustível"]
    assert stats.batches == ()
