"""Output formatting helpers shared by commands."""

from decimal import Decimal
from typing import Optional

import click

from duobalance.domain.entities import AppState, Expense, Payer
from duobalance.domain.statistics import percentage

BAR_WIDTH = 20


def money(amount: Decimal) -> str:
    """Format an amount in euros."""
    return f"{amount:,.2f}€"


def payer_name(state: AppState, payer: Optional[Payer]) -> str:
    """Display name of a payer."""
    if payer is None:
        return "Nobody"
    return state.users.get(payer, payer.value)


def share_bar(part: Decimal, whole: Decimal, width: int = BAR_WIDTH) -> str:
    """Text bar showing the share of ``part`` in ``whole`` with its percentage."""
    pct = percentage(part, whole)
    filled = int(round(pct / 100 * width))
    return f"[{'#' * filled}{'.' * (width - filled)}] {pct:5.1f}%"


def echo_expense_table(state: AppState, expenses: list[Expense] | tuple[Expense, ...]) -> None:
    """Print expenses as a compact table."""
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<34} {'Date':<12} {'Amount':>12} {'Payer':<10} {'Category':<14} {'Description':<16}"
    )
    click.echo("-" * 100)
    for expense in expenses:
        category = state.find_category(expense.category_id)
        category_name = category.name if category else "Uncategorized"
        click.echo(
            f"{expense.id:<34} {str(expense.date):<12} {money(expense.amount):>12} "
            f"{payer_name(state, expense.payer):<10} {category_name[:14]:<14} "
            f"{(expense.description or '')[:16]:<16}"
        )
