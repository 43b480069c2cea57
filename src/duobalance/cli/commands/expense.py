"""Expense commands."""

import click

from duobalance.cli.error_handling import handle_domain_error
from duobalance.cli.formatting import echo_expense_table, money, payer_name
from duobalance.domain.category import CategoryService
from duobalance.domain.entities import Payer
from duobalance.domain.errors import DomainError
from duobalance.domain.expense import ExpenseService
from duobalance.utils.amount_parser import parse_amount
from duobalance.utils.date_parser import parse_date


@click.group()
def expense_group():
    """Manage expenses of the open period."""
    pass


@expense_group.command("add")
@click.option("--amount", required=True, help="Amount paid (e.g., 12.50 or 12,50€)")
@click.option(
    "--payer",
    required=True,
    type=click.Choice([p.value for p in Payer], case_sensitive=False),
    help="Who paid",
)
@click.option("--date", "date_str", help="Expense date (YYYY-MM-DD, DD/MM/YYYY, 'today', 'yesterday')")
@click.option("--category", help="Category ID or name")
@click.option("--description", help="Description")
@click.pass_context
def add_expense(
    ctx,
    amount: str,
    payer: str,
    date_str: str | None,
    category: str | None,
    description: str | None,
):
    """Add an expense.

    Examples:
        duobalance expense add --amount 42.30 --payer Ricardo --category Supermercado
        duobalance expense add --amount 15 --payer Rafaela --date yesterday --description "Cinema"
    """
    db = ctx.obj["db"]
    expense_service = ExpenseService(db)
    category_service = CategoryService(db)

    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    expense_date = None
    if date_str:
        try:
            expense_date = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        category_id = None
        if category:
            category_id = category_service.require_category(category).id

        expense = expense_service.add_expense(
            amount=expense_amount,
            payer=payer,
            date=expense_date,
            category_id=category_id,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    state = db.load_state()
    click.echo(f"Added expense {expense.id}")
    click.echo(f"  Amount: {money(expense.amount)}")
    click.echo(f"  Paid by: {payer_name(state, expense.payer)}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Category: {category_service.category_name(expense.category_id)}")
    if expense.description:
        click.echo(f"  Description: {expense.description}")


@expense_group.command("list")
@click.pass_context
def list_expenses(ctx):
    """List expenses of the open period, newest first."""
    db = ctx.obj["db"]
    service = ExpenseService(db)

    expenses = service.list_expenses()
    if not expenses:
        click.echo("No open expenses.")
        return

    state = db.load_state()
    click.echo(f"\n{len(expenses)} open expense(s):")
    echo_expense_table(state, expenses)
    click.echo("-" * 100)
    click.echo(f"TOTAL {money(service.get_balance().total)}")


@expense_group.command("delete")
@click.argument("expense_id")
@click.pass_context
def delete_expense(ctx, expense_id: str):
    """Delete an expense of the open period.

    Examples:
        duobalance expense delete 3f2c9a...
    """
    db = ctx.obj["db"]
    service = ExpenseService(db)

    expense = service.get_expense(expense_id)
    if expense is None:
        click.echo(f"Error: Expense {expense_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm(f"Delete the expense of {money(expense.amount)} permanently?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_expense(expense_id)
        click.echo(f"Deleted expense {expense_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
