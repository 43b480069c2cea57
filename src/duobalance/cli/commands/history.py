"""Settle and history commands."""

import click

from duobalance.cli.error_handling import handle_domain_error
from duobalance.cli.formatting import echo_expense_table, money, payer_name
from duobalance.domain.balance import calculate_balance
from duobalance.domain.entities import Payer
from duobalance.domain.errors import DomainError
from duobalance.domain.settlement import SettlementService


@click.command("settle")
@click.option("--name", help="Batch name (defaults to 'Settlement DD/MM/YYYY')")
@click.pass_context
def settle(ctx, name: str | None):
    """Close the open period and archive its expenses into the history."""
    db = ctx.obj["db"]
    service = SettlementService(db)

    state = db.load_state()
    if not state.expenses:
        click.echo("Nothing to settle: there are no open expenses.")
        return

    totals = calculate_balance(state.expenses)
    if totals.who_owes is not None:
        message = (
            f"Confirm that {payer_name(state, totals.who_owes)} has paid "
            f"{money(totals.balance_owed)}? The open expenses will be archived."
        )
    else:
        message = "Close the open period and archive its expenses?"

    if not click.confirm(message):
        click.echo("Settlement cancelled.")
        return

    try:
        batch = service.settle(name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Settled '{batch.name}' (ID: {batch.id}) with {len(batch.expenses)} expense(s)")


@click.group()
def history_group():
    """Review and revert settled periods."""
    pass


@history_group.command("list")
@click.pass_context
def list_batches(ctx):
    """List settled periods, newest first."""
    db = ctx.obj["db"]
    state = db.load_state()

    if not state.batches:
        click.echo("No settled periods yet.")
        return

    for batch in state.batches:
        if batch.payer_who_owes is None:
            outcome = "All square"
        else:
            outcome = f"{payer_name(state, batch.payer_who_owes)} paid {money(batch.balance)}"
        click.echo(f"\n{batch.name} (ID: {batch.id})")
        click.echo(f"  Settled: {batch.settled_at:%Y-%m-%d %H:%M} UTC")
        click.echo(f"  Expenses: {len(batch.expenses)}")
        click.echo(
            f"  {payer_name(state, Payer.RICARDO)}: {money(batch.total_ricardo)} | "
            f"{payer_name(state, Payer.RAFAELA)}: {money(batch.total_rafaela)}"
        )
        click.echo(f"  {outcome}")


@history_group.command("show")
@click.argument("batch_id")
@click.pass_context
def show_batch(ctx, batch_id: str):
    """Show the expenses archived in a settled period."""
    db = ctx.obj["db"]
    state = db.load_state()

    batch = state.find_batch(batch_id)
    if batch is None:
        click.echo(f"Error: Batch {batch_id} not found", err=True)
        ctx.exit(1)

    click.echo(f"\n{batch.name} (ID: {batch.id}) - {len(batch.expenses)} expense(s)")
    echo_expense_table(state, batch.expenses)


@history_group.command("revert")
@click.argument("batch_id")
@click.pass_context
def revert_batch(ctx, batch_id: str):
    """Undo a settlement, returning its expenses to the open period."""
    db = ctx.obj["db"]
    service = SettlementService(db)

    if service.get_batch(batch_id) is None:
        click.echo(f"Error: Batch {batch_id} not found", err=True)
        ctx.exit(1)

    if not click.confirm("The expenses of this period will return to the open period. Continue?"):
        click.echo("Revert cancelled.")
        return

    try:
        batch = service.revert(batch_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Reverted '{batch.name}': {len(batch.expenses)} expense(s) are open again")


def register_commands(cli):
    """Register settle and history commands with main CLI."""
    cli.add_command(settle)
    cli.add_command(history_group, name="history")
