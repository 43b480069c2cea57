"""Balance command."""

import click

from duobalance.cli.formatting import money, payer_name
from duobalance.domain.balance import calculate_balance, creditor


@click.command("balance")
@click.pass_context
def balance(ctx):
    """Show what each payer paid in the open period and who owes whom."""
    db = ctx.obj["db"]
    state = db.load_state()
    result = calculate_balance(state.expenses)

    click.echo(f"Open period total: {money(result.total)} ({len(state.expenses)} expense(s))")
    for payer in state.users:
        click.echo(f"  {payer_name(state, payer)} paid: {money(result.total_for(payer))}")

    if result.who_owes is None:
        click.echo("All square.")
    else:
        click.echo(
            f"{payer_name(state, result.who_owes)} owes "
            f"{payer_name(state, creditor(result))} {money(result.balance_owed)}"
        )


def register_commands(cli):
    """Register balance command with main CLI."""
    cli.add_command(balance)
