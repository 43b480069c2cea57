"""Reset, export and import commands."""

import click

from duobalance.cli.error_handling import handle_domain_error
from duobalance.domain.errors import DomainError
from duobalance.domain.maintenance import MaintenanceService


@click.command("reset")
@click.pass_context
def reset(ctx):
    """Delete ALL expenses and history and restore the default categories."""
    service = MaintenanceService(ctx.obj["db"])

    if not click.confirm("This deletes ALL expenses and settled periods. This cannot be undone. Continue?"):
        click.echo("Reset cancelled.")
        return

    try:
        service.reset()
        click.echo("All data cleared. Default categories restored.")
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.command("export")
@click.argument("path", type=click.Path(dir_okay=False, writable=True))
@click.pass_context
def export_data(ctx, path: str):
    """Write all data to a JSON file."""
    service = MaintenanceService(ctx.obj["db"])

    try:
        state = service.export_state(path)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Exported {len(state.expenses)} open expense(s), {len(state.batches)} settled period(s) "
        f"and {len(state.categories)} categories to {path}"
    )


@click.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_data(ctx, path: str):
    """Replace all data with the contents of a JSON file."""
    service = MaintenanceService(ctx.obj["db"])

    if not click.confirm("Importing replaces ALL current data. Continue?"):
        click.echo("Import cancelled.")
        return

    try:
        state = service.import_state(path)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(
        f"Imported {len(state.expenses)} open expense(s), {len(state.batches)} settled period(s) "
        f"and {len(state.categories)} categories"
    )


def register_commands(cli):
    """Register maintenance commands with main CLI."""
    cli.add_command(reset)
    cli.add_command(export_data, name="export")
    cli.add_command(import_data, name="import")
