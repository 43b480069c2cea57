"""Main CLI entry point."""

import click
from duobalance.database.factories import BACKENDS, DEFAULT_BACKEND, create_database
from duobalance.log_config import configure_logging

# Import and register all commands at module level
from duobalance.cli.commands import (
    balance,
    category,
    expense,
    history,
    maintenance,
    stats,
)


@click.group()
@click.option(
    "--store-path",
    type=click.Path(dir_okay=False),
    help="Path to the data file (overrides DUOBALANCE_STORE_PATH environment variable)",
    envvar="DUOBALANCE_STORE_PATH",
)
@click.option(
    "--backend",
    type=click.Choice(BACKENDS, case_sensitive=False),
    default=DEFAULT_BACKEND,
    show_default=True,
    help="Storage backend: a JSON document or a SQLite database",
    envvar="DUOBALANCE_BACKEND",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging", envvar="DUOBALANCE_VERBOSE")
@click.pass_context
def cli(ctx, store_path: str | None, backend: str, verbose: bool):
    """DuoBalance - shared expenses for two.

    Log who paid for what, see who owes whom, settle the period into the
    history and review where the money went.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(backend=backend, store_path=store_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
expense.register_commands(cli)
balance.register_commands(cli)
history.register_commands(cli)
stats.register_commands(cli)
category.register_commands(cli)
maintenance.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
