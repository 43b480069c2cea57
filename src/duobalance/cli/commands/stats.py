"""Statistics command."""

from decimal import Decimal

import click

from duobalance.cli.formatting import money, payer_name, share_bar
from duobalance.domain.entities import AppState, CategoryTotal, Payer, PeriodStats
from duobalance.domain.statistics import StatisticsService


def _display_categories(categories: tuple[CategoryTotal, ...], whole: Decimal, indent: int = 4) -> None:
    """Print category totals with their share of ``whole``."""
    if not categories:
        click.echo(f"{' ' * indent}(no categorized expenses)")
        return
    for item in categories:
        click.echo(
            f"{' ' * indent}{item.category.name:<24} {money(item.total):>12}  {share_bar(item.total, whole)}"
        )


def _display_period(state: AppState, period: PeriodStats) -> None:
    header = period.name
    if period.settled_at is not None:
        header = f"{period.name} ({period.settled_at:%Y-%m-%d})"
    click.echo(f"\n{header}: {money(period.total)}")
    click.echo(
        f"  {payer_name(state, Payer.RICARDO)}: {money(period.total_ricardo)} {share_bar(period.total_ricardo, period.total)}"
    )
    click.echo(
        f"  {payer_name(state, Payer.RAFAELA)}: {money(period.total_rafaela)} {share_bar(period.total_rafaela, period.total)}"
    )
    _display_categories(period.categories, period.total)


@click.command("stats")
@click.option("--batches/--no-batches", default=True, help="Include each settled period (default: yes)")
@click.pass_context
def stats(ctx, batches: bool):
    """Show where the money went: open period, settled periods and all time."""
    db = ctx.obj["db"]
    state = db.load_state()
    result = StatisticsService(db).build_statistics(state)

    click.echo("=" * 80)
    click.echo("OPEN PERIOD")
    _display_period(state, result.current)

    if batches and result.batches:
        click.echo("\n" + "=" * 80)
        click.echo("SETTLED PERIODS")
        for period in result.batches:
            _display_period(state, period)

    click.echo("\n" + "=" * 80)
    click.echo(f"ALL TIME: {money(result.total_all_time)}")
    click.echo(
        f"  {payer_name(state, Payer.RICARDO)}: {money(result.ricardo_all_time)} "
        f"{share_bar(result.ricardo_all_time, result.total_all_time)}"
    )
    click.echo(
        f"  {payer_name(state, Payer.RAFAELA)}: {money(result.rafaela_all_time)} "
        f"{share_bar(result.rafaela_all_time, result.total_all_time)}"
    )
    _display_categories(result.global_categories, result.total_all_time)


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(stats)
