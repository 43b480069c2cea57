"""Category management commands."""

import click

from duobalance.cli.error_handling import handle_domain_error
from duobalance.domain.category import CategoryService
from duobalance.domain.errors import DomainError


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found. Add one with 'category add NAME'.")
        return

    click.echo("\nCategories:")
    for category in categories:
        click.echo(f"  {category.name:<24} {category.color:<8} (ID: {category.id})")


@category_group.command("add")
@click.argument("name")
@click.pass_context
def add_category(ctx, name: str):
    """Add a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category = service.add_category(name)
        click.echo(f"Created category '{category.name}' (ID: {category.id})")
    except DomainError as e:
        handle_domain_error(ctx, e)


@category_group.command("delete")
@click.argument("category")
@click.pass_context
def delete_category(ctx, category: str):
    """Delete a category by ID or name.

    Expenses in this category are kept but become uncategorized.
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_obj = service.require_category(category)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not click.confirm(
        f"Delete category '{category_obj.name}'? Its expenses will lose the category but will not be deleted."
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_category(category_obj.id)
        click.echo(f"Deleted category '{category_obj.name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
