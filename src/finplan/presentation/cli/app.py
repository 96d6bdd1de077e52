"""finplan CLI application using Typer.

Database maintenance for the configured database.
"""

import asyncio

import typer
from rich.console import Console

from finplan.infrastructure.persistence.sqlalchemy import (
    create_engine_from_settings,
    create_tables,
    drop_tables,
)
from finplan.presentation.logging_config import configure_logging
from finplan_config.settings import get_settings

app = typer.Typer(
    name="finplan",
    help="finplan - budgets, debts and savings goals",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


async def _run_schema_operation(drop: bool) -> None:
    engine = create_engine_from_settings(get_settings())
    try:
        if drop:
            await drop_tables(engine)
        else:
            await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_db() -> None:
    """Create all missing tables. Existing tables are left untouched."""
    configure_logging()
    asyncio.run(_run_schema_operation(drop=False))
    console.print("[bold green]Database schema is up to date.[/bold green]")


@db_app.command("drop")
def drop_db(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Drop without asking for confirmation",
    ),
) -> None:
    """Drop all tables, deleting every budget, debt and goal."""
    if not force:
        typer.confirm(
            "This deletes all stored data. Continue?",
            abort=True,
        )
    configure_logging()
    asyncio.run(_run_schema_operation(drop=True))
    console.print("[yellow]All tables dropped.[/yellow]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
