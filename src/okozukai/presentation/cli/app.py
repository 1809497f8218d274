"""Okozukai CLI application using Typer.

This module provides command-line utilities for the Okozukai backend:
database setup, demo data seeding and running the API server.
"""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from okozukai.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
    drop_tables,
)
from okozukai_config.settings import get_settings

app = typer.Typer(
    name="okozukai",
    help="Okozukai - personal budgeting backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create database subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


async def _create_schema(drop_first: bool) -> None:
    engine = create_engine_from_settings()
    try:
        if drop_first:
            await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_db() -> None:
    """Create any missing tables. Existing data is left untouched."""
    asyncio.run(_create_schema(drop_first=False))
    console.print("[bold green]Database schema is up to date.[/bold green]")


@db_app.command("reset")
def reset_db(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt.",
    ),
) -> None:
    """Drop every table and recreate the schema. All data is lost."""
    if not yes:
        typer.confirm("This deletes all journals, tags and transactions.", abort=True)
    asyncio.run(_create_schema(drop_first=True))
    console.print("[bold yellow]Database was reset.[/bold yellow]")


@app.command("seed")
def seed() -> None:
    """Load the demo journal, tags and transactions into an empty database."""
    from okozukai_demo.seed import run_seed

    stats = asyncio.run(run_seed())
    if stats.skipped:
        console.print("[yellow]Transactions already exist, demo data skipped.[/yellow]")
        return

    table = Table(title="Demo data")
    table.add_column("Entity", style="cyan")
    table.add_column("Created", justify="right")
    table.add_row("Tags", str(stats.tags_created))
    table.add_row("Journals", str(stats.journals_created))
    table.add_row("Transactions", str(stats.transactions_created))
    console.print(table)


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Bind address (defaults to API_HOST)."),
    port: int = typer.Option(None, help="Port (defaults to API_PORT)."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "okozukai.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
