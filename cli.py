"""
CLI tool for catalog service management.

Provides commands for listing the registered HTTP routes and checking
database connectivity.
"""

import asyncio

import typer
from fastapi.routing import APIRoute
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from catalog import app
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.storage.db import async_session, engine, wait_and_init_db

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="catalog-cli",
    help="Library Catalog CLI - Inspect routes and check the database",
    add_completion=False,
)
console = Console()


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Example:
        python cli.py routes
    """
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered HTTP Routes[/bold cyan]",
            border_style="cyan"
        )
    )
    console.print()

    table = Table(
        "Methods",
        "Path",
        "Handler Path",
        title="HTTP Routes",
        show_lines=True,
    )

    api_routes = [route for route in app.routes if isinstance(route, APIRoute)]
    for route in sorted(api_routes, key=lambda r: r.path):
        handler = route.endpoint
        table.add_row(
            f"[green]{', '.join(sorted(route.methods))}[/green]",
            route.path,
            f"{handler.__module__}.[yellow]{handler.__name__}[/yellow]",
        )

    console.print(table)
    console.print()
    console.print(f"[bold]Summary:[/bold] {len(api_routes)} routes registered")
    console.print()


@typer_app.command(name="check-db")
def check_db(
    retries: int = typer.Option(
        1,
        "--retries",
        "-r",
        help="Number of connection attempts before giving up"
    ),
    interval: int = typer.Option(
        1,
        "--interval",
        "-i",
        help="Seconds to wait between attempts"
    ),
):
    """
    Check that the configured database is reachable and show how many
    authors and books it holds.

    Exits with code 1 when no connection could be established or the
    catalog tables cannot be queried (e.g. migrations not applied).

    Example:
        python cli.py check-db --retries 5
    """

    async def _check() -> tuple[int, int]:
        try:
            await wait_and_init_db(retry_interval=interval, max_retries=retries)
            async with async_session() as session:
                authors = await AuthorRepository(session).count()
                books = await BookRepository(session).count()
            return authors, books
        finally:
            await engine.dispose()

    console.print()
    try:
        authors, books = asyncio.run(_check())
    except (RuntimeError, SQLAlchemyError) as ex:
        console.print(
            Panel.fit(
                f"[red]✗ {escape(str(ex))}[/red]",
                border_style="red",
                title="Error"
            )
        )
        console.print()
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            f"[green]✓ Database is reachable[/green]\n\n"
            f"Authors: {authors}\n"
            f"Books: {books}",
            border_style="green",
            title="Success"
        )
    )
    console.print()


if __name__ == "__main__":
    typer_app()
