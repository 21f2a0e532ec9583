"""schema-cli - Main entry point."""

import logging
from typing import Optional

import typer
from rich.console import Console
from .commands import schema
from .config import settings

app = typer.Typer(
    name="schema-cli",
    help="Discover relational database schemas",
    add_completion=False,
)

# Add subcommands
app.add_typer(schema.app, name="schema")

console = Console()


@app.command()
def config():
    """Show current configuration."""
    discovery = settings.discovery_config()
    console.print("[bold]Current Configuration[/bold]")
    console.print(f"  Database URL: {discovery.masked_url()}")
    console.print(f"  Namespace: {discovery.namespace}")
    console.print(f"  Pool size: {discovery.pool_size}")
    console.print(f"  Statement timeout: {discovery.statement_timeout_ms or 'disabled'}"
                  f"{' ms' if discovery.statement_timeout_ms else ''}")
    console.print(f"  Log level: {settings.log_level}")


@app.command()
def health(
    dsn: Optional[str] = typer.Option(None, "--dsn", help="PostgreSQL URI (or SCHEMA_CLI_DATABASE_URL env)"),
):
    """Check connection to the database."""
    from .database import SchemaCLIError
    from .database.catalog import ping
    from .database.postgres import connect

    discovery = settings.discovery_config(database_url=dsn)
    try:
        with connect(discovery) as connection:
            version = ping(connection)
    except SchemaCLIError as e:
        console.print(f"[red]Cannot connect to {discovery.masked_url()}: {e.message}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Connected to {discovery.masked_url()}[/green]")
    if version:
        console.print(f"  {version}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    schema-cli - Discover tables, columns and foreign keys of a database.

    Examples:

        schema-cli schema discover --dsn postgresql://localhost/app

        schema-cli schema tables -n sales

        schema-cli health
    """
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level)


if __name__ == "__main__":
    app()
