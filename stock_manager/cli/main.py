"""Main CLI entry point using Typer."""

import logging

import typer
from rich.console import Console

from stock_manager.config import PRODUCT_NAME, PRODUCT_TAGLINE, PRODUCT_VERSION, get_settings
from stock_manager.data.market.provider import MockPriceProvider
from stock_manager.db.database import init_db

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

console = Console()
app = typer.Typer(
    name="stocks",
    help=f"{PRODUCT_NAME} - {PRODUCT_TAGLINE}",
    add_completion=False,
)


@app.callback()
def main_callback(ctx: typer.Context):
    """Initialize database and the price provider for this run."""
    init_db()
    # Prices only live as long as this process
    if ctx.obj is None:
        ctx.obj = MockPriceProvider.from_settings()


# Import and add subcommands
from stock_manager.cli.portfolio import app as portfolio_app
from stock_manager.cli.prices import app as prices_app

app.add_typer(portfolio_app, name="portfolio", help="Manage and value holdings")
app.add_typer(prices_app, name="prices", help="Look up current prices")


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]{PRODUCT_NAME}[/]")
    console.print(f"[bold]Version:[/] {PRODUCT_VERSION}")
    console.print(f"[bold]Tagline:[/] {PRODUCT_TAGLINE}")


if __name__ == "__main__":
    app()
