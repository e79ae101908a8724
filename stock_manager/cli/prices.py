"""Price CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from stock_manager.data.market.provider import normalize_symbol

console = Console()
app = typer.Typer()


@app.command("get")
def get_price(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol"),
):
    """Get current price for a symbol."""
    symbol = normalize_symbol(symbol)
    price = ctx.obj.get_price(symbol)
    console.print(f"[cyan]{symbol}[/cyan]: [green]${price:,.2f}[/green]")


@app.command("list")
def list_prices(ctx: typer.Context):
    """List every price known to this run."""
    table = Table(title="Known Prices")
    table.add_column("Symbol", style="cyan")
    table.add_column("Price", justify="right", style="green")

    for symbol, price in sorted(ctx.obj.known_prices().items()):
        table.add_row(symbol, f"${price:,.2f}")

    console.print(table)
