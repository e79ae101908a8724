"""Portfolio CLI commands."""

from contextlib import contextmanager

import typer
from rich.console import Console
from rich.table import Table

from stock_manager.core.errors import StockManagerError
from stock_manager.core.holdings.service import HoldingService
from stock_manager.core.portfolio.service import PortfolioService
from stock_manager.data.market.provider import normalize_symbol
from stock_manager.db.database import get_db

console = Console()
app = typer.Typer()


@contextmanager
def _exit_on_error():
    """Print domain errors and exit with status 1."""
    try:
        yield
    except StockManagerError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)


@app.command("add")
def add_holding(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol (e.g., AAPL)"),
    quantity: int = typer.Argument(..., min=1, help="Number of shares"),
):
    """Add a new holding to the portfolio."""
    with _exit_on_error(), get_db() as db:
        holding = HoldingService(db, ctx.obj).create(symbol, quantity)
        console.print(f"[green]Added:[/green] {holding.symbol} - {holding.quantity} shares")


@app.command("list")
def list_holdings(ctx: typer.Context):
    """List all holdings in the portfolio."""
    with get_db() as db:
        holdings = HoldingService(db, ctx.obj).get_all()

        if not holdings:
            console.print("[yellow]No holdings found.[/yellow] Use 'add' or 'buy' to add some.")
            return

        table = Table(title="Portfolio Holdings")
        table.add_column("Symbol", style="cyan")
        table.add_column("Quantity", justify="right")

        for h in holdings:
            table.add_row(h.symbol, f"{h.quantity:,}")

        console.print(table)
        console.print(f"\n[dim]Total holdings: {len(holdings)}[/dim]")


@app.command("show")
def show_holding(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol"),
):
    """Show a single holding."""
    with _exit_on_error(), get_db() as db:
        holding = HoldingService(db, ctx.obj).get_by_symbol(symbol)
        console.print(f"[cyan]{holding.symbol}[/cyan]: {holding.quantity:,} shares")


@app.command("update")
def update_holding(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol"),
    quantity: int = typer.Argument(..., min=1, help="New number of shares"),
):
    """Replace the quantity of an existing holding."""
    with _exit_on_error(), get_db() as db:
        holding = HoldingService(db, ctx.obj).update(symbol, quantity)
        console.print(f"[green]Updated:[/green] {holding.symbol} - {holding.quantity} shares")


@app.command("remove")
def remove_holding(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol to remove"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
):
    """Remove a holding from the portfolio."""
    symbol = normalize_symbol(symbol)

    with _exit_on_error(), get_db() as db:
        service = HoldingService(db, ctx.obj)
        holding = service.get_by_symbol(symbol)

        if not force:
            confirm = typer.confirm(f"Remove {symbol} ({holding.quantity} shares)?")
            if not confirm:
                console.print("[yellow]Cancelled.[/yellow]")
                raise typer.Exit(0)

        service.delete(symbol)
        console.print(f"[green]Removed:[/green] {symbol}")


@app.command("buy")
def buy(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol"),
    quantity: int = typer.Argument(..., help="Shares to buy"),
):
    """Buy shares (creates the holding if needed)."""
    with _exit_on_error(), get_db() as db:
        holding = HoldingService(db, ctx.obj).buy(symbol, quantity)
        console.print(
            f"[green]Bought:[/green] {quantity} {holding.symbol} "
            f"(now {holding.quantity} shares)"
        )


@app.command("sell")
def sell(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol"),
    quantity: int = typer.Argument(..., help="Shares to sell"),
):
    """Sell shares (removes the holding when none are left)."""
    symbol = normalize_symbol(symbol)

    with _exit_on_error(), get_db() as db:
        holding = HoldingService(db, ctx.obj).sell(symbol, quantity)
        if holding is None:
            console.print(f"[green]Sold:[/green] {quantity} {symbol} - position closed")
        else:
            console.print(
                f"[green]Sold:[/green] {quantity} {symbol} (now {holding.quantity} shares)"
            )


@app.command("investment")
def investment(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Stock ticker symbol"),
):
    """Show the current value of one holding."""
    symbol = normalize_symbol(symbol)

    with _exit_on_error(), get_db() as db:
        value = HoldingService(db, ctx.obj).calculate_investment(symbol)
        console.print(f"[cyan]{symbol}[/cyan]: [green]${value:,.2f}[/green]")


@app.command("ranked")
def ranked(ctx: typer.Context):
    """List holdings by current value, highest first."""
    with get_db() as db:
        values = HoldingService(db, ctx.obj).list_by_value_descending()

    if not values:
        console.print("[yellow]No holdings found.[/yellow]")
        return

    table = Table(title="Holdings by Value")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Symbol", style="cyan")
    table.add_column("Quantity", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Value", justify="right", style="green")

    for rank, v in enumerate(values, start=1):
        table.add_row(
            str(rank),
            v.symbol,
            f"{v.quantity:,}",
            f"${v.current_price:,.2f}",
            f"${v.total_value:,.2f}",
        )

    console.print(table)


@app.command("summary")
def summary(ctx: typer.Context):
    """Show portfolio value, share count and average price per share."""
    with get_db() as db:
        result = PortfolioService(db, ctx.obj).get_portfolio_summary()

    if result.stock_details:
        table = Table(title="Portfolio Summary")
        table.add_column("Symbol", style="cyan")
        table.add_column("Quantity", justify="right")
        table.add_column("Price", justify="right")
        table.add_column("Value", justify="right", style="green")

        for d in result.stock_details:
            table.add_row(
                d.symbol,
                f"{d.quantity:,}",
                f"${d.current_price:,.2f}",
                f"${d.total_value:,.2f}",
            )

        console.print(table)
        console.print()

    console.print(f"[bold]Stocks:[/bold]          {result.total_stocks}")
    console.print(f"[bold]Shares:[/bold]          {result.total_quantity:,}")
    console.print(f"[bold]Total Value:[/bold]     ${result.total_value:,.2f}")
    console.print(f"[bold]Avg Price/Share:[/bold] ${result.average_price_per_share:,.2f}")


@app.command("highest")
def highest(ctx: typer.Context):
    """Show the most valuable holding."""
    with get_db() as db:
        top = PortfolioService(db, ctx.obj).find_highest_value_stock()

    if top is None:
        console.print("[yellow]No holdings found.[/yellow]")
        raise typer.Exit(1)

    console.print(
        f"[cyan]{top.symbol}[/cyan]: {top.quantity:,} x ${top.current_price:,.2f} "
        f"= [green]${top.total_value:,.2f}[/green]"
    )
