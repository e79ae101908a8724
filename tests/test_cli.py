"""Tests for the CLI."""

from contextlib import contextmanager

import pytest
from typer.testing import CliRunner

from stock_manager.cli import main as cli_main
from stock_manager.cli import portfolio as cli_portfolio
from stock_manager.cli.main import app

runner = CliRunner()


@pytest.fixture
def cli(session_factory, prices, monkeypatch):
    """Invoke the CLI against the test database and price provider."""

    @contextmanager
    def test_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    monkeypatch.setattr(cli_main, "init_db", lambda: None)
    monkeypatch.setattr(cli_portfolio, "get_db", test_db)

    def invoke(*args):
        return runner.invoke(app, list(args), obj=prices)

    return invoke


class TestPortfolioCommands:
    """Tests for portfolio subcommands."""

    def test_buy_then_list(self, cli):
        result = cli("portfolio", "buy", "aapl", "5")
        assert result.exit_code == 0
        assert "now 5 shares" in result.output

        result = cli("portfolio", "list")
        assert result.exit_code == 0
        assert "AAPL" in result.output

    def test_list_empty(self, cli):
        result = cli("portfolio", "list")

        assert result.exit_code == 0
        assert "No holdings found" in result.output

    def test_add_duplicate_fails(self, cli):
        cli("portfolio", "add", "MSFT", "2")

        result = cli("portfolio", "add", "msft", "2")

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_sell_all_closes_position(self, cli):
        cli("portfolio", "buy", "AAPL", "3")

        result = cli("portfolio", "sell", "AAPL", "3")

        assert result.exit_code == 0
        assert "position closed" in result.output
        assert cli("portfolio", "show", "AAPL").exit_code == 1

    def test_sell_insufficient(self, cli):
        cli("portfolio", "buy", "AAPL", "3")

        result = cli("portfolio", "sell", "AAPL", "4")

        assert result.exit_code == 1
        assert "Insufficient stock" in result.output

    def test_remove_with_force(self, cli):
        cli("portfolio", "add", "AAPL", "3")

        result = cli("portfolio", "remove", "AAPL", "--force")

        assert result.exit_code == 0
        assert "Removed" in result.output

    def test_summary_and_highest(self, cli):
        cli("portfolio", "add", "AAPL", "10")
        cli("portfolio", "add", "GOOGL", "1")

        result = cli("portfolio", "summary")
        assert result.exit_code == 0
        assert "4,300.00" in result.output

        result = cli("portfolio", "highest")
        assert result.exit_code == 0
        assert "GOOGL" in result.output

    def test_highest_empty(self, cli):
        assert cli("portfolio", "highest").exit_code == 1


class TestOtherCommands:
    def test_price(self, cli):
        result = cli("prices", "get", "aapl")

        assert result.exit_code == 0
        assert "150.00" in result.output

    def test_version(self, cli):
        result = cli("version")

        assert result.exit_code == 0
        assert "1.0.0" in result.output
