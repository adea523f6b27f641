"""CLI for wallet balance checker."""

import logging
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.text import Text
from rich.traceback import install

from wallet_balance.core import BalanceAggregator, ProviderFactory
from wallet_balance.core.models import BalanceSummary
from wallet_balance.data import load_config, parse_config
from wallet_balance.data.loader import DEFAULT_CONFIG_PATH
from wallet_balance.errors import ConfigError
from wallet_balance.fetchers import create_http_client

# Install rich traceback handler
install(show_locals=False)

app = typer.Typer(
    name="wallet-balance",
    help="Fetch crypto-currency wallet balances and value them in fiat",
    add_completion=False,
)

console = Console()


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


@app.command()
def check(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="Account configuration file"),
    workers: int | None = typer.Option(None, "--workers", "-w", min=1, help="Accounts fetched concurrently"),
    timeout: float | None = typer.Option(None, "--timeout", "-t", min=0.1, help="HTTP timeout in seconds"),
    currency: str | None = typer.Option(None, "--currency", help="Fiat currency to value balances in"),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format",
        "-f",
        help="Output format",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
) -> None:
    """
    Fetch balances for every configured account.

    Examples:

        # Use ./config.json
        wallet-balance check

        # Another file, more workers, JSON output
        wallet-balance check --config wallets.yaml --workers 6 --format json
    """
    _configure_logging(debug)

    overrides = {"workers": workers, "timeout": timeout, "target_currency": currency}
    try:
        settings = load_config(config)
        # Overrides go through the same validation as the file
        settings = parse_config(
            settings.model_dump() | {key: value for key, value in overrides.items() if value is not None}
        )
    except ConfigError as e:
        console.print(Text.assemble(("Error: ", "bold red"), str(e)))
        raise typer.Exit(1) from e

    with create_http_client(timeout=settings.timeout) as client:
        aggregator = BalanceAggregator(
            ProviderFactory(client),
            workers=settings.workers,
            target_currency=settings.target_currency,
        )

        if format == OutputFormat.JSON:
            summary = aggregator.run(settings.accounts)
        else:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                progress.add_task(f"Fetching {len(settings.accounts)} balances...", total=None)
                summary = aggregator.run(settings.accounts)

    if format == OutputFormat.JSON:
        _output_json(summary)
    else:
        _output_table(summary)


@app.command()
def currencies() -> None:
    """List all supported crypto-currencies."""
    table = Table(title="Supported Currencies", show_header=True, header_style="bold magenta")
    table.add_column("Symbol", style="cyan")
    table.add_column("Provider", style="green")

    for symbol in ProviderFactory.supported_symbols():
        table.add_row(symbol, ProviderFactory.provider_name(symbol))

    console.print(table)


def _output_table(summary: BalanceSummary) -> None:
    """Output balances as rich table."""
    if not summary.reports:
        console.print("\n[yellow]No accounts configured[/yellow]")
        return

    fiat = summary.target_currency.upper()
    table = Table(title="Balances", show_header=True, header_style="bold magenta")
    table.add_column("Symbol", style="cyan")
    table.add_column("Balance", style="bright_cyan", justify="right")
    table.add_column(f"Value ({fiat})", style="bold bright_green", justify="right")
    table.add_column(f"Rate ({fiat})", style="bright_green", justify="right")

    for report in summary.reports:
        if report.error is not None:
            table.add_row(report.symbol, Text(str(report.error), style="bright_red"), "-", "-")
        else:
            table.add_row(
                report.symbol,
                f"{report.balance:,.8f}",
                f"{report.fiat_value:,.2f}",
                f"{report.rate:,.2f}",
            )

    console.print(table)
    console.print(f"[bold]{fiat} balance:[/bold] [bold bright_green]{summary.total_fiat_value:,.2f}[/bold bright_green]")
    if summary.errors:
        console.print(f"[bright_red]{len(summary.errors)} account(s) failed[/bright_red]")


def _output_json(summary: BalanceSummary) -> None:
    """Output balances as JSON."""
    # Decimals are dumped as strings to keep full precision
    data = summary.model_dump(mode="json")
    console.print_json(data=data)


if __name__ == "__main__":
    app()
