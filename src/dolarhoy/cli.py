"""Click-based CLI for dolarhoy.

Thin wrapper around the library with no business logic of its own. Quote resolution,
fetching and parsing all live in dolarhoy.core and dolarhoy.ingestion.
"""

from __future__ import annotations

import asyncio
import json
import logging
from decimal import Decimal

import click
import numpy as np
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console(stderr=True)

PRECISIONS = {
    "single": np.float32,
    "double": float,
    "decimal": Decimal,
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run_async(coro):
    """Run an async coroutine from synchronous Click code."""
    return asyncio.run(coro)


def _load_config(ctx: click.Context):
    """Load config lazily, caching on first call."""
    if "config" not in ctx.obj:
        from dolarhoy.core import load_config

        ctx.obj["config"] = load_config(config_path=ctx.obj.get("config_path"))
    return ctx.obj["config"]


def _resolve_kind(name: str):
    """Convert a CLI alias or resource name to a QuoteKind."""
    from dolarhoy.core import resolve_from_alias, resolve_from_resource_name

    kind = resolve_from_alias(name) or resolve_from_resource_name(name)
    if kind is None:
        raise click.UsageError(
            f"Unknown quote: {name!r}. Run 'dolarhoy kinds' to list the accepted names."
        )
    return kind


def _format_price(value) -> str:
    if value is None:
        return "-"
    return f"{value:.2f}"


def _json_price(value):
    """Decimals keep their exact text; floats of any width become JSON numbers."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return str(value)
    return float(value)


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    envvar="DOLARHOY_CONFIG",
    default=None,
    help="Path to dolarhoy.yml config file.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.version_option(package_name="dolarhoy")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """dolarhoy: currency quotes from dolarhoy.com."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose
    _setup_logging(verbose)


# ---------------------------------------------------------------------------
# quote
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("name")
@click.option(
    "--precision",
    "-p",
    type=click.Choice(sorted(PRECISIONS), case_sensitive=False),
    default=None,
    help="Numeric type for prices (default from config: double).",
)
@click.option(
    "--timeout",
    "-t",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Give up after this many seconds.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print JSON to stdout.")
@click.pass_context
def quote(
    ctx: click.Context,
    name: str,
    precision: str | None,
    timeout: float | None,
    as_json: bool,
) -> None:
    """Fetch the current buy/sell prices of a quote (alias or resource name)."""
    from dolarhoy.core import DolarHoyError, base_currency, label

    kind = _resolve_kind(name)
    try:
        config = _load_config(ctx)
    except DolarHoyError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    precision = (precision or config.output.precision).lower()
    timeout = timeout if timeout is not None else config.output.timeout_seconds
    price_type = PRECISIONS[precision]

    async def _run():
        from dolarhoy.ingestion import DolarHoyClient

        client = DolarHoyClient(config.client)
        return await asyncio.wait_for(client.fetch_quote(kind, price_type), timeout)

    try:
        result = _run_async(_run())
    except asyncio.TimeoutError:
        console.print(f"[red]Error:[/red] no response within {timeout}s")
        raise SystemExit(1)
    except DolarHoyError as e:
        console.print(f"[red]Error:[/red] {e}")
        if ctx.obj.get("verbose") and e.__cause__ is not None:
            console.print(f"  Caused by: {e.__cause__}")
        raise SystemExit(1)

    buy, sell = result.price_pair()
    currency = base_currency(kind)

    if as_json:
        output = {
            "kind": kind.name,
            "resource": kind.value,
            "title": result.title,
            "currency": currency.value,
            "buy": _json_price(buy),
            "sell": _json_price(sell),
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    table = Table(title=result.title or label(kind))
    table.add_column("Buy", justify="right")
    table.add_column("Sell", justify="right")
    table.add_column("Currency")
    table.add_row(_format_price(buy), _format_price(sell), currency.display_name)
    console.print(table)


# ---------------------------------------------------------------------------
# kinds
# ---------------------------------------------------------------------------


@cli.command()
def kinds() -> None:
    """List the supported quotes and the names accepted for each."""
    from dolarhoy.core import CATALOG

    table = Table(title="Supported quotes")
    table.add_column("Quote", style="bold")
    table.add_column("Resource")
    table.add_column("Aliases")
    table.add_column("Currency")

    for spec in CATALOG:
        table.add_row(
            spec.label,
            spec.resource_name,
            ", ".join(spec.aliases[1:]),
            spec.base_currency.value,
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
