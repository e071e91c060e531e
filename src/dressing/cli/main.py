"""Typer CLI for dressing price quotes."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from dressing.application import CalculateQuoteCommand, describe
from dressing.application.config import ConfigError, load_pricing_table
from dressing.cli.commands import validate_command
from dressing.domain import (
    CalculationInput,
    PriceCalculator,
    PricingTable,
    SlideType,
    UnknownZoneError,
)
from dressing.infrastructure import (
    JsonExporter,
    QuoteFormatter,
    RatesFormatter,
    ZoneListFormatter,
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON pricing configuration"),
]


app = typer.Typer(
    name="dressing",
    help="Price custom wardrobes (dressings) from dimensions and options.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Dressing price calculator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _load_table(config_file: Path | None) -> PricingTable:
    try:
        return load_pricing_table(config_file)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def quote(
    width: Annotated[float, typer.Option("--width", "-w", help="Width in meters")],
    height: Annotated[float, typer.Option("--height", "-h", help="Height in meters")],
    chambranle: Annotated[
        bool,
        typer.Option("--chambranle/--no-chambranle", help="Include a door-frame surround"),
    ] = True,
    facade: Annotated[
        bool, typer.Option("--facade/--no-facade", help="Include a front panel")
    ] = True,
    slide_type: Annotated[
        SlideType, typer.Option("--slide-type", help="Drawer-slide hardware")
    ] = SlideType.SCALA,
    slides: Annotated[
        int, typer.Option("--slides", "-s", help="Number of drawer slides")
    ] = 0,
    zone: Annotated[
        str | None,
        typer.Option("--zone", "-z", help="Transport zone code (default: first zone)"),
    ] = None,
    discount: Annotated[
        float, typer.Option("--discount", "-d", help="Discount in percent (0-100)")
    ] = 0.0,
    config_file: ConfigOption = None,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
) -> None:
    """Compute the tax-inclusive price of a dressing."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    table = _load_table(config_file)
    try:
        transport_zone = table.zone(zone) if zone else table.default_zone
    except UnknownZoneError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    calculation = CalculationInput(
        width=width,
        height=height,
        has_chambranle=chambranle,
        has_facade=facade,
        slide_type=slide_type,
        slide_count=slides,
        transport_zone=transport_zone,
        discount_percent=discount,
    )

    command = CalculateQuoteCommand(PriceCalculator(table))
    result = command.execute(calculation)

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {describe(error)}", err=True)
        raise typer.Exit(code=1)

    assert result.breakdown is not None
    if output_format == "json":
        typer.echo(JsonExporter().export_quote(calculation, result.breakdown))
    else:
        typer.echo(QuoteFormatter(table).format(calculation, result.breakdown))


@app.command()
def zones(
    config_file: ConfigOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
) -> None:
    """List transport zones and their fees."""
    table = _load_table(config_file)
    if as_json:
        payload = [
            {"code": z.code, "label": z.label, "fee": z.fee} for z in table.transport_zones
        ]
        typer.echo(json.dumps(payload, indent=2))
        return
    typer.echo(ZoneListFormatter().format(table))


@app.command()
def rates(config_file: ConfigOption = None) -> None:
    """Show the price list and the pricing formula."""
    typer.echo(RatesFormatter().format(_load_table(config_file)))


if __name__ == "__main__":
    app()
