"""Color naming command implementations."""

import click

from pillcolor.cli.common import load_config, report_error
from pillcolor.core import classify, describe_many, hex_to_hsv
from pillcolor.exceptions import ColorInputError
from pillcolor.models import ColorName, HsvTriple, Shade


def _format_hsv(hsv: HsvTriple) -> str:
    return f"h={hsv.h} s={hsv.s:.1f} v={hsv.v:.1f}"


@click.command(name="name")
@click.argument("hex_values", nargs=-1, required=True, metavar="HEX...")
@click.option(
    "--hsv/--no-hsv",
    "show_hsv",
    default=None,
    help="Show the HSV triple next to each label (default: from config)",
)
@click.pass_context
def name_colors(ctx: click.Context, hex_values: tuple[str, ...], show_hsv: bool | None):
    """Name one or more hex color samples.

    \b
    Examples:
      pillcolor name C2894E
      pillcolor name '#FFFFFF' '#808080' --hsv
    """
    config = load_config(ctx)
    if show_hsv is None:
        show_hsv = config.show_hsv

    readings, collector = describe_many(hex_values, config.thresholds)

    for reading in readings:
        line = f"{reading.format_hex(config.uppercase_hex)}\t{reading.label}"
        if show_hsv:
            line += f"\t{_format_hsv(reading.hsv)}"
        click.echo(line)

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        ctx.exit(1)


@click.command(name="hsv")
@click.argument("hex_value", metavar="HEX")
def hsv(hex_value: str):
    """Show the HSV decomposition of a hex color."""
    try:
        triple = hex_to_hsv(hex_value)
    except ColorInputError as e:
        report_error(e)
    click.echo(f"{triple.h} {triple.s:.2f} {triple.v:.2f}")


@click.command(name="classify")
@click.argument("h", type=float)
@click.argument("s", type=float)
@click.argument("v", type=float)
@click.pass_context
def classify_command(ctx: click.Context, h: float, s: float, v: float):
    """Classify a hue (degrees), saturation and value (percent)."""
    config = load_config(ctx)
    try:
        label = classify(h, s, v, config.thresholds)
    except ColorInputError as e:
        report_error(e)
    click.echo(label)


@click.command(name="labels")
def labels():
    """List every label the classifier can produce."""
    for name in ColorName:
        click.echo(name.value)
        if name.is_achromatic:
            continue
        for shade in Shade:
            click.echo(f"  {shade.apply(name)}")
