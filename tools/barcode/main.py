"""
CLI tool to classify, validate and convert UPC/EAN codes.

Usage:
    poetry run python -m tools.barcode.main classify 036000291452
    poetry run python -m tools.barcode.main add-check 03600029145
    poetry run python -m tools.barcode.main convert 012345000058
    poetry run python -m tools.barcode.main inspect 01234565 4006381333931 --format json
"""

import json
import sys

import click
import structlog

from upcean.barcode import (
    UPCEExpansionError,
    add_check_digit,
    classify,
    compress_upca_to_upce,
    convert,
    describe,
    expand_upce,
    validate,
)
from upcean.config import configure_logging, get_settings
from upcean.models import BarcodeInfo, EightDigitPolicy

logger = structlog.get_logger(__name__)

POLICY_CHOICES = [policy.value for policy in EightDigitPolicy]


def format_table(infos: list[BarcodeInfo]) -> str:
    """Format barcode summaries as a fixed-width table."""
    lines = [
        "-" * 72,
        f"{'Code':<15} {'Type':<8} {'Check':<6} {'Valid':<6} {'Converted':<15} {'As':<8}",
        "-" * 72,
    ]
    for info in infos:
        check = "✓" if info.has_check_digit else "✗"
        valid = "✓" if info.checksum_valid else "✗"
        converted = info.converted or "N/A"
        converted_type = info.converted_type.value if info.converted_type else "N/A"
        lines.append(
            f"{info.normalized:<15} {info.barcode_type.value:<8} {check:<6} "
            f"{valid:<6} {converted:<15} {converted_type:<8}"
        )
    lines.append("-" * 72)
    lines.append(f"Total: {len(infos)} code(s)")
    return "\n".join(lines)


def format_json(infos: list[BarcodeInfo]) -> str:
    """Format barcode summaries as a JSON array."""
    return json.dumps([info.model_dump(mode="json") for info in infos], indent=2)


def _echo_result(success: bool, value: str) -> None:
    """Print a try-style result and exit non-zero on failure."""
    if not success:
        click.echo("failed", err=True)
        sys.exit(1)
    click.echo(value)


@click.group()
def main() -> None:
    """UPC-A, UPC-E, EAN-13 and EAN-8 barcode utilities."""
    configure_logging(get_settings())


@main.command("classify")
@click.argument("code")
@click.option(
    "--policy", "-p",
    type=click.Choice(POLICY_CHOICES),
    default=None,
    help="Tie-break order for 8-digit codes (default: from settings)",
)
def classify_command(code: str, policy: str | None) -> None:
    """Print the symbology of CODE."""
    eight_digit_policy = EightDigitPolicy(policy) if policy else get_settings().eight_digit_policy
    click.echo(classify(code, eight_digit_policy).value)


@main.command("validate")
@click.argument("code")
def validate_command(code: str) -> None:
    """Check the check digit of CODE."""
    if validate(code):
        click.echo("valid")
    else:
        click.echo("invalid")
        sys.exit(1)


@main.command("add-check")
@click.argument("code")
def add_check_command(code: str) -> None:
    """Append the missing check digit to CODE."""
    try:
        click.echo(add_check_digit(code))
    except UPCEExpansionError as e:
        logger.error("Check digit calculation failed", code=code, error=str(e))
        raise click.ClickException(str(e)) from e


@main.command("expand")
@click.argument("code")
@click.option(
    "--number-system", "-n",
    type=click.IntRange(0, 1),
    default=None,
    help="Number system for a bare 6-digit core (default: from settings)",
)
def expand_command(code: str, number_system: int | None) -> None:
    """Expand UPC-E CODE to UPC-A."""
    if number_system is None:
        number_system = get_settings().default_number_system
    _echo_result(*expand_upce(code, assumed_number_system=number_system))


@main.command("compress")
@click.argument("code")
def compress_command(code: str) -> None:
    """Compress UPC-A CODE to UPC-E."""
    _echo_result(*compress_upca_to_upce(code))


@main.command("convert")
@click.argument("code")
def convert_command(code: str) -> None:
    """Convert CODE between UPC-A and UPC-E."""
    _echo_result(*convert(code))


@main.command("inspect")
@click.argument("codes", nargs=-1, required=True)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format (default: table)",
)
def inspect_command(codes: tuple[str, ...], output_format: str) -> None:
    """Summarize one or more CODES."""
    policy = get_settings().eight_digit_policy
    infos = [describe(code, policy) for code in codes]

    if output_format == "json":
        click.echo(format_json(infos))
    else:
        click.echo(format_table(infos))


if __name__ == "__main__":
    main()
