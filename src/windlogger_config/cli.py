"""
Command-line interface for the wind logger channel configuration.

Usage:
    python -m windlogger_config check /Volumes/SDCARD/channels.conf
    python -m windlogger_config show /Volumes/SDCARD
    python -m windlogger_config export channels.conf --output channels.csv
"""

from pathlib import Path

import typer

from .export import export_channels_csv
from .parser import CONFIG_FILENAME, MAX_LINE_LENGTH, ParseReport, load_channels_file
from .registry import FIELD_TABLES, MAX_CHANNELS, TYPE_KEYWORDS, UNREACHABLE_KINDS

app = typer.Typer(
    name="windlogger-config",
    help="Channel configuration checker for the wind data logger",
    add_completion=False,
)


def _load(config: Path, max_channels: int, verbose: bool) -> ParseReport:
    try:
        return load_channels_file(config, max_channels=max_channels, verbose=verbose)
    except FileNotFoundError as e:
        typer.echo(typer.style(f"ERROR: {e}", fg=typer.colors.RED))
        raise typer.Exit(2)


CONFIG_ARGUMENT = typer.Argument(
    ...,
    help=f"Path to {CONFIG_FILENAME} or to the SD card directory holding it",
    exists=True,
)

MAX_CHANNELS_OPTION = typer.Option(
    MAX_CHANNELS,
    "--max-channels", "-n",
    min=1,
    help="Number of channel slots on the logger",
)

VERBOSE_OPTION = typer.Option(
    False,
    "--verbose", "-v",
    help="Print verbose output",
)


@app.command()
def check(
    config: Path = CONFIG_ARGUMENT,
    max_channels: int = MAX_CHANNELS_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Check a channel configuration file.

    Reports every line that could not be applied and every channel that is
    missing required fields. Exits with status 1 if any line failed.
    """
    typer.echo(f"Checking: {config}")
    report = _load(config, max_channels, verbose)

    typer.echo(f"  {len(report.results)} lines, {len(report.errors)} errors")

    for result in report.errors:
        typer.echo(typer.style(f"  ERROR: {result.describe()}", fg=typer.colors.RED))
        typer.echo(f"    {result.line}")

    for view in report.table.channels():
        if view.complete:
            status = typer.style("OK", fg=typer.colors.GREEN)
            typer.echo(f"  {view.name}: {view.kind.value} {status}")
        else:
            missing = ", ".join(view.missing_fields)
            typer.echo(typer.style(
                f"  WARNING: {view.name}: {view.kind.value} missing {missing}",
                fg=typer.colors.YELLOW,
            ))

    if report.success:
        typer.echo(typer.style("Configuration valid", fg=typer.colors.GREEN))
    else:
        typer.echo(typer.style("Configuration has errors", fg=typer.colors.RED))
        raise typer.Exit(1)


@app.command()
def show(
    config: Path = CONFIG_ARGUMENT,
    max_channels: int = MAX_CHANNELS_OPTION,
):
    """
    Show the calibration settings of every declared channel.
    """
    report = _load(config, max_channels, verbose=False)
    channels = report.table.channels()
    if not channels:
        typer.echo("No channels declared")
        return

    for view in channels:
        state = "complete" if view.complete else "incomplete"
        typer.echo(f"{view.name} ({view.kind.value}, {state}):")
        for name, value in view.settings.model_dump().items():
            typer.echo(f"  {name} = {value}")


@app.command()
def export(
    config: Path = CONFIG_ARGUMENT,
    output: Path = typer.Option(
        Path("./channels.csv"),
        "--output", "-o",
        help="Output CSV file",
    ),
    complete_only: bool = typer.Option(
        False,
        "--complete-only",
        help="Only export channels with every required field set",
    ),
    max_channels: int = MAX_CHANNELS_OPTION,
    verbose: bool = VERBOSE_OPTION,
):
    """
    Export the resolved channel table to CSV.
    """
    report = _load(config, max_channels, verbose)
    if not report.success:
        typer.echo(typer.style(
            f"WARNING: {len(report.errors)} lines could not be applied",
            fg=typer.colors.YELLOW,
        ))

    csv_path = export_channels_csv(report.table, output, complete_only=complete_only, verbose=verbose)
    typer.echo(f"Exported channel table: {csv_path}")


@app.command()
def info():
    """
    Display configuration file format information.
    """
    typer.echo(f"{CONFIG_FILENAME} format:")
    typer.echo("  # comment")
    typer.echo("  ch<N>.type = <kind>")
    typer.echo("  ch<N>.<field> = <value>")
    typer.echo(f"  Channels: ch1..ch{MAX_CHANNELS}, lines up to {MAX_LINE_LENGTH - 1} characters")
    typer.echo("")
    typer.echo("Channel types:")
    for keyword, kind in TYPE_KEYWORDS:
        fields = ", ".join(spec.name for spec in FIELD_TABLES[kind])
        typer.echo(f"  {keyword}: {fields}")
    if UNREACHABLE_KINDS:
        names = ", ".join(sorted(kind.value for kind in UNREACHABLE_KINDS))
        typer.echo(f"  Not configurable from file: {names}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
