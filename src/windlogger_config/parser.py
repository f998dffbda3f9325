"""
Line parser for channels.conf.

Processes configuration lines one at a time against a ChannelTable. A bad
line is recorded and skipped; every remaining line is still processed.

File format:
    # comment
    ch1.type = voltage
    ch1.mvperbit = 5.0
    ch1.r1 = 680000
    ch1.r2 = 46000
"""

from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError, GrammarError, TypeKeywordError
from .models import ChannelKind, LineResult
from .registry import MAX_CHANNELS, parse_kind, resolve_channel
from .table import ChannelTable
from .text import fold_lower, is_blank, split_trim

CONFIG_FILENAME = "channels.conf"

# Line buffer size of the logger firmware; one byte holds the terminator,
# so accepted lines are at most MAX_LINE_LENGTH - 1 characters.
MAX_LINE_LENGTH = 32

COMMENT_CHAR = "#"
TYPE_FIELD = "type"


class ParseReport(BaseModel):
    """Channel table plus the outcome of every line that produced it."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    table: ChannelTable = Field(description="Populated channel table")
    results: List[LineResult] = Field(default_factory=list, description="Per-line outcomes")

    @property
    def success(self) -> bool:
        """True only if every line succeeded."""
        return all(result.success for result in self.results)

    @property
    def errors(self) -> List[LineResult]:
        return [result for result in self.results if not result.success]


def apply_line(table: ChannelTable, line: str, max_line_length: int = MAX_LINE_LENGTH) -> bool:
    """
    Apply one configuration line to table.

    Returns:
        False for blank and comment lines, True when the line changed the table

    Raises:
        ConfigError: If the line is malformed or cannot be applied
    """
    if is_blank(line) or line.lstrip().startswith(COMMENT_CHAR):
        return False

    if len(line) >= max_line_length:
        raise GrammarError(f"line longer than {max_line_length - 1} characters")

    working = fold_lower(line)
    setting, value = split_trim(working, "=")
    channel_token, field_token = split_trim(setting, ".")

    index = resolve_channel(channel_token, table.max_channels)

    if field_token == TYPE_FIELD:
        kind = parse_kind(value)
        if kind is ChannelKind.INVALID:
            table.clear_channel(index)
            raise TypeKeywordError(f"unknown channel type '{value}'")
        table.declare_channel(index, kind)
    else:
        table.assign_field(index, field_token, value)

    return True


def process_line(
    table: ChannelTable,
    line: str,
    line_number: int = 0,
    max_line_length: int = MAX_LINE_LENGTH,
) -> LineResult:
    """
    Apply one line and record its outcome instead of raising.

    Args:
        table: Channel table to update
        line: Raw line, with or without its terminator
        line_number: One-based position of the line in its source
        max_line_length: Line buffer size; longer lines are rejected

    Returns:
        LineResult describing the outcome
    """
    line = line.rstrip("\r\n")
    try:
        applied = apply_line(table, line, max_line_length)
    except ConfigError as e:
        return LineResult(
            line_number=line_number,
            line=line,
            success=False,
            error_kind=e.kind,
            message=e.message,
        )
    return LineResult(line_number=line_number, line=line, success=True, skipped=not applied)


def parse_lines(
    lines: Iterable[str],
    table: Optional[ChannelTable] = None,
    max_channels: int = MAX_CHANNELS,
    max_line_length: int = MAX_LINE_LENGTH,
    verbose: bool = False,
) -> ParseReport:
    """
    Parse a sequence of configuration lines.

    Args:
        lines: Lines in file order
        table: Table to populate (default: a new table of max_channels slots)
        max_channels: Slot count for a new table
        max_line_length: Line buffer size; longer lines are rejected
        verbose: Print each failed line

    Returns:
        ParseReport with the table and one LineResult per line
    """
    if table is None:
        table = ChannelTable(max_channels)

    report = ParseReport(table=table)
    for line_number, line in enumerate(lines, start=1):
        result = process_line(table, line, line_number, max_line_length)
        report.results.append(result)
        if verbose and not result.success:
            print(f"  Error: {result.describe()}")

    if verbose:
        print(f"  Processed {len(report.results)} lines, {len(report.errors)} errors")
        for view in table.channels():
            state = "complete" if view.complete else "incomplete"
            print(f"    {view.name}: {view.kind.value} ({state})")

    return report


def find_config_file(directory: Path) -> Optional[Path]:
    """
    Locate channels.conf in a directory (e.g., SD card mount).

    The name is matched case-insensitively, since FAT cards often report
    upper-case names.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return None
    for item in sorted(directory.iterdir()):
        if item.is_file() and item.name.lower() == CONFIG_FILENAME:
            return item
    return None


def load_channels_file(
    filepath: Path,
    max_channels: int = MAX_CHANNELS,
    max_line_length: int = MAX_LINE_LENGTH,
    verbose: bool = False,
) -> ParseReport:
    """
    Read and parse a channels.conf file.

    Args:
        filepath: Path to the configuration file, or to a directory holding it
        max_channels: Number of channel slots
        max_line_length: Line buffer size; longer lines are rejected
        verbose: Print progress messages

    Returns:
        ParseReport for the file

    Raises:
        FileNotFoundError: If the file (or a config file in the directory) is absent
    """
    filepath = Path(filepath)
    if filepath.is_dir():
        found = find_config_file(filepath)
        if found is None:
            raise FileNotFoundError(f"{CONFIG_FILENAME} not found in {filepath}")
        filepath = found

    if verbose:
        print(f"Reading channel configuration: {filepath}")

    with open(filepath, "r", encoding="ascii", errors="replace") as f:
        return parse_lines(
            f,
            max_channels=max_channels,
            max_line_length=max_line_length,
            verbose=verbose,
        )
