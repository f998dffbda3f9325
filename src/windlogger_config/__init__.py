"""
Windlogger Config - Channel configuration parser for the wind data logger

Reads the channels.conf file from the logger's SD card into a validated
channel table of per-channel sensor calibration.
"""

from .models import (
    ChannelKind,
    ErrorKind,
    VoltageSettings,
    CurrentSettings,
    ThermistorSettings,
    ChannelView,
    LineResult,
)
from .errors import (
    ConfigError,
    GrammarError,
    ResolutionError,
    SequencingError,
    TypeKeywordError,
    FieldError,
    ValueParseError,
)
from .registry import (
    MAX_CHANNELS,
    UNREACHABLE_KINDS,
    parse_kind,
    resolve_channel,
)
from .table import ChannelTable
from .parser import (
    CONFIG_FILENAME,
    MAX_LINE_LENGTH,
    ParseReport,
    process_line,
    parse_lines,
    load_channels_file,
)
from .export import channels_to_dataframe, export_channels_csv

__version__ = "0.1.0"
__all__ = [
    "ChannelKind",
    "ErrorKind",
    "VoltageSettings",
    "CurrentSettings",
    "ThermistorSettings",
    "ChannelView",
    "LineResult",
    "ConfigError",
    "GrammarError",
    "ResolutionError",
    "SequencingError",
    "TypeKeywordError",
    "FieldError",
    "ValueParseError",
    "MAX_CHANNELS",
    "UNREACHABLE_KINDS",
    "parse_kind",
    "resolve_channel",
    "ChannelTable",
    "CONFIG_FILENAME",
    "MAX_LINE_LENGTH",
    "ParseReport",
    "process_line",
    "parse_lines",
    "load_channels_file",
    "channels_to_dataframe",
    "export_channels_csv",
]
