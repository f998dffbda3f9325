"""
Static channel tables: channel token resolution, type keywords and the
per-kind field tables used to parse calibration settings.
"""

from typing import Dict, NamedTuple, Tuple, Type

from .errors import FieldError, ResolutionError
from .models import (
    ChannelKind,
    ChannelSettings,
    CurrentSettings,
    ThermistorSettings,
    VoltageSettings,
)
from .text import fold_lower

# Number of channel slots on the logger board
MAX_CHANNELS = 8

CHANNEL_PREFIX = "ch"

# ==================== Type Keywords ====================
# Order matters: a value matches the first keyword it starts with.

TYPE_KEYWORDS: Tuple[Tuple[str, ChannelKind], ...] = (
    ("voltage", ChannelKind.VOLTAGE),
    ("current", ChannelKind.CURRENT),
    ("temperature_c", ChannelKind.TEMPERATURE_C),
)

# Kinds with no keyword in TYPE_KEYWORDS cannot be declared from a file.
UNREACHABLE_KINDS = frozenset(
    kind
    for kind in ChannelKind
    if kind is not ChannelKind.INVALID
    and kind not in {k for _, k in TYPE_KEYWORDS}
)

SETTINGS_MODELS: Dict[ChannelKind, Type[ChannelSettings]] = {
    ChannelKind.VOLTAGE: VoltageSettings,
    ChannelKind.CURRENT: CurrentSettings,
    ChannelKind.TEMPERATURE_C: ThermistorSettings,
    ChannelKind.TEMPERATURE_F: ThermistorSettings,
    ChannelKind.TEMPERATURE_K: ThermistorSettings,
}

# ==================== Field Tables ====================


class FieldSpec(NamedTuple):
    """One settable field: file name, completeness bit and model attribute."""
    name: str
    bit: int
    attribute: str
    boolean: bool = False


VOLTAGE_FIELDS = (
    FieldSpec("mvperbit", 0x01, "mv_per_bit"),
    FieldSpec("r1", 0x02, "r1"),
    FieldSpec("r2", 0x04, "r2"),
)

CURRENT_FIELDS = (
    FieldSpec("mvperbit", 0x01, "mv_per_bit"),
    FieldSpec("offset", 0x02, "offset"),
    FieldSpec("mvperamp", 0x04, "mv_per_amp"),
)

THERMISTOR_FIELDS = (
    FieldSpec("maxadc", 0x01, "max_adc"),
    FieldSpec("b", 0x02, "b"),
    FieldSpec("r25", 0x04, "r25"),
    FieldSpec("otherr", 0x08, "other_r"),
    FieldSpec("highside", 0x10, "highside", boolean=True),
)

FIELD_TABLES: Dict[ChannelKind, Tuple[FieldSpec, ...]] = {
    ChannelKind.VOLTAGE: VOLTAGE_FIELDS,
    ChannelKind.CURRENT: CURRENT_FIELDS,
    ChannelKind.TEMPERATURE_C: THERMISTOR_FIELDS,
    ChannelKind.TEMPERATURE_F: THERMISTOR_FIELDS,
    ChannelKind.TEMPERATURE_K: THERMISTOR_FIELDS,
}


def full_mask(kind: ChannelKind) -> int:
    """Bitmask with every required field of kind set (0 for INVALID)."""
    mask = 0
    for spec in FIELD_TABLES.get(kind, ()):
        mask |= spec.bit
    return mask


def match_field(kind: ChannelKind, field_name: str) -> FieldSpec:
    """
    Look up a field name in the table for kind.

    A name matches an entry when it equals the entry's name or starts with it.
    No two entries of one table share a prefix, so the first match is the
    only match.

    Raises:
        FieldError: If no entry matches
    """
    name = fold_lower(field_name)
    for spec in FIELD_TABLES.get(kind, ()):
        if name.startswith(spec.name):
            return spec
    raise FieldError(f"unknown {kind.value} field '{field_name}'")


# ==================== Resolution ====================


def resolve_channel(token: str, max_channels: int = MAX_CHANNELS) -> int:
    """
    Convert a channel token to a zero-based channel index.

    Args:
        token: Channel token, e.g. "ch3" (case-insensitive)
        max_channels: Number of channel slots available

    Returns:
        Zero-based index (file channels are numbered from 1)

    Raises:
        ResolutionError: On a missing "ch" prefix, a non-numeric suffix,
            a number below 1 or a number above max_channels

    Examples:
        "ch1" -> 0
        "CH3" -> 2
        "ch0" -> ResolutionError
    """
    folded = fold_lower(token)
    if not folded.startswith(CHANNEL_PREFIX):
        raise ResolutionError(f"channel '{token}' does not start with '{CHANNEL_PREFIX}'")

    digits = folded[len(CHANNEL_PREFIX):]
    if not (digits.isascii() and digits.isdigit()):
        raise ResolutionError(f"channel '{token}' has no channel number")

    significant = digits.lstrip("0")
    if not significant:
        raise ResolutionError(f"channel '{token}': channels are numbered from 1")
    if len(significant) > len(str(max_channels)) or int(significant) > max_channels:
        raise ResolutionError(f"channel '{token}': only {max_channels} channels available")

    return int(significant) - 1


def parse_kind(token: str) -> ChannelKind:
    """
    Map a type keyword to a ChannelKind.

    Matching is case-insensitive; a token matches a keyword when it starts
    with it. Returns ChannelKind.INVALID when no keyword matches.
    """
    folded = fold_lower(token)
    for keyword, kind in TYPE_KEYWORDS:
        if folded.startswith(keyword):
            return kind
    return ChannelKind.INVALID
