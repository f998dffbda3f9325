"""
Channel table: the configuration store populated by the line parser and
read by sensor-sampling code.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from .errors import SequencingError, TypeKeywordError, ValueParseError
from .models import ChannelKind, ChannelSettings, ChannelView
from .numeric import parse_float
from .registry import FIELD_TABLES, MAX_CHANNELS, SETTINGS_MODELS, full_mask, match_field


class ChannelSlot(BaseModel):
    """
    State of one channel slot.

    The settings variant is always the one registered for kind; fields_set
    records which fields have been written since the last type declaration.
    """
    kind: ChannelKind = Field(default=ChannelKind.INVALID, description="Declared channel kind")
    settings: Optional[ChannelSettings] = Field(default=None, description="Settings for the kind")
    fields_set: int = Field(default=0, description="Bitmask of supplied fields")

    @model_validator(mode="after")
    def check_variant(self) -> "ChannelSlot":
        if self.kind is ChannelKind.INVALID:
            if self.settings is not None:
                raise ValueError("an undeclared channel cannot hold settings")
        elif type(self.settings) is not SETTINGS_MODELS[self.kind]:
            raise ValueError(f"{self.kind.value} channel needs {SETTINGS_MODELS[self.kind].__name__}")
        return self

    @property
    def declared(self) -> bool:
        return self.kind is not ChannelKind.INVALID

    @property
    def complete(self) -> bool:
        return self.declared and self.fields_set == full_mask(self.kind)

    @property
    def missing_fields(self) -> List[str]:
        return [
            spec.name
            for spec in FIELD_TABLES.get(self.kind, ())
            if not self.fields_set & spec.bit
        ]


class ChannelTable:
    """
    Fixed-size table of channel slots, indexed from 0.

    Created empty, filled one line at a time by the parser, then read through
    get_channel() once the configuration has been loaded.
    """

    def __init__(self, max_channels: int = MAX_CHANNELS):
        if max_channels < 1:
            raise ValueError(f"max_channels must be at least 1, got {max_channels}")
        self.max_channels = max_channels
        self._slots = [ChannelSlot() for _ in range(max_channels)]

    def __len__(self) -> int:
        return self.max_channels

    def slot(self, index: int) -> ChannelSlot:
        if not 0 <= index < self.max_channels:
            raise IndexError(f"channel index {index} out of range 0..{self.max_channels - 1}")
        return self._slots[index]

    def clear_channel(self, index: int) -> None:
        """Return a channel to the undeclared state."""
        self.slot(index)
        self._slots[index] = ChannelSlot()

    def declare_channel(self, index: int, kind: ChannelKind) -> None:
        """
        Set the kind of a channel and start its settings afresh.

        Redeclaring a channel, even with the same kind, discards every field
        written so far.

        Raises:
            TypeKeywordError: If kind is INVALID
            IndexError: If index is out of range
        """
        self.slot(index)
        if kind is ChannelKind.INVALID:
            raise TypeKeywordError(f"cannot declare ch{index + 1} as {kind.value}")
        self._slots[index] = ChannelSlot(kind=kind, settings=SETTINGS_MODELS[kind]())

    def assign_field(self, index: int, field_name: str, raw_value: str) -> None:
        """
        Store one calibration field for a declared channel.

        Args:
            index: Zero-based channel index
            field_name: Field name from the file (case-insensitive)
            raw_value: Value text; a number, or for boolean fields anything
                whose first character is not '0' for True

        Raises:
            SequencingError: If the channel has no declared type
            FieldError: If the field is unknown for the channel's kind
            ValueParseError: If a numeric field's value is not a number
        """
        slot = self.slot(index)
        if not slot.declared:
            raise SequencingError(f"ch{index + 1}.{field_name} set before ch{index + 1}.type")

        spec = match_field(slot.kind, field_name)
        if spec.boolean:
            value = not raw_value.startswith("0")
        else:
            value, consumed = parse_float(raw_value)
            if not consumed:
                raise ValueParseError(f"ch{index + 1}.{spec.name}: '{raw_value}' is not a number")

        setattr(slot.settings, spec.attribute, value)
        slot.fields_set |= spec.bit

    def is_complete(self, index: int) -> bool:
        return self.slot(index).complete

    def get_channel(self, index: int) -> Optional[ChannelView]:
        """
        Read-only view of a channel, or None if it was never declared.

        Raises:
            IndexError: If index is out of range
        """
        slot = self.slot(index)
        if not slot.declared:
            return None
        return ChannelView(
            index=index,
            kind=slot.kind,
            settings=slot.settings.model_copy(),
            complete=slot.complete,
            missing_fields=slot.missing_fields,
        )

    def channels(self) -> List[ChannelView]:
        """Views of every declared channel, in index order."""
        views = (self.get_channel(i) for i in range(self.max_channels))
        return [view for view in views if view is not None]

    def complete_channels(self) -> List[ChannelView]:
        """Views of the channels that are safe to sample."""
        return [view for view in self.channels() if view.complete]
