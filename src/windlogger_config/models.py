"""
Pydantic models for wind logger channel configuration.

Defines the channel kinds, the per-kind calibration settings and the
read-only views and per-line results handed to downstream code.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ChannelKind(str, Enum):
    """Channel kind enumeration matching the logger's channel types."""
    VOLTAGE = "voltage"
    CURRENT = "current"
    TEMPERATURE_C = "temperature_c"
    TEMPERATURE_F = "temperature_f"
    TEMPERATURE_K = "temperature_k"
    INVALID = "invalid"


class ErrorKind(str, Enum):
    """Categories of per-line configuration errors."""
    GRAMMAR = "grammar"
    RESOLUTION = "resolution"
    SEQUENCING = "sequencing"
    TYPE = "type"
    FIELD = "field"
    VALUE = "value"


# ==================== Settings Variants ====================


class VoltageSettings(BaseModel):
    """Voltage divider calibration (external voltage input)."""
    mv_per_bit: float = Field(default=0.0, description="ADC resolution in millivolts per bit")
    r1: float = Field(default=0.0, description="Upper divider resistor in ohms")
    r2: float = Field(default=0.0, description="Lower divider resistor in ohms")


class CurrentSettings(BaseModel):
    """Hall-effect current sensor calibration."""
    mv_per_bit: float = Field(default=0.0, description="ADC resolution in millivolts per bit")
    offset: float = Field(default=0.0, description="Sensor zero-current offset in millivolts")
    mv_per_amp: float = Field(default=0.0, description="Sensor sensitivity in millivolts per amp")


class ThermistorSettings(BaseModel):
    """
    Thermistor calibration, shared by the Celsius, Fahrenheit and Kelvin kinds.

    The thermistor forms a divider with a fixed resistor; highside is True
    when the thermistor sits between the supply and the ADC input.
    """
    max_adc: float = Field(default=0.0, description="Full-scale ADC reading")
    b: float = Field(default=0.0, description="Thermistor B coefficient")
    r25: float = Field(default=0.0, description="Thermistor resistance at 25C in ohms")
    other_r: float = Field(default=0.0, description="Fixed divider resistor in ohms")
    highside: bool = Field(default=False, description="Thermistor on the high side of the divider")


ChannelSettings = Union[VoltageSettings, CurrentSettings, ThermistorSettings]


# ==================== Consumer Views ====================


class ChannelView(BaseModel):
    """
    Read-only snapshot of one configured channel.

    Sensor-sampling code must treat a channel with complete=False as unusable.
    """
    index: int = Field(description="Zero-based channel index")
    kind: ChannelKind = Field(description="Declared channel kind")
    settings: ChannelSettings = Field(description="Calibration settings for the kind")
    complete: bool = Field(description="All required fields have been supplied")
    missing_fields: List[str] = Field(
        default_factory=list,
        description="Configuration field names not yet supplied",
    )

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        """Channel name as written in the configuration file."""
        return f"ch{self.index + 1}"

    def to_csv_row(self) -> Dict:
        """Convert to dictionary for CSV export."""
        row = {
            "channel": self.name,
            "index": self.index,
            "kind": self.kind.value,
            "complete": self.complete,
        }
        row.update(self.settings.model_dump())
        return row


class LineResult(BaseModel):
    """Outcome of processing a single configuration line."""
    line_number: int = Field(description="One-based line number in the source")
    line: str = Field(description="Line text without its terminator")
    success: bool = Field(description="Line was applied or ignored without error")
    skipped: bool = Field(default=False, description="Blank or comment line")
    error_kind: Optional[ErrorKind] = Field(default=None, description="Error category on failure")
    message: Optional[str] = Field(default=None, description="Error description on failure")

    def describe(self) -> str:
        if self.success:
            return f"line {self.line_number}: ok"
        return f"line {self.line_number} [{self.error_kind.value}]: {self.message}"
