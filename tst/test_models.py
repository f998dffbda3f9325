"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from windlogger_config.models import (
    ChannelKind,
    ChannelView,
    CurrentSettings,
    ErrorKind,
    LineResult,
    ThermistorSettings,
    VoltageSettings,
)


class TestChannelKind:
    def test_enum_values(self):
        assert ChannelKind.VOLTAGE == "voltage"
        assert ChannelKind.CURRENT == "current"
        assert ChannelKind.TEMPERATURE_C == "temperature_c"
        assert ChannelKind.INVALID == "invalid"

    def test_enum_from_string(self):
        assert ChannelKind("current") == ChannelKind.CURRENT


class TestSettings:
    def test_voltage_defaults(self):
        settings = VoltageSettings()
        assert (settings.mv_per_bit, settings.r1, settings.r2) == (0.0, 0.0, 0.0)

    def test_current_from_dict(self):
        settings = CurrentSettings.model_validate({"mv_per_bit": 4.88, "offset": 2500, "mv_per_amp": 40})
        assert settings.offset == 2500.0

    def test_thermistor_highside_default(self):
        assert ThermistorSettings().highside is False


class TestChannelView:
    def _view(self, **kwargs) -> ChannelView:
        fields = dict(
            index=0,
            kind=ChannelKind.VOLTAGE,
            settings=VoltageSettings(mv_per_bit=5.0, r1=680000, r2=46000),
            complete=True,
        )
        fields.update(kwargs)
        return ChannelView(**fields)

    def test_name_is_one_based(self):
        assert self._view(index=2).name == "ch3"

    def test_frozen(self):
        view = self._view()
        with pytest.raises(ValidationError):
            view.complete = False

    def test_to_csv_row(self):
        row = self._view().to_csv_row()
        assert row["channel"] == "ch1"
        assert row["kind"] == "voltage"
        assert row["complete"] is True
        assert row["r1"] == 680000.0

    def test_thermistor_row(self):
        view = self._view(
            kind=ChannelKind.TEMPERATURE_C,
            settings=ThermistorSettings(highside=True),
            complete=False,
            missing_fields=["maxadc"],
        )
        row = view.to_csv_row()
        assert row["highside"] is True
        assert "r1" not in row


class TestLineResult:
    def test_describe_success(self):
        result = LineResult(line_number=3, line="# hi", success=True, skipped=True)
        assert result.describe() == "line 3: ok"

    def test_describe_failure(self):
        result = LineResult(
            line_number=7,
            line="ch1.r1 = x",
            success=False,
            error_kind=ErrorKind.VALUE,
            message="ch1.r1: 'x' is not a number",
        )
        assert result.describe() == "line 7 [value]: ch1.r1: 'x' is not a number"
