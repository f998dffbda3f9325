"""
Pytest fixtures for windlogger_config tests.

Provides sample configuration lines and channels.conf files.
"""

import pytest

from windlogger_config.table import ChannelTable


@pytest.fixture
def voltage_lines() -> list:
    """A complete voltage divider channel on ch1."""
    return [
        "ch1.type=voltage",
        "ch1.mvperbit=5.0",
        "ch1.r1=680000",
        "ch1.r2=46000",
    ]


@pytest.fixture
def full_config_lines() -> list:
    """A channels.conf with one channel of each configurable kind."""
    return [
        "# Wind logger channels",
        "",
        "ch1.type = voltage",
        "ch1.mvperbit = 4.88",
        "ch1.r1 = 680000",
        "ch1.r2 = 46000",
        "   ",
        "# Battery current",
        "ch2.type = current",
        "ch2.mvperbit = 4.88",
        "ch2.offset = 2500",
        "ch2.mvperamp = 40",
        "ch3.type = temperature_c",
        "ch3.maxadc = 1023",
        "ch3.b = 4220",
        "ch3.r25 = 10000",
        "ch3.otherr = 10000",
        "ch3.highside = 1",
    ]


@pytest.fixture
def config_file(tmp_path, full_config_lines):
    """Write full_config_lines to channels.conf in an SD card directory."""
    sd_dir = tmp_path / "SDCARD"
    sd_dir.mkdir()
    path = sd_dir / "channels.conf"
    path.write_text("\n".join(full_config_lines) + "\n")
    return path


@pytest.fixture
def bad_config_file(tmp_path, voltage_lines):
    """A channels.conf with one unusable line."""
    path = tmp_path / "channels.conf"
    path.write_text("\n".join(voltage_lines + ["ch2.r1 = 100"]) + "\n")
    return path


@pytest.fixture
def table() -> ChannelTable:
    """Empty channel table of the default size."""
    return ChannelTable()
