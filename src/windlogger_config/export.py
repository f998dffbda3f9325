"""
CSV export of a resolved channel table.
"""

from pathlib import Path

import pandas as pd

from .table import ChannelTable

# Settings columns of every variant; a channel leaves the others empty.
CSV_COLUMNS = [
    "channel",
    "index",
    "kind",
    "complete",
    "mv_per_bit",
    "r1",
    "r2",
    "offset",
    "mv_per_amp",
    "max_adc",
    "b",
    "r25",
    "other_r",
    "highside",
]


def channels_to_dataframe(table: ChannelTable, complete_only: bool = False) -> pd.DataFrame:
    """
    Build a DataFrame with one row per declared channel.

    Args:
        table: Populated channel table
        complete_only: Leave out channels with missing fields

    Returns:
        DataFrame with CSV_COLUMNS columns
    """
    views = table.complete_channels() if complete_only else table.channels()
    return pd.DataFrame([view.to_csv_row() for view in views], columns=CSV_COLUMNS)


def export_channels_csv(
    table: ChannelTable,
    output_path: Path,
    complete_only: bool = False,
    verbose: bool = False,
) -> Path:
    """
    Write the channel table to a CSV file.

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = channels_to_dataframe(table, complete_only=complete_only)
    df.to_csv(output_path, index=False)

    if verbose:
        print(f"Wrote {output_path.name}: {len(df)} channels")

    return output_path
