"""Load condition snapshots from a CSV export.

The aggregation layer writes one row per forecast instant with weather, UV
and tide values already merged. Column names match ConditionSnapshot fields.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from beachbuddy.core.conditions import ConditionSnapshot


logger = logging.getLogger(__name__)


REQUIRED_COLUMNS = [
    "timestamp",
    "temp",
    "feels_like",
    "humidity",
    "cloud_cover",
    "weather_code",
    "wind_speed",
    "uv_index",
    "tide_type",
]

OPTIONAL_FLOAT_COLUMNS = ["wind_gust", "wind_direction", "uv_max", "tide_height"]
TIME_COLUMNS = ["timestamp", "sunrise", "sunset"]


class SnapshotLoadError(Exception):
    """Exception raised when a snapshot file cannot be read."""

    pass


def _optional(value):
    """Convert pandas missing values to None."""
    if value is None or pd.isna(value):
        return None
    return value


def _to_datetime(value):
    value = _optional(value)
    if value is None:
        return None
    return value.to_pydatetime()


def snapshots_from_frame(df: pd.DataFrame) -> list[ConditionSnapshot]:
    """Convert a DataFrame of conditions into snapshots in time order.

    Rows with missing required values are skipped.

    Args:
        df: One row per forecast instant

    Returns:
        List of ConditionSnapshot sorted by timestamp
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise SnapshotLoadError(f"Missing required columns: {', '.join(missing)}")

    df = df.copy()
    for col in TIME_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_datetime(df[col])

    incomplete = df[REQUIRED_COLUMNS].isna().any(axis=1)
    if incomplete.any():
        logger.warning(f"Skipping {int(incomplete.sum())} rows with missing required values")
        df = df[~incomplete]

    df = df.sort_values("timestamp", kind="stable")

    snapshots = []
    for row in df.to_dict("records"):
        snapshots.append(ConditionSnapshot(
            timestamp=_to_datetime(row["timestamp"]),
            temp=float(row["temp"]),
            feels_like=float(row["feels_like"]),
            humidity=float(row["humidity"]),
            cloud_cover=float(row["cloud_cover"]),
            weather_code=str(row["weather_code"]),
            weather_description=str(_optional(row.get("weather_description")) or ""),
            wind_speed=float(row["wind_speed"]),
            wind_gust=_float_or_none(row.get("wind_gust")),
            wind_direction=_float_or_none(row.get("wind_direction")),
            uv_index=float(row["uv_index"]),
            uv_max=_float_or_none(row.get("uv_max")),
            tide_type=str(row["tide_type"]).strip().lower(),
            tide_height=_float_or_none(row.get("tide_height")),
            sunrise=_to_datetime(row.get("sunrise")),
            sunset=_to_datetime(row.get("sunset")),
            beach_id=_optional(row.get("beach_id")),
        ))

    return snapshots


def _float_or_none(value) -> Optional[float]:
    value = _optional(value)
    return None if value is None else float(value)


def load_snapshots(
    csv_path: Union[str, Path],
    beach_id: Optional[str] = None,
) -> list[ConditionSnapshot]:
    """Load snapshots from a CSV file.

    Args:
        csv_path: Path to the CSV export
        beach_id: Only keep rows for this beach, when the file has a beach_id column

    Returns:
        List of ConditionSnapshot sorted by timestamp
    """
    try:
        df = pd.read_csv(csv_path, dtype={"weather_code": str, "beach_id": str})
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise SnapshotLoadError(f"Failed to read snapshots from {csv_path}: {e}") from e

    if beach_id is not None and "beach_id" in df.columns:
        df = df[df["beach_id"] == beach_id]

    snapshots = snapshots_from_frame(df)
    logger.info(f"Loaded {len(snapshots)} snapshots from {csv_path}")
    return snapshots
