#!/usr/bin/env python3
"""Test script for loading condition snapshots from CSV.

Run from project root:
    python scripts/test_loader.py
"""

import sys
import tempfile
from datetime import datetime
from pathlib import Path

import pandas as pd

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from beachbuddy.plans.loader import SnapshotLoadError, load_snapshots, snapshots_from_frame


CSV_TEXT = """\
timestamp,beach_id,temp,feels_like,humidity,cloud_cover,weather_code,weather_description,wind_speed,wind_gust,uv_index,tide_type,tide_height,sunrise,sunset
2025-06-14 12:00,honeymoon_island,88,92,65,20,02d,few clouds,9,,8,Rising ,1.4,2025-06-14 06:35,2025-06-14 20:25
2025-06-14 09:00,honeymoon_island,84,86,70,5,01d,clear sky,6,12,5,slack,0.9,2025-06-14 06:35,2025-06-14 20:25
2025-06-14 15:00,honeymoon_island,90,97,55,60,,,12,20,,high,2.1,2025-06-14 06:35,2025-06-14 20:25
2025-06-14 09:00,sand_key,83,85,70,5,01d,clear sky,7,,5,low,0.5,2025-06-14 06:36,2025-06-14 20:26
"""


def write_csv(directory: str, text: str = CSV_TEXT) -> Path:
    path = Path(directory) / "forecast.csv"
    path.write_text(text)
    return path


def make_frame(**overrides) -> pd.DataFrame:
    data = {
        "timestamp": ["2025-06-14 15:00", "2025-06-14 12:00"],
        "temp": [90, 88],
        "feels_like": [95, 91],
        "humidity": [55, 60],
        "cloud_cover": [40, 10],
        "weather_code": ["03d", "01d"],
        "wind_speed": [11, 8],
        "uv_index": [7, 9],
        "tide_type": ["falling", "low"],
    }
    data.update(overrides)
    return pd.DataFrame(data)


def test_frame_to_snapshots():
    """DataFrame rows become snapshots sorted by time."""
    snapshots = snapshots_from_frame(make_frame())

    assert [s.timestamp for s in snapshots] == [
        datetime(2025, 6, 14, 12), datetime(2025, 6, 14, 15),
    ]
    first = snapshots[0]
    assert first.feels_like == 91
    assert first.weather_code == "01d"
    assert first.tide_type == "low"
    assert first.wind_gust is None
    assert first.sunrise is None
    assert first.beach_id is None
    assert first.weather_description == ""


def test_optional_columns():
    """Optional columns are read when present, missing values become None."""
    frame = make_frame(
        wind_gust=[None, 18],
        sunrise=["2025-06-14 06:35", "2025-06-14 06:35"],
        sunset=["2025-06-14 20:25", None],
    )
    snapshots = snapshots_from_frame(frame)

    assert snapshots[0].wind_gust == 18.0
    assert snapshots[1].wind_gust is None
    assert snapshots[0].sunset is None
    assert snapshots[1].sunset == datetime(2025, 6, 14, 20, 25)
    assert snapshots[1].has_daylight_bounds


def test_missing_column():
    """Missing required columns are an error."""
    frame = make_frame().drop(columns=["uv_index"])
    try:
        snapshots_from_frame(frame)
    except SnapshotLoadError as e:
        assert "uv_index" in str(e)
    else:
        raise AssertionError("Expected SnapshotLoadError")


def test_load_csv():
    """CSV rows load with codes kept as text and incomplete rows skipped."""
    with tempfile.TemporaryDirectory() as tmp:
        path = write_csv(tmp)

        everything = load_snapshots(path)
        honeymoon = load_snapshots(path, beach_id="honeymoon_island")
        sand_key = load_snapshots(str(path), beach_id="sand_key")

    # 15:00 row has no weather code or UV index
    assert len(everything) == 3
    assert [s.timestamp.hour for s in honeymoon] == [9, 12]
    assert len(sand_key) == 1

    first, second = honeymoon
    assert first.weather_code == "01d"
    assert first.wind_gust == 12.0
    assert first.beach_id == "honeymoon_island"
    assert second.weather_code == "02d"
    assert second.weather_description == "few clouds"
    assert second.tide_type == "rising"
    assert second.tide_height == 1.4
    assert second.wind_gust is None
    assert second.sunrise == datetime(2025, 6, 14, 6, 35)


def test_load_errors():
    """Unreadable files raise SnapshotLoadError."""
    with tempfile.TemporaryDirectory() as tmp:
        for path in (Path(tmp) / "missing.csv", write_csv(tmp, "")):
            try:
                load_snapshots(path)
            except SnapshotLoadError:
                continue
            raise AssertionError(f"Expected SnapshotLoadError for {path}")


def run_all_tests():
    """Run all tests and report results."""
    print("\n" + "#"*60)
    print("# SNAPSHOT LOADER TEST SUITE")
    print("#"*60)

    tests = [
        ("Frame to Snapshots", test_frame_to_snapshots),
        ("Optional Columns", test_optional_columns),
        ("Missing Column", test_missing_column),
        ("Load CSV", test_load_csv),
        ("Load Errors", test_load_errors),
    ]

    passed = 0
    failed = 0

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
            print(f"  ✓ {name}")
        except AssertionError as e:
            failed += 1
            print(f"\n  ✗ FAILED: {name}")
            print(f"    Error: {e}")
        except Exception as e:
            failed += 1
            print(f"\n  ✗ ERROR: {name}")
            print(f"    Exception: {e}")

    print("\n" + "="*60)
    print(f"  Passed: {passed}  Failed: {failed}  Total: {len(tests)}")
    print("="*60)

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
