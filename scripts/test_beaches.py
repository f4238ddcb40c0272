#!/usr/bin/env python3
"""Test script for the beach database.

Run from project root:
    python scripts/test_beaches.py
"""

import sys
import tempfile
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from beachbuddy.core.beach import (
    BeachDatabase,
    BeachDatabaseError,
    distance_miles,
    format_distance,
    get_beach,
)


BEACHES_YAML = Path(__file__).parent.parent / "config" / "beaches.yaml"


def write_yaml(directory: str, text: str) -> Path:
    path = Path(directory) / "beaches.yaml"
    path.write_text(text)
    return path


def test_load_config():
    """All configured beaches load with their region."""
    db = BeachDatabase(BEACHES_YAML)

    assert db.beach_count == 5
    assert db.region == "Palm Harbor, FL"
    assert {b.id for b in db.get_all_beaches()} == {
        "honeymoon_island", "caladesi_island", "clearwater_beach", "sand_key", "fred_howard",
    }
    for beach in db.get_all_beaches():
        assert beach.noaa_station_id == "8726724"
        assert 27 < beach.coordinates.lat < 29
        assert -83 < beach.coordinates.lon < -82


def test_lookup():
    """Beaches are found by id or partial name."""
    db = BeachDatabase(BEACHES_YAML)

    clearwater = db.get_beach("clearwater_beach")
    assert clearwater.name == "Clearwater Beach"
    assert clearwater.facilities.lifeguard

    assert db.get_beach("atlantis") is None
    assert db.get_beach_by_name("sand key").id == "sand_key"
    assert db.get_beach_by_name("HONEYMOON").id == "honeymoon_island"
    assert db.get_beach_by_name("waikiki") is None


def test_facilities_and_parking():
    """Facility filters and parking tips."""
    db = BeachDatabase(BEACHES_YAML)

    lifeguarded = {b.id for b in db.get_beaches_with("lifeguard")}
    assert lifeguarded == {"clearwater_beach", "sand_key"}
    assert db.get_beaches_with("lifeguard", "food_nearby")[0].id == "clearwater_beach"
    assert not db.get_beach("fred_howard").has_facility("shower")
    assert not db.get_beach("fred_howard").has_facility("helipad")

    caladesi = db.get_beach("caladesi_island")
    assert caladesi.parking.available is False
    assert "Ferry" in caladesi.parking_tips
    assert caladesi.accessibility

    # No parking notes falls back to a generic tip
    assert db.get_beach("sand_key").parking_tips == "Check parking availability"


def test_favorites_first():
    """Favorites sort ahead of the rest, each group by name."""
    db = BeachDatabase(BEACHES_YAML)
    ordered = [b.id for b in db.sort_with_favorites(["sand_key", "caladesi_island"])]

    assert ordered[:2] == ["caladesi_island", "sand_key"]
    assert ordered[2:] == ["clearwater_beach", "fred_howard", "honeymoon_island"]


def test_default_database():
    """The default database finds config/beaches.yaml."""
    beach = get_beach("honeymoon_island")
    assert beach is not None
    assert beach.name == "Honeymoon Island State Park"


def test_missing_file():
    """A missing file raises FileNotFoundError."""
    with tempfile.TemporaryDirectory() as tmp:
        try:
            BeachDatabase(Path(tmp) / "nope.yaml")
        except FileNotFoundError:
            pass
        else:
            raise AssertionError("Expected FileNotFoundError")


def test_invalid_entries():
    """Duplicate ids and nameless entries are rejected."""
    duplicate = (
        "beaches:\n"
        "  - {id: a, name: Beach A}\n"
        "  - {id: a, name: Beach A again}\n"
    )
    nameless = "beaches:\n  - {id: b}\n"

    with tempfile.TemporaryDirectory() as tmp:
        for text in (duplicate, nameless):
            path = write_yaml(tmp, text)
            try:
                BeachDatabase(path)
            except BeachDatabaseError:
                continue
            raise AssertionError(f"Expected BeachDatabaseError for {text!r}")


def test_minimal_entry_defaults():
    """Missing sections default sensibly."""
    with tempfile.TemporaryDirectory() as tmp:
        db = BeachDatabase(write_yaml(tmp, "beaches:\n  - {id: tiny, name: Tiny Beach}\n"))

    beach = db.get_beach("tiny")
    assert db.region == ""
    assert beach.parking.available is True
    assert not beach.has_facility("restroom")
    assert beach.coordinates.lat == 0


def test_distance():
    """Haversine distances in miles between catalogue beaches."""
    db = BeachDatabase(BEACHES_YAML)
    clearwater = db.get_beach("clearwater_beach")
    sand_key = db.get_beach("sand_key")

    assert clearwater.distance_to(27.9772, -82.8270) == 0
    assert 1.4 < clearwater.distance_to(27.9553, -82.8271) < 1.6
    assert distance_miles(27.9772, -82.8270, 27.9553, -82.8271) == clearwater.distance_to(
        sand_key.coordinates.lat, sand_key.coordinates.lon
    )
    # Downtown Tampa is across the bay
    assert 22 < distance_miles(27.9772, -82.8270, 27.9506, -82.4572) < 23.5


def test_nearest_beach():
    """The nearest beach and distance ordering from a point."""
    db = BeachDatabase(BEACHES_YAML)

    assert db.nearest(28.0617, -82.8318).id == "honeymoon_island"
    assert db.nearest(27.98, -82.83).id == "clearwater_beach"

    ordered = [b.id for b in db.beaches_by_distance(28.1560, -82.8012)]
    assert ordered[:3] == ["fred_howard", "honeymoon_island", "caladesi_island"]
    assert len(ordered) == 5

    with tempfile.TemporaryDirectory() as tmp:
        empty = BeachDatabase(write_yaml(tmp, "beaches: []\n"))
    assert empty.nearest(28.0, -82.8) is None


def test_format_distance():
    """Short distances keep a decimal and longer ones round to whole miles."""
    assert format_distance(0) == "Less than 0.1 mi"
    assert format_distance(0.05) == "Less than 0.1 mi"
    assert format_distance(0.46) == "0.5 mi"
    assert format_distance(2.5) == "3 mi"
    assert format_distance(12.4) == "12 mi"


def run_all_tests():
    """Run all tests and report results."""
    print("\n" + "#"*60)
    print("# BEACH DATABASE TEST SUITE")
    print("#"*60)

    tests = [
        ("Load Config", test_load_config),
        ("Lookup", test_lookup),
        ("Facilities and Parking", test_facilities_and_parking),
        ("Favorites First", test_favorites_first),
        ("Default Database", test_default_database),
        ("Missing File", test_missing_file),
        ("Invalid Entries", test_invalid_entries),
        ("Minimal Entry Defaults", test_minimal_entry_defaults),
        ("Distance", test_distance),
        ("Nearest Beach", test_nearest_beach),
        ("Format Distance", test_format_distance),
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
