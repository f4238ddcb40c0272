"""Beach model and database loader.

Loads beach definitions from beaches.yaml and provides a clean interface
for looking up beaches and filtering them by facilities.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


EARTH_RADIUS_MILES = 3959


class BeachDatabaseError(Exception):
    """Exception raised for malformed beach definitions."""

    pass


@dataclass
class Coordinates:
    """Geographic coordinates."""
    lat: float
    lon: float


@dataclass
class Facilities:
    """Amenities available at a beach."""
    restroom: bool = False
    shower: bool = False
    lifeguard: bool = False
    food_nearby: bool = False
    shade_structures: bool = False
    beach_wheelchair: bool = False


@dataclass
class Parking:
    """Parking information."""
    available: bool = True
    cost: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class Beach:
    """Complete beach model."""
    id: str
    name: str
    coordinates: Coordinates
    noaa_station_id: str
    facilities: Facilities = field(default_factory=Facilities)
    parking: Parking = field(default_factory=Parking)
    description: str = ""
    accessibility: Optional[str] = None

    @property
    def parking_tips(self) -> str:
        return self.parking.notes or "Check parking availability"

    def has_facility(self, facility: str) -> bool:
        return bool(getattr(self.facilities, facility, False))

    def distance_to(self, lat: float, lon: float) -> float:
        """Great-circle distance in miles from a point to this beach."""
        return distance_miles(lat, lon, self.coordinates.lat, self.coordinates.lon)


class BeachDatabase:
    """Database of beaches loaded from YAML."""

    def __init__(self, beaches_path: Optional[Path] = None):
        """Initialize the beach database.

        Args:
            beaches_path: Path to beaches.yaml. Defaults to config/beaches.yaml.
        """
        if beaches_path is None:
            # Find config relative to this file or cwd
            possible_paths = [
                Path(__file__).parent.parent.parent / "config" / "beaches.yaml",
                Path.cwd() / "config" / "beaches.yaml",
            ]
            for path in possible_paths:
                if path.exists():
                    beaches_path = path
                    break

        if beaches_path is None or not Path(beaches_path).exists():
            raise FileNotFoundError("Could not find beaches.yaml")

        self.beaches_path = Path(beaches_path)
        self._beaches: dict[str, Beach] = {}
        self.region: str = ""
        self._load_beaches()

    def _load_beaches(self) -> None:
        """Load beaches from YAML file."""
        with open(self.beaches_path) as f:
            data = yaml.safe_load(f) or {}

        self.region = data.get("region", "")

        for beach_data in data.get("beaches", []):
            beach = self._parse_beach(beach_data)
            if beach.id in self._beaches:
                raise BeachDatabaseError(f"Duplicate beach id: {beach.id}")
            self._beaches[beach.id] = beach

    def _parse_beach(self, data: dict) -> Beach:
        """Parse a beach dictionary into a Beach object."""
        if "id" not in data or "name" not in data:
            raise BeachDatabaseError(f"Beach entry missing id or name: {data}")

        coords = data.get("coordinates", {})
        facilities = data.get("facilities", {})
        parking = data.get("parking", {})

        return Beach(
            id=data["id"],
            name=data["name"],
            coordinates=Coordinates(
                lat=coords.get("lat", 0),
                lon=coords.get("lon", 0),
            ),
            noaa_station_id=str(data.get("noaa_station_id", "")),
            facilities=Facilities(
                restroom=facilities.get("restroom", False),
                shower=facilities.get("shower", False),
                lifeguard=facilities.get("lifeguard", False),
                food_nearby=facilities.get("food_nearby", False),
                shade_structures=facilities.get("shade_structures", False),
                beach_wheelchair=facilities.get("beach_wheelchair", False),
            ),
            parking=Parking(
                available=parking.get("available", True),
                cost=parking.get("cost"),
                notes=parking.get("notes"),
            ),
            description=data.get("description", ""),
            accessibility=data.get("accessibility"),
        )

    def get_beach(self, beach_id: str) -> Optional[Beach]:
        """Get a beach by ID.

        Args:
            beach_id: Beach identifier (e.g., "honeymoon_island")

        Returns:
            Beach or None if not found
        """
        return self._beaches.get(beach_id)

    def get_beach_by_name(self, name: str) -> Optional[Beach]:
        """Get a beach by name (case-insensitive partial match)."""
        name_lower = name.lower()
        for beach in self._beaches.values():
            if name_lower in beach.name.lower():
                return beach
        return None

    def get_all_beaches(self) -> list[Beach]:
        """Get all beaches."""
        return list(self._beaches.values())

    def get_beaches_with(self, *facilities: str) -> list[Beach]:
        """Get beaches offering every listed facility (e.g. "lifeguard")."""
        return [
            beach for beach in self._beaches.values()
            if all(beach.has_facility(f) for f in facilities)
        ]

    def sort_with_favorites(self, favorites: list[str]) -> list[Beach]:
        """All beaches with favorites first, each group alphabetical."""
        return sorted(
            self._beaches.values(),
            key=lambda b: (b.id not in favorites, b.name.lower()),
        )

    def beaches_by_distance(self, lat: float, lon: float) -> list[Beach]:
        """All beaches ordered nearest first from a point."""
        return sorted(self._beaches.values(), key=lambda b: b.distance_to(lat, lon))

    def nearest(self, lat: float, lon: float) -> Optional[Beach]:
        """Get the beach closest to a point, or None for an empty database."""
        beaches = self.beaches_by_distance(lat, lon)
        return beaches[0] if beaches else None

    @property
    def beach_count(self) -> int:
        return len(self._beaches)


def distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance between two points in miles.

    Args:
        lat1, lon1: First point in decimal degrees
        lat2, lon2: Second point in decimal degrees

    Returns:
        Distance in miles
    """
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_distance(miles: float) -> str:
    """Format a distance like "0.4 mi" or "12 mi"."""
    if miles < 0.1:
        return "Less than 0.1 mi"
    if miles < 1:
        return f"{miles:.1f} mi"
    return f"{math.floor(miles + 0.5)} mi"


# Convenience function for quick access
_default_db: Optional[BeachDatabase] = None


def get_beach_database() -> BeachDatabase:
    """Get the default beach database (singleton)."""
    global _default_db
    if _default_db is None:
        _default_db = BeachDatabase()
    return _default_db


def get_beach(beach_id: str) -> Optional[Beach]:
    """Quick access to get a beach by ID."""
    return get_beach_database().get_beach(beach_id)
