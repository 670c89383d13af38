"""
Location Value Object

Geographic positions for geo queries: either an explicit latitude/longitude
pair or a precomputed geohash string.
"""

from dataclasses import dataclass
from typing import Any

from .json_value import JsonValue, ToJson


class Location(ToJson):
    """
    A geographic location, one of LatLon or GeoHash.

    Coordinates are not range-checked; malformed positions are rejected by
    the service when the request is submitted.
    """

    @staticmethod
    def from_lat_lon(pair: tuple[float, float]) -> "LatLon":
        """
        Create a location from a (lat, lon) pair.

        Args:
            pair: Latitude and longitude

        Returns:
            LatLon location
        """
        lat, lon = pair
        return LatLon(lat=lat, lon=lon)

    @staticmethod
    def from_geohash(code: str) -> "GeoHash":
        """Create a location from a geohash string."""
        return GeoHash(code=code)

    @staticmethod
    def from_value(value: Any) -> "Location":
        """
        Create a location from a pair, a geohash string, or a Location.

        Args:
            value: (lat, lon) tuple/list, geohash string, or Location

        Returns:
            Matching Location variant

        Raises:
            TypeError: If value is none of the accepted shapes
        """
        if isinstance(value, Location):
            return value
        if isinstance(value, str):
            return Location.from_geohash(value)
        if isinstance(value, tuple | list) and len(value) == 2:
            return Location.from_lat_lon((value[0], value[1]))

        raise TypeError(
            f"Location must be a (lat, lon) pair or a geohash string, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class LatLon(Location):
    """Latitude/longitude coordinate pair."""

    lat: float
    lon: float

    def to_json(self) -> JsonValue:
        """
        Render as a geo-point object.

        Returns:
            {"lat": <float>, "lon": <float>}
        """
        return {"lat": float(self.lat), "lon": float(self.lon)}


@dataclass(frozen=True)
class GeoHash(Location):
    """Opaque geohash string, passed to the service verbatim."""

    code: str

    def to_json(self) -> JsonValue:
        return self.code
