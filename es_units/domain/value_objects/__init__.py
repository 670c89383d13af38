"""
Value Objects - Immutable domain values

This module contains value objects:
- Duration: A time period such as "100d"
- Location: A geo point, as lat/lon or geohash
- ToJson: Shared contract for rendering values in their JSON wire format
"""

from .duration import Duration, DurationUnit
from .json_value import JsonValue, ToJson, dumps, to_json_value
from .location import GeoHash, LatLon, Location

__all__ = [
    "Duration",
    "DurationUnit",
    "Location",
    "LatLon",
    "GeoHash",
    "ToJson",
    "JsonValue",
    "to_json_value",
    "dumps",
]
