"""
es-units - Duration and location values for Elasticsearch requests

Example:
    from es_units import Duration, DurationUnit, Location

    Duration(100, DurationUnit.DAY).to_text()          # "100d"
    Location.from_lat_lon((40.7128, -74.006)).to_json()  # {"lat": 40.7128, "lon": -74.006}
"""

from .domain import (
    Duration,
    DurationUnit,
    GeoHash,
    JsonValue,
    LatLon,
    Location,
    ToJson,
    dumps,
    to_json_value,
)

__version__ = "0.1.0"

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
