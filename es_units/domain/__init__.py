"""
Domain Layer - Value types for Elasticsearch requests

This layer contains:
- Value objects: Immutable values with a canonical text and JSON form

Independent of the query builder and the HTTP transport that consume them.
"""

from .value_objects import (
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
