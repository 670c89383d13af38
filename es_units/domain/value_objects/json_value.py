"""
JSON Value Abstraction

Shared contract for value objects that embed into Elasticsearch request
documents, plus helpers to turn nested structures into plain JSON values.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Union

from ...core.config import get_config_value
from ...core.exceptions import EncodingError
from ...core.logging_config import get_logger, log_with_context

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

logger = get_logger(__name__)


class ToJson(ABC):
    """
    Interface for values with a canonical JSON form.

    Implementations return plain JSON values only, so the result can be
    placed as a leaf anywhere inside a larger request body.
    """

    @abstractmethod
    def to_json(self) -> JsonValue:
        """
        Render this value in its wire format.

        Returns:
            JSON-compatible value (dict, list, str, int, float, bool or None)
        """
        pass

    def to_structured_value(self) -> JsonValue:
        """Alias of to_json()."""
        return self.to_json()


def to_json_value(value: Any) -> JsonValue:
    """
    Convert a tree of ToJson objects and containers into plain JSON values.

    Args:
        value: ToJson instance, dict with string keys, list/tuple, or JSON scalar

    Returns:
        Equivalent structure made only of JSON-compatible values

    Raises:
        EncodingError: If the tree contains a value with no JSON form
    """
    if isinstance(value, ToJson):
        return value.to_json()
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, list | tuple):
        return [to_json_value(item) for item in value]
    if isinstance(value, dict):
        result = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(
                    f"Object keys must be strings, got {type(key).__name__}", {"key": repr(key)}
                )
            result[key] = to_json_value(item)
        return result

    raise EncodingError(
        f"Cannot encode {type(value).__name__} as JSON", {"value_type": type(value).__name__}
    )


def dumps(value: Any, **overrides: Any) -> str:
    """
    Serialize a value (or tree containing values) to a JSON string.

    Args:
        value: Anything accepted by to_json_value()
        **overrides: json.dumps options taking precedence over the encoding config

    Returns:
        JSON text
    """
    options = {
        "sort_keys": get_config_value("encoding.sort_keys", False),
        "ensure_ascii": get_config_value("encoding.ensure_ascii", False),
        "indent": get_config_value("encoding.indent"),
    }
    options.update(overrides)

    text = json.dumps(to_json_value(value), **options)
    log_with_context(
        logger, "debug", "Encoded value", value_type=type(value).__name__, length=len(text)
    )
    return text
