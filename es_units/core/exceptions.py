# es_units/core/exceptions.py - Custom exception hierarchy
from typing import Any


class ESUnitsException(Exception):  # noqa: N818
    """Base exception for es-units"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for error reporting"""
        return {"error": self.__class__.__name__, "message": self.message, "details": self.details}


class ConfigurationError(ESUnitsException):  # noqa: N818
    """Configuration errors"""

    pass


class EncodingError(ESUnitsException):  # noqa: N818
    """Value cannot be represented as JSON"""

    pass
