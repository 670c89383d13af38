"""
Duration Value Object

Time-period values rendered in the Elasticsearch duration format, e.g. "100d".
"""

from dataclasses import dataclass
from enum import Enum

from .json_value import JsonValue, ToJson


class DurationUnit(Enum):
    """
    Units by which a duration is measured.

    Each member's value is its wire code. The list is incomplete; a new unit
    is added together with its code.
    """

    WEEK = "w"
    DAY = "d"
    HOUR = "h"
    MINUTE = "m"

    def code(self) -> str:
        """Get the one-character unit code."""
        return self.value

    def __str__(self) -> str:
        return self.code()


@dataclass(frozen=True)
class Duration(ToJson):
    """
    Duration value object: an amount paired with a unit.

    The amount is passed through as given. Zero and negative amounts are
    accepted; the service decides whether they make sense for a request.
    """

    amount: int
    unit: DurationUnit

    def to_text(self) -> str:
        """
        Render the duration as "<amount><unit code>".

        Returns:
            Duration string, e.g. "100d" or "-5h"
        """
        return f"{self.amount}{self.unit.code()}"

    def to_json(self) -> JsonValue:
        """JSON form is the duration string."""
        return self.to_text()

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def new(cls, amount: int, unit: DurationUnit) -> "Duration":
        """
        Create a Duration.

        Args:
            amount: Number of units (any integer)
            unit: Unit of time

        Returns:
            New Duration instance
        """
        return cls(amount=amount, unit=unit)

    @classmethod
    def weeks(cls, amount: int) -> "Duration":
        return cls(amount, DurationUnit.WEEK)

    @classmethod
    def days(cls, amount: int) -> "Duration":
        return cls(amount, DurationUnit.DAY)

    @classmethod
    def hours(cls, amount: int) -> "Duration":
        return cls(amount, DurationUnit.HOUR)

    @classmethod
    def minutes(cls, amount: int) -> "Duration":
        return cls(amount, DurationUnit.MINUTE)
