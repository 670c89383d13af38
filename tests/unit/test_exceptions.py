# tests/unit/test_exceptions.py
import pytest

from es_units.core.exceptions import ConfigurationError, EncodingError, ESUnitsException


@pytest.mark.unit
class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ConfigurationError, ESUnitsException)
        assert issubclass(EncodingError, ESUnitsException)

    def test_to_dict(self):
        error = EncodingError("Cannot encode set as JSON", {"value_type": "set"})

        assert str(error) == "Cannot encode set as JSON"
        assert error.to_dict() == {
            "error": "EncodingError",
            "message": "Cannot encode set as JSON",
            "details": {"value_type": "set"},
        }

    def test_details_default_empty(self):
        assert ConfigurationError("bad").details == {}
