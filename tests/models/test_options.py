import pytest
from pydantic import ValidationError

from pastdate.models.options import ParseOptions


class TestParseOptions:
    def test_defaults(self):
        options = ParseOptions()
        assert options.raise_on_error is True
        assert options.ignore_case is False
        assert options.trace is False

    def test_overrides(self):
        options = ParseOptions(raise_on_error=False, ignore_case=True, trace=True)
        assert options.raise_on_error is False
        assert options.ignore_case is True
        assert options.trace is True

    def test_frozen(self):
        options = ParseOptions()
        with pytest.raises(ValidationError):
            options.trace = True  # type: ignore[misc]

    def test_equality_by_value(self):
        assert ParseOptions(trace=True) == ParseOptions(trace=True)
