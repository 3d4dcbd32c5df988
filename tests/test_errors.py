"""Tests for cornerwise exception types."""

import pytest

from cornerwise.errors import InvalidMask, InvalidRadius


class TestInvalidRadius:
    def test_message_names_value(self):
        err = InvalidRadius("huge")
        assert str(err) == "Invalid radius value: 'huge'"

    def test_reason_appended(self):
        err = InvalidRadius((1, 2, 3, 4, 5), "expected 1 to 4 values, got 5")
        assert str(err).endswith("(expected 1 to 4 values, got 5)")
        assert err.value == (1, 2, 3, 4, 5)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidRadius("huge")


class TestInvalidMask:
    def test_message_names_value(self):
        assert str(InvalidMask((1, 0))) == "Invalid corner mask: (1, 0)"

    def test_is_value_error(self):
        assert issubclass(InvalidMask, ValueError)

    def test_distinct_from_invalid_radius(self):
        assert not issubclass(InvalidMask, InvalidRadius)
