"""Tests for radius scalars and the literal validator."""

import numpy as np
import pytest

from cornerwise.errors import InvalidRadius
from cornerwise.model.scalar import (
    Deferred,
    Dimension,
    format_scalar,
    is_deferred,
    is_percentage,
    parse_scalar,
    validate_radius_value,
)


class TestDimension:
    def test_percentage(self):
        d = Dimension(50, "%")
        assert d.is_percentage
        assert is_percentage(d)

    def test_rem_is_not_percentage(self):
        assert not Dimension(1.5, "rem").is_percentage

    def test_str(self):
        assert str(Dimension(50, "%")) == "50%"
        assert str(Dimension(1.5, "rem")) == "1.5rem"

    def test_px_rejected(self):
        with pytest.raises(ValueError, match="plain numbers"):
            Dimension(4, "px")

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValueError, match="unit must be one of"):
            Dimension(4, "furlong")

    def test_non_finite_rejected(self):
        with pytest.raises(ValueError, match="finite"):
            Dimension(float("inf"), "%")


class TestDeferred:
    def test_var(self):
        assert str(Deferred("var(--shape)")) == "var(--shape)"

    def test_calc(self):
        assert Deferred("calc(100% - 4px)").expression == "calc(100% - 4px)"

    def test_plain_text_rejected(self):
        with pytest.raises(ValueError, match="must contain"):
            Deferred("small")

    def test_is_deferred(self):
        assert is_deferred("var(--x)")
        assert is_deferred("CALC(1px + 2px)")
        assert is_deferred(Deferred("var(--x)"))
        assert not is_deferred("4px")
        assert not is_deferred(4)


class TestParseScalar:
    def test_unitless_integer(self):
        assert parse_scalar("4") == 4
        assert isinstance(parse_scalar("4"), int)

    def test_px(self):
        assert parse_scalar("4px") == 4

    def test_px_upper_case(self):
        assert parse_scalar("4PX") == 4

    def test_float(self):
        assert parse_scalar("2.5px") == pytest.approx(2.5)

    def test_leading_dot(self):
        assert parse_scalar(".5px") == pytest.approx(0.5)

    def test_percentage(self):
        assert parse_scalar("50%") == Dimension(50, "%")

    def test_rem(self):
        assert parse_scalar("0.25rem") == Dimension(0.25, "rem")

    def test_deferred(self):
        assert parse_scalar(" var(--r) ") == Deferred("var(--r)")

    def test_unknown_unit_raises(self):
        with pytest.raises(InvalidRadius, match="unknown unit"):
            parse_scalar("4parsecs")

    def test_word_raises(self):
        with pytest.raises(InvalidRadius, match="'huge'"):
            parse_scalar("huge")


class TestValidateRadiusValue:
    def test_integer(self):
        assert validate_radius_value(4) == 4

    def test_float(self):
        assert validate_radius_value(2.5) == 2.5

    def test_numpy_number_unwrapped(self):
        result = validate_radius_value(np.float64(3.0))
        assert result == 3.0
        assert type(result) is float

    def test_var_string(self):
        assert validate_radius_value("var(--radius)") == Deferred("var(--radius)")

    def test_calc_string(self):
        result = validate_radius_value("calc(50% - 2px)")
        assert isinstance(result, Deferred)

    def test_dimension_passthrough(self):
        d = Dimension(10, "%")
        assert validate_radius_value(d) is d

    def test_non_numeric_string_raises(self):
        with pytest.raises(InvalidRadius) as excinfo:
            validate_radius_value("rounded")
        assert excinfo.value.value == "rounded"

    def test_bool_raises(self):
        with pytest.raises(InvalidRadius):
            validate_radius_value(True)

    def test_none_raises(self):
        with pytest.raises(InvalidRadius):
            validate_radius_value(None)

    def test_nan_raises(self):
        with pytest.raises(InvalidRadius, match="finite"):
            validate_radius_value(float("nan"))

    def test_huge_integer_raises(self):
        with pytest.raises(InvalidRadius, match="finite") as excinfo:
            validate_radius_value(10**400)
        assert excinfo.value.value == 10**400

    def test_huge_integer_string_raises(self):
        with pytest.raises(InvalidRadius, match="finite"):
            validate_radius_value("1" + "0" * 400 + "px")

    def test_huge_dimension_raises(self):
        with pytest.raises(ValueError, match="finite"):
            Dimension(10**400, "%")

    def test_invalid_radius_is_value_error(self):
        with pytest.raises(ValueError):
            validate_radius_value("rounded")


class TestFormatScalar:
    def test_zero(self):
        assert format_scalar(0) == "0"

    def test_pixels(self):
        assert format_scalar(4) == "4px"

    def test_integral_float(self):
        assert format_scalar(18.0) == "18px"

    def test_fractional(self):
        assert format_scalar(0.5) == "0.5px"

    def test_float_noise_trimmed(self):
        assert format_scalar(0.1 + 0.2) == "0.3px"
        assert format_scalar(7.000000000000001) == "7px"

    def test_dimension_noise_trimmed(self):
        assert str(Dimension(0.1 + 0.2, "rem")) == "0.3rem"

    def test_dimension(self):
        assert format_scalar(Dimension(50, "%")) == "50%"

    def test_deferred(self):
        assert format_scalar(Deferred("var(--r)")) == "var(--r)"
