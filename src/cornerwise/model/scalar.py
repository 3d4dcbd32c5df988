from __future__ import annotations

import math
import re
from dataclasses import dataclass

import numpy as np

from cornerwise._constants import DEFERRED_MARKERS, LENGTH_UNITS
from cornerwise.errors import InvalidRadius

_NUMBER_RE = re.compile(
    r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)([a-zA-Z%]*)$"
)


@dataclass(frozen=True)
class Dimension:
    """A radius length carrying a non-pixel CSS unit.

    Pixel lengths are represented as plain numbers, so ``unit`` is
    never ``"px"``.  Percentages (``unit="%"``) are the only dimensions
    that :func:`~cornerwise.radius.resolve_percentage_radius` converts.

    Attributes:
        value: Numeric magnitude.
        unit: Lower-case CSS unit, e.g. ``"%"``, ``"rem"``.

    Raises:
        ValueError: If *value* is not finite or *unit* is not a
            recognised non-pixel length unit.
    """

    value: float
    unit: str

    def __post_init__(self) -> None:
        if not _is_finite(self.value):
            raise ValueError(f"value must be finite, got {self.value}")
        if self.unit == "px":
            raise ValueError("pixel lengths are plain numbers, not Dimensions")
        if self.unit not in LENGTH_UNITS:
            raise ValueError(
                f"unit must be one of {sorted(LENGTH_UNITS - {'px'})}, "
                f"got {self.unit!r}"
            )

    @property
    def is_percentage(self) -> bool:
        return self.unit == "%"

    def __str__(self) -> str:
        return f"{_format_number(self.value)}{self.unit}"


@dataclass(frozen=True)
class Deferred:
    """A CSS expression whose value is only known to the browser.

    Custom-property references (``var(--shape)``) and calculations
    (``calc(100% - 4px)``) are carried through every transform as
    opaque tokens; they are never evaluated.

    Attributes:
        expression: The expression text, verbatim.

    Raises:
        ValueError: If *expression* does not contain ``var(`` or
            ``calc(``.
    """

    expression: str

    def __post_init__(self) -> None:
        if not is_deferred(self.expression):
            raise ValueError(
                f"expression must contain one of {list(DEFERRED_MARKERS)}, "
                f"got {self.expression!r}"
            )

    def __str__(self) -> str:
        return self.expression


#: A single corner radius.
#:
#: Can be any of:
#:
#: - A plain number: a length in pixels (``4`` is ``4px``).
#: - A :class:`Dimension` for other units (``Dimension(50, "%")``).
#: - A :class:`Deferred` CSS expression (``Deferred("var(--r)")``).
#:
#: See :func:`validate_radius_value` for conversion from CSS text.
Scalar = int | float | Dimension | Deferred


def is_deferred(value: object) -> bool:
    """Return True if *value* is a string shaped like a deferred expression."""
    if isinstance(value, Deferred):
        return True
    if not isinstance(value, str):
        return False
    lowered = value.lower()
    return any(marker in lowered for marker in DEFERRED_MARKERS)


def is_percentage(value: object) -> bool:
    return isinstance(value, Dimension) and value.is_percentage


def _is_number(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def _is_finite(number: float) -> bool:
    try:
        return math.isfinite(number)
    except OverflowError:
        return False


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return np.format_float_positional(float(value), precision=10, trim="-")


def parse_scalar(text: str) -> Scalar:
    """Parse a single CSS radius token.

    ``"4"`` and ``"4px"`` give the number ``4``; ``"50%"`` gives
    ``Dimension(50, "%")``; anything containing ``var(`` or ``calc(``
    gives a :class:`Deferred`.

    Args:
        text: One token of CSS text.

    Returns:
        The parsed scalar.

    Raises:
        InvalidRadius: If *text* is neither a number with an optional
            length unit nor a deferred expression.
    """
    token = text.strip()
    if is_deferred(token):
        return Deferred(token)

    match = _NUMBER_RE.match(token)
    if match is None:
        raise InvalidRadius(text)
    number_text, unit = match.groups()
    unit = unit.lower()
    try:
        if number_text.lstrip("+-").isdigit():
            number: float = int(number_text)
        else:
            number = float(number_text)
    except ValueError:
        raise InvalidRadius(text, "too many digits") from None
    if not _is_finite(number):
        raise InvalidRadius(text, "must be finite")

    if unit in ("", "px"):
        return number
    if unit not in LENGTH_UNITS:
        raise InvalidRadius(text, f"unknown unit {unit!r}")
    return Dimension(number, unit)


def validate_radius_value(value: object) -> Scalar:
    """Validate a single radius literal and return it as a scalar.

    Accepts plain numbers (including numpy numbers, excluding
    booleans), :class:`Dimension` and :class:`Deferred` instances, and
    strings understood by :func:`parse_scalar`.  Deferred expressions
    are recognised by shape only and returned unevaluated.

    Raises:
        InvalidRadius: If *value* is not a valid radius literal.
    """
    if isinstance(value, (Dimension, Deferred)):
        return value
    if _is_number(value):
        number = value.item() if isinstance(value, np.generic) else value
        if not _is_finite(number):
            raise InvalidRadius(value, "must be finite")
        return number
    if isinstance(value, str):
        return parse_scalar(value)
    raise InvalidRadius(value)


def format_scalar(value: Scalar) -> str:
    """Render a scalar as CSS text (``0``, ``4px``, ``50%``, ``var(--r)``)."""
    if isinstance(value, (Dimension, Deferred)):
        return str(value)
    if value == 0:
        return "0"
    return f"{_format_number(value)}px"
