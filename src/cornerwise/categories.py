"""Named radius categories and their default values.

Components ask for a size category (``"small"``, ``"medium"``,
``"large"``) rather than a raw radius; the category table maps each
name to the radius it stands for.  The table is built once and never
mutated: alternate tables are made with :func:`make_categories` or
loaded from a JSON file with :func:`load_categories`, and passed to the
resolution functions through their ``categories`` argument.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from cornerwise._constants import CORNER_COUNT
from cornerwise.errors import InvalidRadius
from cornerwise.model import Deferred, Dimension, Scalar, validate_radius_value
from cornerwise.shorthand import radius_items

logger = logging.getLogger(__name__)

#: The value a category stands for: a scalar, or a 1-4 item shorthand.
CategoryValue = Scalar | tuple[Scalar, ...]

_VALID_SECTIONS = frozenset({"categories"})


def _check_name(name: object) -> str:
    if not isinstance(name, str):
        raise TypeError(f"category name must be a string, got {name!r}")
    if not name or any(ch.isspace() for ch in name):
        raise ValueError(f"category name must be a single token, got {name!r}")
    try:
        validate_radius_value(name)
    except InvalidRadius:
        return name
    raise ValueError(f"category name {name!r} would shadow a radius literal")


def _check_value(name: str, value: object) -> CategoryValue:
    items, is_list = radius_items(value)
    if not 1 <= len(items) <= CORNER_COUNT:
        raise InvalidRadius(
            value, f"category {name!r} must have 1 to {CORNER_COUNT} values"
        )
    parsed = tuple(validate_radius_value(item) for item in items)
    return parsed if is_list else parsed[0]


def make_categories(
    definition: Mapping[str, object],
) -> Mapping[str, CategoryValue]:
    """Validate a category definition and freeze it.

    Values may be anything :func:`~cornerwise.model.validate_radius_value`
    accepts, or a 1-4 item shorthand of such values (a list, tuple, or
    whitespace-separated string).  Values are stored parsed, so
    ``"8px"`` is stored as ``8``.  A category cannot refer to another
    category.

    Args:
        definition: Mapping of category name to radius.

    Returns:
        A read-only mapping of category name to parsed radius.

    Raises:
        TypeError: If a name is not a string.
        ValueError: If a name is empty, contains whitespace, or is
            itself a valid radius literal.
        InvalidRadius: If a value is not a valid 1-4 item radius.
    """
    table: dict[str, CategoryValue] = {}
    for name, value in definition.items():
        table[_check_name(name)] = _check_value(name, value)
    logger.debug(
        "Built radius category table with %d entries: %s",
        len(table), sorted(table),
    )
    return MappingProxyType(table)


DEFAULT_CATEGORIES: Mapping[str, CategoryValue] = make_categories({
    "small": 4,
    "medium": 4,
    "large": 0,
})
"""Default radius for each component size category, in pixels."""


def _scalar_to_json(value: Scalar) -> int | float | str:
    if isinstance(value, (Dimension, Deferred)):
        return str(value)
    return value


def save_categories(
    path: str | Path,
    categories: Mapping[str, CategoryValue],
) -> None:
    """Save a category table to a JSON file.

    Pixel values are written as JSON numbers; dimensions and deferred
    expressions as their CSS text.  The file is human-readable with
    two-space indentation.

    Args:
        path: Destination file path.
        categories: The table to write.
    """
    serialised: dict[str, object] = {}
    for name, value in categories.items():
        if isinstance(value, tuple):
            serialised[name] = [_scalar_to_json(v) for v in value]
        else:
            serialised[name] = _scalar_to_json(value)
    Path(path).write_text(
        json.dumps({"categories": serialised}, indent=2) + "\n"
    )
    logger.debug("Saved %d radius categories to %s", len(serialised), path)


def load_categories(path: str | Path) -> Mapping[str, CategoryValue]:
    """Load a category table from a JSON file.

    The file holds a single ``"categories"`` object mapping names to
    radii, e.g.::

        {"categories": {"small": 4, "medium": "8px", "large": [16, 16, 0, 0]}}

    Args:
        path: Source file path.

    Returns:
        A read-only mapping, as returned by :func:`make_categories`.

    Raises:
        ValueError: If the file has unknown top-level keys or no
            ``"categories"`` object.
        InvalidRadius: If a category value is not a valid radius.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"category file must contain a JSON object, got {type(data).__name__}"
        )

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in category file: {sorted(unknown)}"
        )
    if not isinstance(data.get("categories"), dict):
        raise ValueError("category file must have a 'categories' object")

    categories = make_categories(data["categories"])
    logger.debug("Loaded %d radius categories from %s", len(categories), path)
    return categories
