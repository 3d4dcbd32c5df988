"""Border-radius transforms: unpacking, category resolution, RTL
flipping, corner masking, and percentage resolution.

A radius is a scalar or a 1-4 item shorthand in CSS corner order
(top-left, top-right, bottom-right, bottom-left).  Shorthand can be
given as a list, tuple, 1-D numpy array, or whitespace-separated
string::

    prop_value("small small 0 0")          # (4, 4, 0, 0)
    mask_radius(8, (0, 0, 1, 1))           # (0, 0, 8, 8)
    resolve_percentage_radius(36, "50%")   # 18.0
    flip_radius((0, 4, 4, 0))              # (4, 0, 0, 4)

Every function here is pure; the category table is read, never
written.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np

from cornerwise._constants import CORNER_COUNT
from cornerwise.categories import DEFAULT_CATEGORIES, CategoryValue
from cornerwise.errors import InvalidMask, InvalidRadius
from cornerwise.model import (
    Deferred,
    Dimension,
    Scalar,
    is_percentage,
    validate_radius_value,
)
from cornerwise.shorthand import radius_items


def unpack_radius(radius: object) -> tuple:
    """Expand a 1-4 item radius to one value per corner.

    Follows the CSS shorthand rule: one value applies to all corners,
    two values alternate, and with three values the bottom-left corner
    copies the top-right.  Items are not validated or resolved.

    Args:
        radius: A scalar or 1-4 item shorthand.

    Returns:
        A 4-tuple ``(top_left, top_right, bottom_right, bottom_left)``.

    Raises:
        InvalidRadius: If *radius* has no items or more than four.
    """
    items, _ = radius_items(radius)
    if len(items) == 1:
        (a,) = items
        return (a, a, a, a)
    if len(items) == 2:
        a, b = items
        return (a, b, a, b)
    if len(items) == 3:
        a, b, c = items
        return (a, b, c, b)
    if len(items) == 4:
        return tuple(items)
    raise InvalidRadius(
        radius, f"expected 1 to {CORNER_COUNT} values, got {len(items)}"
    )


def _table(
    categories: Mapping[str, CategoryValue] | None,
) -> Mapping[str, CategoryValue]:
    return DEFAULT_CATEGORIES if categories is None else categories


def _is_category(item: object, table: Mapping[str, CategoryValue]) -> bool:
    return isinstance(item, str) and item in table


def _category_corners(name: str, table: Mapping[str, CategoryValue]) -> tuple:
    return tuple(validate_radius_value(v) for v in unpack_radius(table[name]))


def prop_value(
    radius: object,
    *,
    categories: Mapping[str, CategoryValue] | None = None,
) -> Scalar | tuple[Scalar, ...]:
    """Resolve category names and validate literals in a radius.

    A scalar category name gives that category's value; a category
    whose value is itself shorthand is returned unpacked to four
    corners.  In a list, a category name at position ``i`` is replaced
    by the ``i``-th corner of the category's unpacked value, so
    ``"small small 0 0"`` gives ``(4, 4, 0, 0)`` with the default
    table.  Every other item is validated with
    :func:`~cornerwise.model.validate_radius_value`.

    Args:
        radius: A scalar or 1-4 item shorthand, items being category
            names or literals.
        categories: Category table to resolve names against.  Defaults
            to :data:`~cornerwise.categories.DEFAULT_CATEGORIES`.

    Returns:
        A scalar for scalar input, otherwise a tuple with one resolved
        item per input item.

    Raises:
        InvalidRadius: If a list has no items or more than four, or an
            item is neither a category name nor a valid literal.
    """
    table = _table(categories)
    items, is_list = radius_items(radius)

    if not is_list:
        (item,) = items
        if _is_category(item, table):
            _, value_is_list = radius_items(table[item])
            if value_is_list:
                return _category_corners(item, table)
            return validate_radius_value(table[item])
        return validate_radius_value(item)

    if not 1 <= len(items) <= CORNER_COUNT:
        raise InvalidRadius(
            radius, f"expected 1 to {CORNER_COUNT} values, got {len(items)}"
        )
    resolved: list[Scalar] = []
    for index, item in enumerate(items):
        if _is_category(item, table):
            resolved.append(_category_corners(item, table)[index])
        else:
            resolved.append(validate_radius_value(item))
    return tuple(resolved)


def _component_height(height: object) -> float | Dimension:
    try:
        value = validate_radius_value(height)
    except InvalidRadius:
        raise ValueError(
            f"component height must be a length, got {height!r}"
        ) from None
    if isinstance(value, Deferred) or is_percentage(value):
        raise ValueError(
            f"component height must be a fixed length, got {height!r}"
        )
    return value


def _resolve_percentage(height: float | Dimension, value: Scalar) -> Scalar:
    if not is_percentage(value):
        return value
    if isinstance(height, Dimension):
        return Dimension(height.value * value.value / 100, height.unit)
    return height * value.value / 100


def resolve_percentage_radius(
    height: object,
    radius: object,
    *,
    categories: Mapping[str, CategoryValue] | None = None,
) -> Scalar | tuple[Scalar, ...]:
    """Convert percentage corners to absolute lengths for a fixed height.

    The radius is first passed through :func:`prop_value`.  Each
    percentage corner then becomes ``height * percentage / 100``;
    other corners, deferred expressions included, are unchanged.  Only
    meaningful for components whose height is fixed; that is not
    checked.

    Args:
        height: Component height: a number (pixels), a non-percentage
            :class:`~cornerwise.model.Dimension`, or CSS text for
            either.
        radius: A scalar or 1-4 item shorthand.
        categories: Category table, as for :func:`prop_value`.

    Returns:
        A scalar for scalar input, otherwise a tuple of the same length
        as the resolved input.  Pixel heights give plain numbers;
        other heights give dimensions in the height's unit.

    Raises:
        ValueError: If *height* is not a fixed length.
        InvalidRadius: As for :func:`prop_value`.
    """
    length = _component_height(height)
    resolved = prop_value(radius, categories=categories)
    if isinstance(resolved, tuple):
        return tuple(_resolve_percentage(length, v) for v in resolved)
    return _resolve_percentage(length, resolved)


def flip_radius(radius: object) -> object:
    """Mirror a radius for right-to-left layouts.

    Works on the shorthand as given, without unpacking:

    - ``(tl, tr, br, bl)`` gives ``(tr, tl, bl, br)``.
    - ``(a, b, c)`` gives ``(b, a, b, c)``.
    - ``(a, b)`` gives ``(b, a)``.
    - Scalars and single-item lists are returned unchanged.

    Args:
        radius: A scalar or 1-4 item shorthand.

    Returns:
        The input itself when nothing is mirrored, otherwise a tuple
        of mirrored items.

    Raises:
        InvalidRadius: If *radius* has more than four items.
    """
    items, is_list = radius_items(radius)
    if len(items) > CORNER_COUNT:
        raise InvalidRadius(
            radius, f"expected at most {CORNER_COUNT} values, got {len(items)}"
        )
    if not is_list:
        return radius
    if len(items) == 4:
        tl, tr, br, bl = items
        return (tr, tl, bl, br)
    if len(items) == 3:
        a, b, c = items
        return (b, a, b, c)
    if len(items) == 2:
        a, b = items
        return (b, a)
    return radius


def _check_mask(mask: object) -> np.ndarray:
    """Return *mask* as a boolean array of four flags.

    Raises:
        InvalidMask: If *mask* is not a sequence of exactly four 0/1
            flags.
    """
    if not isinstance(mask, (list, tuple, np.ndarray)):
        raise InvalidMask(mask, f"must be a sequence of {CORNER_COUNT} flags")
    try:
        flags = np.asarray(mask)
    except ValueError:
        raise InvalidMask(mask, "flags must be 0 or 1") from None
    if flags.shape != (CORNER_COUNT,):
        raise InvalidMask(
            mask, f"expected {CORNER_COUNT} flags, got shape {flags.shape}"
        )
    if flags.dtype.kind not in "biu" or not np.isin(flags, (0, 1)).all():
        raise InvalidMask(mask, "flags must be 0 or 1")
    return flags.astype(bool)


def mask_radius(
    radius: object,
    mask: object,
    *,
    categories: Mapping[str, CategoryValue] | None = None,
) -> tuple:
    """Force the masked-out corners of a radius to zero.

    The radius is resolved with :func:`prop_value` and unpacked to four
    corners; corners whose flag is ``1`` keep their radius and corners
    whose flag is ``0`` become ``0``.

    Example::

        mask_radius((2, 3), (1, 1, 0, 0))   # (2, 3, 0, 0)

    Args:
        radius: A scalar or 1-4 item shorthand.
        mask: Four 0/1 flags in CSS corner order.  See
            :func:`~cornerwise.model.corner_mask`.
        categories: Category table, as for :func:`prop_value`.

    Returns:
        A 4-tuple of corner radii.

    Raises:
        InvalidRadius: If *radius* has more than four items or an item
            is not a valid literal or category name.
        InvalidMask: If *mask* is not exactly four 0/1 flags.
    """
    items, _ = radius_items(radius)
    if len(items) > CORNER_COUNT:
        raise InvalidRadius(
            radius, f"expected at most {CORNER_COUNT} values, got {len(items)}"
        )
    flags = _check_mask(mask)
    corners = unpack_radius(prop_value(radius, categories=categories))
    return tuple(
        corner if keep else 0 for corner, keep in zip(corners, flags)
    )
