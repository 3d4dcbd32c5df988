"""Splitting of CSS radius shorthand into per-position items."""

from __future__ import annotations

import numpy as np

from cornerwise.errors import InvalidRadius


def _split_tokens(text: str) -> list[str]:
    """Split *text* on whitespace that is not inside parentheses."""
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in text:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise InvalidRadius(text, "unbalanced parentheses")
        if ch.isspace() and depth == 0:
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(ch)
    if depth != 0:
        raise InvalidRadius(text, "unbalanced parentheses")
    if current:
        tokens.append("".join(current))
    return tokens


def radius_items(radius: object) -> tuple[list, bool]:
    """Return the positional items of *radius* and whether it is a list.

    Strings are split on whitespace outside parentheses, so
    ``"small small 0 0"`` is a four-item list while
    ``"calc(100% - 4px)"`` is a single scalar.  Lists, tuples and
    one-dimensional numpy arrays are lists; everything else is a
    scalar.

    Raises:
        InvalidRadius: If a string has unbalanced parentheses or an
            array has more than one dimension.
    """
    if isinstance(radius, str):
        tokens = _split_tokens(radius)
        return tokens, len(tokens) != 1
    if isinstance(radius, np.ndarray):
        if radius.ndim == 0:
            return [radius.item()], False
        if radius.ndim > 1:
            raise InvalidRadius(radius, "must be one-dimensional")
        return radius.tolist(), True
    if isinstance(radius, (list, tuple)):
        return list(radius), True
    return [radius], False


def split_radius(radius: object) -> list:
    """Split a radius into its positional items.

    Example::

        split_radius("4px calc(50% - 2px)")  # ["4px", "calc(50% - 2px)"]
        split_radius(8)                      # [8]
    """
    items, _ = radius_items(radius)
    return items
