from __future__ import annotations

from enum import StrEnum


class Corner(StrEnum):
    """A box corner, in CSS ``border-radius`` order.

    Iterating the enum yields the corners in the order a fully
    unpacked radius stores them.

    Attributes:
        TOP_LEFT: First corner.
        TOP_RIGHT: Second corner.
        BOTTOM_RIGHT: Third corner.
        BOTTOM_LEFT: Fourth corner.
    """

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"

    @property
    def position(self) -> int:
        """Position of this corner in an unpacked radius."""
        return list(Corner).index(self)


def corner_mask(*corners: Corner | str) -> tuple[int, int, int, int]:
    """Build a mask that keeps only the given corners.

    Example::

        corner_mask(Corner.TOP_LEFT, "top_right")  # (1, 1, 0, 0)

    Args:
        *corners: Corners to keep, as :class:`Corner` members or their
            string values.

    Returns:
        A 4-tuple of 0/1 flags in CSS corner order.

    Raises:
        ValueError: If a string does not name a corner.
    """
    keep = {Corner(c) for c in corners}
    tl, tr, br, bl = (int(c in keep) for c in Corner)
    return (tl, tr, br, bl)
