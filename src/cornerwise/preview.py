"""Matplotlib preview of a component outline with resolved corner radii."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from cornerwise._constants import CORNER_COUNT
from cornerwise.categories import CategoryValue
from cornerwise.model import Corner, Deferred, Dimension, format_scalar
from cornerwise.radius import (
    flip_radius,
    mask_radius,
    resolve_percentage_radius,
    unpack_radius,
)

# Fraction of the box extent, per axis, by which corner labels sit
# outside the box.
_LABEL_OFFSET = 0.04


def _pixel_corners(corners: tuple) -> np.ndarray:
    """Return four resolved corners as a float array of pixel radii.

    Raises:
        ValueError: If a corner is a deferred expression, a non-pixel
            dimension, or negative.
    """
    for corner in corners:
        if isinstance(corner, (Dimension, Deferred)):
            raise ValueError(
                f"cannot preview corner radius {str(corner)!r}: only "
                f"pixel lengths can be drawn"
            )
    radii = np.asarray(corners, dtype=float)
    if (radii < 0).any():
        raise ValueError(f"corner radii must be non-negative, got {corners}")
    return radii


def _fit_radii(width: float, height: float, radii: np.ndarray) -> np.ndarray:
    """Scale *radii* down uniformly so adjacent corners never overlap.

    Uses the CSS rule: with ``f = min(side / (r1 + r2))`` over the four
    sides, all radii are multiplied by ``f`` when ``f < 1``.
    """
    tl, tr, br, bl = radii
    sums = np.array([tl + tr, bl + br, tl + bl, tr + br])
    sides = np.array([width, width, height, height])
    with np.errstate(divide="ignore"):
        ratios = np.where(sums > 0, sides / sums, np.inf)
    return radii * min(1.0, float(ratios.min()))


def rounded_rect_vertices(
    width: float,
    height: float,
    corners: tuple | list | np.ndarray,
    *,
    segments: int = 12,
) -> np.ndarray:
    """Compute the outline of a box with per-corner circular radii.

    The box spans ``[0, width] x [0, height]`` with y pointing up, so
    the top-left corner is at ``(0, height)``.  Vertices run
    counter-clockwise starting at the top of the right edge.

    Args:
        width: Box width in pixels.
        height: Box height in pixels.
        corners: Four non-negative pixel radii in CSS corner order.
        segments: Line segments per rounded corner.

    Returns:
        Array of shape ``(N, 2)``.  Square corners contribute one
        vertex, rounded corners ``segments + 1``.

    Raises:
        ValueError: If *width* or *height* is not positive, *segments*
            is less than 1, or *corners* is not four non-negative
            values.
    """
    if width <= 0 or height <= 0:
        raise ValueError(
            f"width and height must be positive, got {width} x {height}"
        )
    if segments < 1:
        raise ValueError(f"segments must be >= 1, got {segments}")
    radii = np.asarray(corners, dtype=float)
    if radii.shape != (CORNER_COUNT,):
        raise ValueError(
            f"corners must have {CORNER_COUNT} values, got shape {radii.shape}"
        )
    if (radii < 0).any():
        raise ValueError(f"corner radii must be non-negative, got {corners}")
    tl, tr, br, bl = _fit_radii(width, height, radii)

    # (arc centre, radius, start angle), counter-clockwise from top-right.
    arcs = [
        ((width - tr, height - tr), tr, 0.0),
        ((tl, height - tl), tl, 0.5 * np.pi),
        ((bl, bl), bl, np.pi),
        ((width - br, br), br, 1.5 * np.pi),
    ]
    pieces: list[np.ndarray] = []
    for (cx, cy), r, start in arcs:
        if r == 0:
            pieces.append(np.array([[cx, cy]]))
            continue
        theta = start + np.linspace(0.0, 0.5 * np.pi, segments + 1)
        pieces.append(np.column_stack([
            cx + r * np.cos(theta),
            cy + r * np.sin(theta),
        ]))
    return np.vstack(pieces)


def _draw_labels(
    ax: Axes, width: float, height: float, corners: tuple,
) -> None:
    dx = _LABEL_OFFSET * width
    dy = _LABEL_OFFSET * height
    anchors = {
        Corner.TOP_LEFT: (-dx, height + dy, "right", "bottom"),
        Corner.TOP_RIGHT: (width + dx, height + dy, "left", "bottom"),
        Corner.BOTTOM_RIGHT: (width + dx, -dy, "left", "top"),
        Corner.BOTTOM_LEFT: (-dx, -dy, "right", "top"),
    }
    for corner in Corner:
        x, y, ha, va = anchors[corner]
        ax.text(
            x, y, format_scalar(corners[corner.position]),
            ha=ha, va=va, fontsize=8, color="0.3",
        )


def render_preview(
    radius: object,
    width: float,
    height: float,
    *,
    mask: object = None,
    rtl: bool = False,
    categories: Mapping[str, CategoryValue] | None = None,
    output: str | Path | None = None,
    ax: Axes | None = None,
    face_colour: str = "0.85",
    edge_colour: str = "0.2",
    labels: bool = True,
    segments: int = 12,
    figsize: tuple[float, float] = (4.0, 4.0),
    dpi: int = 150,
    show: bool = False,
) -> Figure:
    """Draw a fixed-size component box with the given border radius.

    The radius is resolved the way a stylesheet would resolve it:
    percentages against *height*, then the optional *mask*, then the
    optional RTL mirror.  Corners that still overlap are scaled down
    as a browser would.

    Example::

        render_preview("small small 0 0", 120, 36, output="chip.png")

    Args:
        radius: A scalar or 1-4 item shorthand of literals and
            category names.
        width: Component width in pixels.
        height: Component height in pixels.
        mask: Optional four 0/1 corner flags, as for
            :func:`~cornerwise.radius.mask_radius`.
        rtl: Whether to mirror the radius for right-to-left layouts.
        categories: Category table.  Defaults to
            :data:`~cornerwise.categories.DEFAULT_CATEGORIES`.
        output: Optional file path to save the figure to.
        ax: Optional axes to draw into.  When omitted a new figure is
            created and, unless *show* is set, closed before
            returning.
        face_colour: Fill colour of the box.
        edge_colour: Outline colour of the box.
        labels: Whether to label each corner with its CSS radius.
        segments: Line segments per rounded corner.
        figsize: Figure size in inches for a new figure.
        dpi: Resolution for a new figure and for saving.
        show: Whether to call ``plt.show()``.

    Returns:
        The matplotlib :class:`~matplotlib.figure.Figure`.

    Raises:
        ValueError: If a resolved corner is not a pixel length, or if
            *ax* is not attached to a figure.
        InvalidRadius: If *radius* is invalid.
        InvalidMask: If *mask* is invalid.
    """
    resolved = resolve_percentage_radius(height, radius, categories=categories)
    if mask is not None:
        resolved = mask_radius(resolved, mask, categories=categories)
    if rtl:
        resolved = flip_radius(resolved)
    corners = unpack_radius(resolved)
    radii = _pixel_corners(corners)
    vertices = rounded_rect_vertices(width, height, radii, segments=segments)

    owns_figure = ax is None
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
    else:
        fig = ax.get_figure()
        if not isinstance(fig, Figure):
            raise ValueError("ax is not attached to a Figure")

    ax.add_patch(Polygon(
        vertices, closed=True,
        facecolor=face_colour, edgecolor=edge_colour, linewidth=1.0,
    ))
    if labels:
        _draw_labels(ax, width, height, corners)

    pad = 0.15 * max(width, height)
    ax.set_xlim(-pad, width + pad)
    ax.set_ylim(-pad, height + pad)
    ax.set_aspect("equal")
    ax.set_axis_off()

    if output is not None:
        fig.savefig(str(output), dpi=dpi, bbox_inches="tight")

    if show:
        plt.show()
    elif owns_figure:
        plt.close(fig)

    return fig
