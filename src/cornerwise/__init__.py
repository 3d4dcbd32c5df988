"""cornerwise: border-radius resolution for UI component styles.

cornerwise turns the radius a component asks for (a size category, a
CSS shorthand, a percentage of its height) into explicit per-corner
``border-radius`` values at style-authoring time, with helpers for
right-to-left mirroring and per-shape corner masks.

Example usage::

    from cornerwise import corner_mask, mask_radius, radius_rule

    mask_radius("medium", corner_mask("top_left", "top_right"))
    # (4, 4, 0, 0)
    print(radius_rule(".chip", "0 small small 0", rtl_reflexive=True))
"""

from cornerwise.categories import (
    DEFAULT_CATEGORIES,
    load_categories,
    make_categories,
    save_categories,
)
from cornerwise.css import RadiusDeclaration, radius_declaration, radius_rule, to_css
from cornerwise.errors import InvalidMask, InvalidRadius
from cornerwise.model import (
    Corner,
    Deferred,
    Dimension,
    Scalar,
    corner_mask,
    format_scalar,
    validate_radius_value,
)
from cornerwise.preview import render_preview, rounded_rect_vertices
from cornerwise.radius import (
    flip_radius,
    mask_radius,
    prop_value,
    resolve_percentage_radius,
    unpack_radius,
)
from cornerwise.shorthand import split_radius

__all__ = [
    "Corner",
    "DEFAULT_CATEGORIES",
    "Deferred",
    "Dimension",
    "InvalidMask",
    "InvalidRadius",
    "RadiusDeclaration",
    "Scalar",
    "corner_mask",
    "flip_radius",
    "format_scalar",
    "load_categories",
    "make_categories",
    "mask_radius",
    "prop_value",
    "radius_declaration",
    "radius_rule",
    "render_preview",
    "resolve_percentage_radius",
    "rounded_rect_vertices",
    "save_categories",
    "split_radius",
    "to_css",
    "unpack_radius",
    "validate_radius_value",
]
