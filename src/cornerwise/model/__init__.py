"""Core data model for cornerwise: radius scalars and corners.

Everything is re-exported here so that ``from cornerwise.model import
Dimension`` works without knowing the submodule layout.
"""

from cornerwise.model.corner import Corner, corner_mask
from cornerwise.model.scalar import (
    Deferred,
    Dimension,
    Scalar,
    format_scalar,
    is_deferred,
    is_percentage,
    parse_scalar,
    validate_radius_value,
)

__all__ = [
    "Corner",
    "Deferred",
    "Dimension",
    "Scalar",
    "corner_mask",
    "format_scalar",
    "is_deferred",
    "is_percentage",
    "parse_scalar",
    "validate_radius_value",
]
