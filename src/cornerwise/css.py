"""CSS text emission for resolved radii."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from cornerwise.categories import CategoryValue
from cornerwise.model import format_scalar, validate_radius_value
from cornerwise.radius import flip_radius, prop_value, resolve_percentage_radius
from cornerwise.shorthand import radius_items

logger = logging.getLogger(__name__)

_PROPERTY = "border-radius"


def to_css(radius: object) -> str:
    """Render a resolved radius as a ``border-radius`` value.

    Example::

        to_css((4, 4, 0, 0))                  # "4px 4px 0 0"
        to_css(Deferred("var(--shape)"))      # "var(--shape)"

    Raises:
        InvalidRadius: If an item is not a valid literal.  Category
            names must be resolved first with
            :func:`~cornerwise.radius.prop_value`.
    """
    items, _ = radius_items(radius)
    return " ".join(format_scalar(validate_radius_value(i)) for i in items)


@dataclass(frozen=True)
class RadiusDeclaration:
    """The ``border-radius`` values for a component in each direction.

    Attributes:
        ltr: Value for left-to-right layouts.
        rtl: Mirrored value for right-to-left layouts, or ``None`` when
            the radius is not mirrored.
    """

    ltr: str
    rtl: str | None = None

    @property
    def mirrored(self) -> bool:
        """Whether an RTL override is needed."""
        return self.rtl is not None and self.rtl != self.ltr


def radius_declaration(
    radius: object,
    *,
    rtl_reflexive: bool = False,
    component_height: object = None,
    categories: Mapping[str, CategoryValue] | None = None,
) -> RadiusDeclaration:
    """Resolve a radius into ``border-radius`` values.

    Args:
        radius: A scalar or 1-4 item shorthand of literals and
            category names.
        rtl_reflexive: Whether to also produce the RTL value, the
            resolved radius mirrored with
            :func:`~cornerwise.radius.flip_radius`.
        component_height: Fixed component height.  When given,
            percentage corners are converted to lengths with
            :func:`~cornerwise.radius.resolve_percentage_radius`.
        categories: Category table.  Defaults to
            :data:`~cornerwise.categories.DEFAULT_CATEGORIES`.

    Returns:
        A :class:`RadiusDeclaration`.
    """
    if component_height is not None:
        value = resolve_percentage_radius(
            component_height, radius, categories=categories,
        )
    else:
        value = prop_value(radius, categories=categories)

    rtl = to_css(flip_radius(value)) if rtl_reflexive else None
    return RadiusDeclaration(ltr=to_css(value), rtl=rtl)


def radius_rule(
    selector: str,
    radius: object,
    *,
    rtl_reflexive: bool = False,
    component_height: object = None,
    categories: Mapping[str, CategoryValue] | None = None,
    indent: str = "  ",
) -> str:
    """Build the CSS rule(s) setting ``border-radius`` on *selector*.

    When *rtl_reflexive* is set and mirroring changes the value, a
    second rule scoped to ``[dir="rtl"]`` overrides it::

        .chip {
          border-radius: 0 4px 4px 0;
        }
        [dir="rtl"] .chip, .chip[dir="rtl"] {
          border-radius: 4px 0 0 4px;
        }

    Remaining arguments are as for :func:`radius_declaration`.
    """
    declaration = radius_declaration(
        radius,
        rtl_reflexive=rtl_reflexive,
        component_height=component_height,
        categories=categories,
    )
    lines = [
        f"{selector} {{",
        f"{indent}{_PROPERTY}: {declaration.ltr};",
        "}",
    ]
    if declaration.mirrored:
        lines += [
            f'[dir="rtl"] {selector}, {selector}[dir="rtl"] {{',
            f"{indent}{_PROPERTY}: {declaration.rtl};",
            "}",
        ]
    logger.debug(
        "Emitted %s rule for %r (mirrored=%s)",
        _PROPERTY, selector, declaration.mirrored,
    )
    return "\n".join(lines) + "\n"
