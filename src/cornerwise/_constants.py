"""Shared constants used across the model and resolution layers."""

CORNER_COUNT: int = 4
"""Number of corners in a fully unpacked radius."""

DEFERRED_MARKERS: tuple[str, ...] = ("var(", "calc(")
"""Substrings marking a CSS expression that is passed through unevaluated."""

LENGTH_UNITS: frozenset[str] = frozenset({
    "px", "%", "em", "rem", "ex", "ch",
    "vw", "vh", "vmin", "vmax",
    "cm", "mm", "q", "in", "pt", "pc",
})
"""CSS units accepted on a numeric radius literal (compared lower-case)."""
