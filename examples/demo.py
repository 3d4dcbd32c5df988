"""Demo script: resolve component radii, print CSS, and render previews."""

from pathlib import Path

from cornerwise import (
    corner_mask,
    load_categories,
    mask_radius,
    radius_rule,
    render_preview,
)

FIXTURES = Path(__file__).resolve().parent.parent / "tests" / "fixtures"
OUTPUT = Path(__file__).resolve().parent / "chip.png"


def main():
    categories = load_categories(FIXTURES / "categories.json")
    print(f"Loaded categories: {dict(categories)}")

    top = mask_radius("large", corner_mask("top_left", "top_right"),
                      categories=categories)
    print(f"Sheet radius (top corners only): {top}")

    print(radius_rule(".sheet", top, rtl_reflexive=True))
    print(radius_rule(".chip", "0 medium medium 0", rtl_reflexive=True,
                      categories=categories))
    print(radius_rule(".fab", "pill", component_height=56,
                      categories=categories))

    render_preview("0 medium medium 0", 120, 32, categories=categories,
                   output=OUTPUT)
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
