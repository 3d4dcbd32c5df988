"""Generate static images for the documentation."""

from pathlib import Path

from cornerwise import corner_mask, render_preview

OUT = Path(__file__).resolve().parent


def generate_docs_images() -> None:
    render_preview("small", 120, 36, output=OUT / "small.svg")
    render_preview("50%", 120, 36, output=OUT / "pill.svg")
    render_preview(
        "0 12px 12px 0", 120, 36, output=OUT / "chip_ltr.svg",
    )
    render_preview(
        "0 12px 12px 0", 120, 36, rtl=True, output=OUT / "chip_rtl.svg",
    )
    render_preview(
        16, 160, 96,
        mask=corner_mask("top_left", "top_right"),
        output=OUT / "sheet_top.svg",
    )


if __name__ == "__main__":
    generate_docs_images()
