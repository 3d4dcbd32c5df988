"""Sphinx configuration for cornerwise documentation."""

project = "cornerwise"
copyright = "2026, cornerwise contributors"
author = "cornerwise contributors"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx_autodoc_typehints",
]

exclude_patterns = ["_build"]

# Google-style docstrings only.
napoleon_google_docstring = True
napoleon_numpy_docstring = False

autodoc_member_order = "bysource"
autodoc_typehints = "description"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "matplotlib": ("https://matplotlib.org/stable/", None),
}

html_theme = "sphinx_rtd_theme"

# -- Corner preview figures --------------------------------------------------

import os
import runpy
from pathlib import Path

_PREVIEW_SCRIPT = Path(__file__).resolve().parent / "_static" / "generate_images.py"


def _render_corner_previews(app, config):
    """Write the SVG corner previews into ``_static`` for the usage pages.

    Set ``CORNERWISE_NO_PREVIEWS`` to build the text-only docs without
    matplotlib output.
    """
    if os.environ.get("CORNERWISE_NO_PREVIEWS"):
        return
    runpy.run_path(str(_PREVIEW_SCRIPT), run_name="__main__")


def setup(app):
    app.connect("config-inited", _render_corner_previews)
    return {"parallel_read_safe": True}
