import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "urlconstructor"
author = "urlconstructor contributors"
import urlconstructor

release = urlconstructor.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

# MyST-Parser configuration
myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# Autodoc configuration
autodoc_default_options = {
    "members": True,
    "imported-members": False,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_title = "urlconstructor"
