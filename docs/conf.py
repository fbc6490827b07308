from __future__ import annotations

import sys
from datetime import date
from pathlib import Path


_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


project = "aoc2020"
author = "aoc2020 contributors"
copyright = f"{date.today().year}, {author}"  # noqa: A001

# Solver docstrings carry the puzzle text; autosummary renders one page per module.
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.viewcode",
]
autosummary_generate = True
autodoc_member_order = "bysource"
exclude_patterns = ["_build"]

html_theme = "furo"
html_title = "aoc2020"
