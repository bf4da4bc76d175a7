""" Any global variables are stored here"""
from typing import Any

import jinja2

from .types import Color

# fmt: off
g: dict[str, Any] = {
    # User settable
    "strict": False,                        # bool, raise on unparseable axis specs
    "error_log": None,                      # None or a path the diagnostics get appended to
    "debug_color": Color(255, 0, 255, 64),  # anything pygame.Color accepts
    "debug_outline": "2px dashed",          # str, outline without the color
    "debug_shadow": "inset 0 0 20px 7px",   # str, box-shadow without the color
}

jinja_env = jinja2.Environment(autoescape=True, keep_trailing_newline=False)  # used for all html rendering

# fmt: on

################################ constant data ########################

axes = ("x", "y")
default_axis = "x"
directions = {"x": "row", "y": "column"}
default_length = "0"

alignment_keywords = frozenset({"stretch", "center", "start", "end"})

# everything align-items or justify-content accept (without the safe/unsafe prefixes)
css_alignments = alignment_keywords | {
    "normal",
    "baseline",
    "flex-start",
    "flex-end",
    "self-start",
    "self-end",
    "left",
    "right",
    "space-between",
    "space-around",
    "space-evenly",
    "inherit",
    "initial",
    "unset",
    "revert",
}
