# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and Rich theme used by typedargs help and error output.

`OneColors` exposes hex color strings usable directly in Rich markup
(e.g. `f"[{OneColors.DARK_RED}]error[/]"`). Members ending in `_b` are bold
variants. `get_theme()` builds a Rich `Theme` with named styles for the
help renderer.
"""
from rich.theme import Theme


class OneColors:
    """One Dark inspired palette."""

    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"

    DARK_RED_b = f"bold {DARK_RED}"
    BLUE_b = f"bold {BLUE}"


def get_theme() -> Theme:
    """Return the Rich theme used by the shared typedargs console."""
    return Theme(
        {
            "usage": OneColors.BLUE_b,
            "heading": "bold",
            "switch": OneColors.CYAN,
            "type_tag": OneColors.MAGENTA,
            "range": OneColors.DARK_YELLOW,
            "default": OneColors.GREEN,
            "error": OneColors.DARK_RED_b,
            "muted": OneColors.COMMENT_GREY,
        }
    )
