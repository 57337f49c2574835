# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Colour palette and rich theme used by Singledash console output.

`OneColors` exposes hex colours as class attributes. Suffixing an attribute
with `_b`, `_i` or `_u` returns the same colour as a bold, italic or
underlined rich style string:

    OneColors.DARK_RED    -> "#BE5046"
    OneColors.DARK_RED_b  -> "bold #BE5046"
"""
from __future__ import annotations

from rich.theme import Theme

_STYLE_SUFFIXES = {
    "_b": "bold",
    "_i": "italic",
    "_u": "underline",
}


class ColorsMeta(type):
    """Resolve `<COLOR>_<suffix>` lookups into styled colour strings."""

    def __getattr__(cls, name: str) -> str:
        for suffix, style in _STYLE_SUFFIXES.items():
            if name.endswith(suffix):
                base = name[: -len(suffix)]
                if base in cls.__dict__:
                    return f"{style} {cls.__dict__[base]}"
        raise AttributeError(f"'{cls.__name__}' has no color named '{name}'")


class OneColors(metaclass=ColorsMeta):
    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


def get_one_theme() -> Theme:
    """Return the rich theme with the semantic styles used for values and errors."""
    return Theme(
        {
            "value": OneColors.GREEN,
            "error": OneColors.DARK_RED_b,
        }
    )
