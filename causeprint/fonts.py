# causeprint/fonts.py
"""
Fonts (ANSI decoration) for the elements of a failure report.

A :class:`Fonts` value holds the text written before each kind of element,
plus the ``reset`` written after it. Fonts never change alignment: the
column code measures only the decorated text itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from termcolor import ATTRIBUTES, COLORS, RESET


# termcolor.colored() wraps the text and appends RESET itself; a Fonts value
# needs the opening sequence on its own.
def _sgr(*codes: int) -> str:
    """ANSI Select Graphic Rendition sequence for *codes*."""
    return "".join(f"\033[{code}m" for code in codes)


@dataclass(frozen=True)
class Fonts:
    """Decoration strings; an empty string means no decoration."""
    exception: str = ""
    reset: str = ""
    message: str = ""
    property: str = ""
    function_name: str = ""

    @classmethod
    def from_mapping(cls, fonts: Mapping[str, str]) -> Fonts:
        """
        Build fonts from a mapping with the keys ``exception``, ``reset``,
        ``message``, ``property`` and ``function-name`` (``function_name`` is
        accepted too). Missing keys mean no decoration.
        """
        unknown = set(fonts) - {
            "exception", "reset", "message", "property",
            "function-name", "function_name",
        }
        if unknown:
            raise KeyError(f"Unknown font key(s): {', '.join(sorted(unknown))}")
        return cls(
            exception=fonts.get("exception", ""),
            reset=fonts.get("reset", ""),
            message=fonts.get("message", ""),
            property=fonts.get("property", ""),
            function_name=fonts.get("function-name", fonts.get("function_name", "")),
        )


DEFAULT_FONTS = Fonts(
    exception=_sgr(ATTRIBUTES["bold"], COLORS["red"]),
    reset=RESET,
    message=_sgr(ATTRIBUTES["bold"], COLORS["white"]),
    property=_sgr(ATTRIBUTES["bold"]),
    function_name=_sgr(ATTRIBUTES["bold"]),
)

NO_FONTS = Fonts()
