# causeprint/demangle.py
"""
Recover source-level names from JVM class names produced by the Clojure
compiler.

The compiler rewrites characters that are illegal in JVM identifiers as
escape sequences introduced by ``_`` (``?`` becomes ``_QMARK_``, ``-``
becomes a bare ``_`` and so on). :func:`demangle` reverses that, and
:func:`mangle` applies it.

Several keys are prefixes of others (``_`` prefixes every one of them), so
the table is searched longest key first.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from causeprint.errors import UnrecognizedEscapeError

MARKER = "_"

# Natural character → mangled sequence, as emitted by the compiler.
CHAR_MAP: Dict[str, str] = {
    "-": "_",
    ":": "_COLON_",
    "+": "_PLUS_",
    ">": "_GT_",
    "<": "_LT_",
    "=": "_EQ_",
    "~": "_TILDE_",
    "!": "_BANG_",
    "@": "_CIRCA_",
    "#": "_SHARP_",
    "'": "_SINGLEQUOTE_",
    '"': "_DOUBLEQUOTE_",
    "%": "_PERCENT_",
    "^": "_CARET_",
    "&": "_AMPERSAND_",
    "*": "_STAR_",
    "|": "_BAR_",
    "{": "_LBRACE_",
    "}": "_RBRACE_",
    "[": "_LBRACK_",
    "]": "_RBRACK_",
    "/": "_SLASH_",
    "\\": "_BSLASH_",
    "?": "_QMARK_",
}


def _longest_first(table: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Invert *table* into (mangled, natural) pairs, longest mangled first."""
    pairs = [(mangled, natural) for natural, mangled in table.items()]
    # sorted() is stable, so equal-length keys keep table order
    return sorted(pairs, key=lambda pair: len(pair[0]), reverse=True)


class NameDemangler:
    """
    Replaces marker-prefixed escape sequences with the characters they stand
    for.

    Parameters
    ----------
    table:
        Mapping of natural character to mangled sequence. Every mangled
        sequence must start with *marker*.
    marker:
        The character that introduces an escape sequence.
    """

    def __init__(
        self,
        table: Optional[Mapping[str, str]] = None,
        marker: str = MARKER,
    ) -> None:
        self.marker = marker
        self._table = dict(CHAR_MAP if table is None else table)
        self._escapes = _longest_first(self._table)

    def match(self, s: str, i: int) -> Optional[Tuple[str, str]]:
        """Return the longest (escape, replacement) pair found at ``s[i:]``."""
        for escape, replacement in self._escapes:
            if s.startswith(escape, i):
                return escape, replacement
        return None

    def demangle(self, s: str) -> str:
        result: List[str] = []
        i = 0
        while i < len(s):
            ch = s[i]
            if ch != self.marker:
                result.append(ch)
                i += 1
                continue
            found = self.match(s, i)
            if found is None:
                raise UnrecognizedEscapeError(s, i)
            escape, replacement = found
            result.append(replacement)
            i += len(escape)
        return "".join(result)

    def mangle(self, s: str) -> str:
        return "".join(self._table.get(ch, ch) for ch in s)


_DEFAULT = NameDemangler()


def demangle(s: str) -> str:
    """
    De-munges a JVM name back to a Clojure name by converting mangled
    sequences, such as ``_QMARK_``, back into simple characters.

    Raises :class:`~causeprint.errors.UnrecognizedEscapeError` when the
    marker starts no known sequence.
    """
    return _DEFAULT.demangle(s)


def mangle(s: str) -> str:
    """Inverse of :func:`demangle`: ``mangle("valid?")`` is ``"valid_QMARK_"``."""
    return _DEFAULT.mangle(s)
