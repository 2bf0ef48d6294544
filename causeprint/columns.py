# causeprint/columns.py
"""
Column alignment for report sections.

Every section is written in two passes: first the widest value of each column
is measured with :func:`max_width`, then each row is written with
:func:`write_justified`, which right-justifies a value within its column.
Decoration passed as ``prefix``/``suffix`` (ANSI codes, typically) is written
around the value but never counted toward its width.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from causeprint.writer import TextSink, write


def indent(sink: TextSink, spaces: int) -> None:
    """Write *spaces* space characters; nothing when *spaces* <= 0."""
    if spaces > 0:
        sink.write(" " * spaces)


def write_justified(
    sink: TextSink,
    width: int,
    value: str,
    prefix: str = "",
    suffix: str = "",
) -> None:
    """Write *value* right-justified within a column *width* characters wide."""
    indent(sink, width - len(value))
    write(sink, prefix, value, suffix)


def max_width(
    rows: Iterable[Any],
    selector: Optional[Callable[[Any], str]] = None,
) -> int:
    """
    Return the length of the longest ``selector(row)``, or 0 for no rows.

    Without a *selector* the rows are measured directly.
    """
    if selector is None:
        return max((len(row) for row in rows), default=0)
    return max((len(selector(row)) for row in rows), default=0)
