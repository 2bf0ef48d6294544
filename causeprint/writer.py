# causeprint/writer.py
"""
Text sinks: the target of every report.

A sink is any object with ``write(str)`` and ``flush()``; ``io.StringIO``,
``sys.stderr`` and files opened in text mode all qualify. The helpers below
stringify their arguments so callers can pass numbers and other values
directly.
"""

from __future__ import annotations

import io
from typing import Any, Callable, Protocol, runtime_checkable

ENDLINE = "\n"


@runtime_checkable
class TextSink(Protocol):
    """Receives strings, which are printed or stored."""

    def write(self, s: str) -> Any:
        ...

    def flush(self) -> Any:
        ...


def write(sink: TextSink, *values: Any) -> None:
    """Write each value, converted with ``str()``, with no separator."""
    for value in values:
        sink.write(str(value))


def writeln(sink: TextSink, *values: Any) -> None:
    """Write the values followed by an end-of-line, then flush the sink."""
    write(sink, *values)
    sink.write(ENDLINE)
    sink.flush()


def writef(sink: TextSink, fmt: str, *values: Any) -> None:
    """Write ``fmt % values``."""
    sink.write(fmt % values)


def into_string(fn: Callable[..., Any], *params: Any) -> str:
    """
    Call ``fn(buffer, *params)`` with a fresh in-memory sink and return
    everything written to it.
    """
    buffer = io.StringIO()
    fn(buffer, *params)
    return buffer.getvalue()
