# causeprint/report.py
"""
Failure report writer.

A report lists every error of a cause chain, outermost first, with type
names right-justified in one shared column::

            RuntimeError: Request handling exception
            RuntimeError: Failure updating row
    app.db.DatabaseError: Database failure
                            error_code: 123
                             sql_state: ABC
       db.py:42       app.db.jdbc_update
      app.py:17  app.service.update_row

Properties of an error (sorted by name) follow its header line. Only the
root error, the innermost one, is followed by its stack trace.

Usage::

    from causeprint import format_exception, print_exception

    try:
        handle(request)
    except Exception as exc:
        print_exception(exc)              # colour when stderr is a TTY
        text = format_exception(exc)      # plain string, default fonts
"""

from __future__ import annotations

import io
import os
import sys
from typing import Any, List, Optional, TextIO

from causeprint.analysis import CauseFrame, analyze_exception
from causeprint.columns import indent, max_width, write_justified
from causeprint.fonts import DEFAULT_FONTS, NO_FONTS, Fonts
from causeprint.introspect import IntrospectorRegistry, default_registry
from causeprint.stack import StackFrame, StackFrameExpander, expand_stack_trace
from causeprint.writer import TextSink, write, writeln


def _write_stack_trace(
    sink: TextSink,
    frames: List[StackFrame],
    fonts: Fonts,
) -> None:
    file_width = max_width(frames, lambda f: f.file)
    line_width = max_width(frames, lambda f: f.line)
    name_width = max_width(frames, lambda f: f.name)
    class_width = max_width(frames, lambda f: f.class_name)

    for frame in frames:
        indent(sink, name_width - len(frame.name))
        # There will be 0 or 2+ names (the first being the namespace)
        if frame.names:
            write(sink, "/".join(frame.names[:-1]))
            write(sink, "/", fonts.function_name, frame.names[-1], fonts.reset)
        write(sink, "  ")
        write_justified(sink, file_width, frame.file)
        write(sink, ":")
        write_justified(sink, line_width, frame.line)
        write(sink, "  ")
        write_justified(sink, class_width, frame.class_name)
        writeln(sink, ".", frame.method)


def _write_frame(
    sink: TextSink,
    frame: CauseFrame,
    column_width: int,
    fonts: Fonts,
) -> None:
    write_justified(sink, column_width, frame.type_name, fonts.exception, fonts.reset)
    if frame.message:
        writeln(sink, ": ", fonts.message, frame.message, fonts.reset)
    else:
        writeln(sink, ":")

    if not frame.properties:
        return
    # Allow for the width of the type name, and some extra indentation.
    prop_name_width = column_width + 4 + max_width(frame.properties)
    for name in sorted(frame.properties):
        write_justified(sink, prop_name_width, name, fonts.property, fonts.reset)
        writeln(sink, ": ", frame.properties[name])


def write_exception(
    sink: TextSink,
    error: Any,
    fonts: Optional[Fonts] = None,
    registry: Optional[IntrospectorRegistry] = None,
    expander: Optional[StackFrameExpander] = None,
) -> None:
    """
    Write a formatted report of *error* and its causes to *sink*.

    Parameters
    ----------
    sink:
        Anything with ``write(str)`` and ``flush()``.
    error:
        A Python exception, a :class:`~causeprint.introspect.CapturedFailure`,
        or any error type *registry* knows.
    fonts:
        Decoration; defaults to :data:`~causeprint.fonts.DEFAULT_FONTS`. Pass
        :data:`~causeprint.fonts.NO_FONTS` to remove ANSI formatting
        entirely.
    registry:
        Introspectors to use; defaults to
        :func:`~causeprint.introspect.default_registry`.
    expander:
        Stack-frame expansion options for the root error.
    """
    if fonts is None:
        fonts = DEFAULT_FONTS
    if registry is None:
        registry = default_registry()
    frames = analyze_exception(error, registry)
    # Everything is read before anything is written: a failure leaves the
    # sink untouched.
    stack = expand_stack_trace(frames[-1].error, registry, expander)
    column_width = max_width(frames, lambda f: f.type_name)

    for frame in frames:
        _write_frame(sink, frame, column_width, fonts)
        if frame.root:
            _write_stack_trace(sink, stack, fonts)


def format_exception(
    error: Any,
    fonts: Optional[Fonts] = None,
    registry: Optional[IntrospectorRegistry] = None,
    expander: Optional[StackFrameExpander] = None,
) -> str:
    """Format *error* as a multi-line string using :func:`write_exception`."""
    buffer = io.StringIO()
    write_exception(buffer, error, fonts, registry, expander)
    return buffer.getvalue()


def _use_colour(stream: TextIO) -> bool:
    try:
        is_tty = hasattr(stream, "isatty") and stream.isatty()
    except ValueError:
        # closed stream
        is_tty = False
    return is_tty and os.environ.get("NO_COLOR") is None


def print_exception(
    error: Any,
    stream: Optional[TextIO] = None,
    colour: Optional[bool] = None,
    registry: Optional[IntrospectorRegistry] = None,
    expander: Optional[StackFrameExpander] = None,
) -> None:
    """
    Write the report for *error* to *stream* (``sys.stderr`` by default).

    With ``colour=None`` the default fonts are used only when the stream is
    a TTY and ``NO_COLOR`` is not set.
    """
    stream = stream if stream is not None else sys.stderr
    use_colour = colour if colour is not None else _use_colour(stream)
    fonts = DEFAULT_FONTS if use_colour else NO_FONTS
    write_exception(stream, error, fonts, registry, expander)
