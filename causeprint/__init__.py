"""
causeprint — Readable Reports for Chains of Failures
====================================================

Renders an error and its nested causes as a column-aligned, optionally
coloured report, ending with the demangled and aligned stack trace of the
innermost (root) failure.

Modules
-------
analysis
    Walks an error graph and produces the ordered cause chain.
demangle
    Restores source-level names from mangled JVM class names.
stack
    Expands raw stack elements into named, aligned-ready frames.
columns
    Right-justification within measured columns.
report
    Writes the full report to a sink.
introspect
    The introspection seam: how messages, stacks and properties are read.
fonts
    ANSI decoration for each element of a report.
writer
    Text-sink helpers.
errors
    Exceptions and warnings raised by this package.

Quick start
-----------
>>> from causeprint import format_exception, NO_FONTS
>>> try:
...     raise ValueError("bad input")
... except ValueError as exc:
...     print(format_exception(exc, fonts=NO_FONTS).splitlines()[0])
ValueError: bad input
"""

from __future__ import annotations

from typing import List

from causeprint.analysis import CauseFrame, analyze_exception
from causeprint.demangle import NameDemangler, demangle, mangle
from causeprint.errors import (
    CauseprintError,
    EmptyStackWarning,
    IntrospectionError,
    UnrecognizedEscapeError,
)
from causeprint.fonts import DEFAULT_FONTS, NO_FONTS, Fonts
from causeprint.introspect import (
    CapturedFailure,
    ErrorIntrospector,
    IntrospectorRegistry,
    RawStackElement,
    default_registry,
)
from causeprint.report import format_exception, print_exception, write_exception
from causeprint.stack import StackFrame, StackFrameExpander, expand_stack_trace

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

__version__ = "0.1.0"

__all__: List[str] = [
    "__version__",
    # analysis
    "CauseFrame",
    "analyze_exception",
    # demangle
    "NameDemangler",
    "demangle",
    "mangle",
    # errors
    "CauseprintError",
    "EmptyStackWarning",
    "IntrospectionError",
    "UnrecognizedEscapeError",
    # fonts
    "DEFAULT_FONTS",
    "NO_FONTS",
    "Fonts",
    # introspect
    "CapturedFailure",
    "ErrorIntrospector",
    "IntrospectorRegistry",
    "RawStackElement",
    "default_registry",
    # report
    "format_exception",
    "print_exception",
    "write_exception",
    # stack
    "StackFrame",
    "StackFrameExpander",
    "expand_stack_trace",
]
