# causeprint/errors.py
"""
Error types raised (and warnings emitted) while building a failure report.

Hierarchy:
──────────
  CauseprintError (base)
  ├── UnrecognizedEscapeError  - demangler met a marker with no table entry
  └── IntrospectionError       - an error object could not be introspected

  EmptyStackWarning (UserWarning)
      the root error carries no stack trace; the report is still written

Report generation is a one-shot transform: nothing here is retried, and every
failure reaches the caller as one of the types above.
"""

from __future__ import annotations

from typing import Any, Optional


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION CLASSES
# ═══════════════════════════════════════════════════════════════════════════════

class CauseprintError(Exception):
    """
    Base exception for all causeprint errors.

    Args:
        message: Human-readable error message.
        cause: Optional underlying exception that caused this error.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class UnrecognizedEscapeError(CauseprintError):
    """A mangled name contains the marker character but no known escape."""

    def __init__(self, name: str, position: int) -> None:
        super().__init__(
            f"Unrecognized escape sequence at index {position} of {name!r}"
        )
        self.name = name
        self.position = position


class IntrospectionError(CauseprintError):
    """
    The message, properties or stack of an error could not be obtained.

    Raised when no introspector is registered for the error's type, or when
    the registered introspector itself fails. The report for that error is
    abandoned rather than written partially.
    """

    def __init__(
        self,
        message: str,
        error: Any = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, cause)
        self.error = error


# ───────────────────────────────────────────────────────────────────────────────
# WARNINGS
# ───────────────────────────────────────────────────────────────────────────────

class EmptyStackWarning(UserWarning):
    """The root error of a report has an empty stack trace."""


EMPTY_STACK_WARNING = (
    "Stack trace of root exception is empty; this usually means the stack was "
    "not captured when the error was raised."
)
