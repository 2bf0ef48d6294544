# causeprint/introspect.py
"""
Introspection of error objects.

The report code never touches an error directly. It asks an
:class:`ErrorIntrospector` for four things: the error's type name, its
message, its raw stack trace and its named properties. An
:class:`IntrospectorRegistry` maps error types to introspectors, and is also
how the analysis decides whether a property value is itself an error.

Two kinds of error are supported out of the box:

* Python exceptions (:class:`PythonIntrospector`);
* :class:`CapturedFailure` records, describing a failure that was captured
  elsewhere (for example a JVM exception with its stack) and is only being
  presented here.
"""

from __future__ import annotations

import os
import traceback
from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Protocol,
    Type,
    runtime_checkable,
)

from causeprint.errors import IntrospectionError

# Modules whose name is left off a Python type name, as the interpreter's
# own traceback printer does.
_IMPLICIT_MODULES = frozenset({"builtins", "__main__"})


# ═════════════════════════════════════════════════════════════════════════
#  DATA STRUCTURES
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RawStackElement:
    """One call-stack entry as the introspected error reports it."""
    file: str = ""
    line: Optional[int] = None
    class_name: str = ""
    method: str = ""


@dataclass(eq=False)
class CapturedFailure:
    """
    An already-captured failure: everything needed to report it, no live
    exception required.

    Nested failures are ordinary properties whose values are errors::

        db = CapturedFailure("java.sql.SQLException", "Database failure")
        top = CapturedFailure(
            "java.lang.RuntimeException",
            "Failure updating row",
            properties={"cause": db},
        )
    """
    type_name: str
    message: Optional[str] = None
    stack_trace: List[RawStackElement] = field(default_factory=list)
    properties: Dict[str, Any] = field(default_factory=dict)


# ═════════════════════════════════════════════════════════════════════════
#  INTROSPECTORS
# ═════════════════════════════════════════════════════════════════════════

@runtime_checkable
class ErrorIntrospector(Protocol):
    """Queries the report needs answered about one error object."""

    def type_name(self, error: Any) -> str:
        ...

    def message(self, error: Any) -> Optional[str]:
        ...

    def stack_trace(self, error: Any) -> List[RawStackElement]:
        ...

    def properties(self, error: Any) -> Dict[str, Any]:
        ...


class PythonIntrospector:
    """
    Introspects Python exceptions.

    Properties are ``__cause__`` (explicit chaining with ``raise ... from``),
    ``__context__`` (implicit chaining, unless suppressed) and then the
    public instance attributes in the order they were set. Public attributes
    never start with an underscore, so an attribute named ``cause`` or
    ``context`` cannot replace a chain link. The stack trace lists
    the innermost call first.
    """

    def type_name(self, error: BaseException) -> str:
        cls = type(error)
        if cls.__module__ in _IMPLICIT_MODULES:
            return cls.__qualname__
        return f"{cls.__module__}.{cls.__qualname__}"

    def message(self, error: BaseException) -> Optional[str]:
        return str(error) or None

    def stack_trace(self, error: BaseException) -> List[RawStackElement]:
        elements = []
        for frame, lineno in traceback.walk_tb(error.__traceback__):
            code = frame.f_code
            elements.append(RawStackElement(
                file=os.path.basename(code.co_filename),
                line=lineno,
                class_name=frame.f_globals.get("__name__", ""),
                method=getattr(code, "co_qualname", code.co_name),
            ))
        elements.reverse()
        return elements

    def properties(self, error: BaseException) -> Dict[str, Any]:
        props: Dict[str, Any] = {
            "__cause__": error.__cause__,
            "__context__": None if error.__suppress_context__ else error.__context__,
        }
        for name, value in vars(error).items():
            if not name.startswith("_"):
                props[name] = value
        return props


class CapturedFailureIntrospector:
    """Reads the fields of a :class:`CapturedFailure` back out."""

    def type_name(self, error: CapturedFailure) -> str:
        return error.type_name

    def message(self, error: CapturedFailure) -> Optional[str]:
        return error.message

    def stack_trace(self, error: CapturedFailure) -> List[RawStackElement]:
        return list(error.stack_trace)

    def properties(self, error: CapturedFailure) -> Dict[str, Any]:
        return dict(error.properties)


# ═════════════════════════════════════════════════════════════════════════
#  REGISTRY
# ═════════════════════════════════════════════════════════════════════════

class IntrospectorRegistry:
    """
    Maps error types to introspectors.

    Lookup walks the MRO of the error's type, so registering a base class
    covers its subclasses; a more specific registration wins.
    """

    def __init__(self) -> None:
        self._by_type: Dict[type, ErrorIntrospector] = {}

    def register(self, error_type: Type[Any], introspector: ErrorIntrospector) -> None:
        self._by_type[error_type] = introspector

    def find(self, value: Any) -> Optional[ErrorIntrospector]:
        for klass in type(value).__mro__:
            introspector = self._by_type.get(klass)
            if introspector is not None:
                return introspector
        return None

    def lookup(self, error: Any) -> ErrorIntrospector:
        """Return the introspector for *error*, or raise IntrospectionError."""
        introspector = self.find(error)
        if introspector is None:
            raise IntrospectionError(
                f"No introspector registered for {type(error).__qualname__}",
                error=error,
            )
        return introspector

    def is_error(self, value: Any) -> bool:
        """True when *value* is an error this registry can introspect."""
        return value is not None and self.find(value) is not None


def default_registry() -> IntrospectorRegistry:
    """A fresh registry covering Python exceptions and captured failures."""
    registry = IntrospectorRegistry()
    registry.register(BaseException, PythonIntrospector())
    registry.register(CapturedFailure, CapturedFailureIntrospector())
    return registry
