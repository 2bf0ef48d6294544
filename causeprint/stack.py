# causeprint/stack.py
"""
Stack-trace expansion.

Each raw stack element is turned into a :class:`StackFrame`. Frames that come
from compiled Clojure functions ("symbolic" frames) additionally get their
source-level name recovered from the JVM class name, e.g.
``my_app.core$process_row__1234`` becomes ``my-app.core/process-row``.
"""

from __future__ import annotations

import logging
import re
import warnings
from dataclasses import dataclass
from typing import AbstractSet, Any, List, Optional, Tuple

from causeprint.demangle import NameDemangler
from causeprint.errors import (
    EMPTY_STACK_WARNING,
    CauseprintError,
    EmptyStackWarning,
    IntrospectionError,
)
from causeprint.introspect import (
    IntrospectorRegistry,
    RawStackElement,
    default_registry,
)

_log = logging.getLogger(__name__)

# The compiler appends __1234 unique ids to the ends of things.
_UNIQUE_ID = re.compile(r"([\w|.-]+)__\d+")


@dataclass(frozen=True)
class StackFrame:
    """
    An expanded stack element.

    ``name`` is the fully qualified source name (blank for non-symbolic
    frames) and is what the name column is measured by; ``names`` is the
    same name split at slashes, so the last term can be highlighted.
    """
    file: str
    line: str
    class_name: str
    method: str
    name: str = ""
    names: Tuple[str, ...] = ()


class StackFrameExpander:
    """
    Converts raw stack elements into :class:`StackFrame` objects.

    Parameters
    ----------
    source_suffix:
        File-name suffix of source files that produce symbolic frames.
    invoke_methods:
        Method names under which compiled functions run.
    separator:
        Character separating namespace and nested function names in a class
        name.
    demangler:
        Used to restore each name segment.
    """

    def __init__(
        self,
        source_suffix: str = ".clj",
        invoke_methods: AbstractSet[str] = frozenset({"invoke", "doInvoke"}),
        separator: str = "$",
        demangler: Optional[NameDemangler] = None,
    ) -> None:
        self.source_suffix = source_suffix
        self.invoke_methods = frozenset(invoke_methods)
        self.separator = separator
        self.demangler = demangler or NameDemangler()

    def is_symbolic(self, element: RawStackElement) -> bool:
        return (
            (element.file or "").endswith(self.source_suffix)
            and element.method in self.invoke_methods
        )

    def symbolic_names(self, class_name: str) -> Tuple[str, ...]:
        """Split *class_name* into demangled namespace and function names."""
        names = []
        for segment in class_name.split(self.separator):
            match = _UNIQUE_ID.search(segment)
            if match:
                segment = match.group(1)
            names.append(self.demangler.demangle(segment))
        return tuple(names)

    def expand_element(self, element: RawStackElement) -> StackFrame:
        names = self.symbolic_names(element.class_name) if self.is_symbolic(element) else ()
        return StackFrame(
            file=element.file or "",
            line="" if element.line is None else str(element.line),
            class_name=element.class_name,
            method=element.method,
            name="/".join(names),
            names=names,
        )

    def expand(self, elements: List[RawStackElement]) -> List[StackFrame]:
        if not elements:
            _log.warning(EMPTY_STACK_WARNING)
            warnings.warn(EMPTY_STACK_WARNING, EmptyStackWarning, stacklevel=3)
        return [self.expand_element(element) for element in elements]


def expand_stack_trace(
    error: Any,
    registry: Optional[IntrospectorRegistry] = None,
    expander: Optional[StackFrameExpander] = None,
) -> List[StackFrame]:
    """
    Extract the stack trace of *error* and return its expanded frames.

    An empty stack emits :class:`~causeprint.errors.EmptyStackWarning` and
    returns an empty list.
    """
    registry = registry or default_registry()
    expander = expander or StackFrameExpander()
    introspector = registry.lookup(error)
    try:
        elements = introspector.stack_trace(error)
    except CauseprintError:
        raise
    except Exception as exc:
        raise IntrospectionError(
            f"Unable to read the stack trace of {type(error).__qualname__}: {exc}",
            error=error,
            cause=exc,
        ) from exc
    frames = expander.expand(elements)
    _log.debug("Expanded %d stack frame(s)", len(frames))
    return frames
