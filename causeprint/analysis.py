# causeprint/analysis.py
"""
Cause-chain analysis: turn an error and its nested causes into the ordered
list of frames a report is written from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Set, Tuple

from causeprint.errors import CauseprintError, IntrospectionError
from causeprint.introspect import IntrospectorRegistry, default_registry

_log = logging.getLogger(__name__)

# Properties that repeat what the report already shows elsewhere.
DISCARDED_PROPERTIES = frozenset({
    "suppressed",
    "message",
    "localizedMessage",
    "class",
    "stackTrace",
    "args",
})


@dataclass(frozen=True)
class CauseFrame:
    """One error of a cause chain, ready to be written."""
    error: Any
    type_name: str
    message: Optional[str] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    root: bool = False


def _expand(
    error: Any,
    registry: IntrospectorRegistry,
    seen: Set[int],
) -> Tuple[CauseFrame, Any]:
    """Build the frame for *error* and find the error nested inside it."""
    introspector = registry.lookup(error)
    try:
        type_name = introspector.type_name(error)
        message = introspector.message(error)
        properties = introspector.properties(error)
    except CauseprintError:
        raise
    except Exception as exc:
        raise IntrospectionError(
            f"Unable to introspect {type(error).__qualname__}: {exc}",
            error=error,
            cause=exc,
        ) from exc

    retained: Dict[str, Any] = {}
    nested = None
    for name, value in properties.items():
        if value is None:
            continue
        if registry.is_error(value):
            # Avoid infinite loop!
            if nested is None and id(value) not in seen:
                nested = value
            continue
        if name not in DISCARDED_PROPERTIES:
            retained[name] = value

    frame = CauseFrame(
        error=error,
        type_name=type_name,
        message=message,
        properties=retained,
    )
    return frame, nested


def analyze_exception(
    error: Any,
    registry: Optional[IntrospectorRegistry] = None,
) -> List[CauseFrame]:
    """
    Convert an error into a list of frames, one per nested error, outermost
    first.

    Each frame holds the original error plus the properties worth
    reporting: no ``None`` values, none of :data:`DISCARDED_PROPERTIES`, and
    nothing that is itself an error. The first error-valued property (in
    introspection order, not necessarily one named ``cause``) that is not
    already part of the chain becomes the next frame. The final frame has
    ``root=True``.
    """
    registry = registry or default_registry()
    frames: List[CauseFrame] = []
    seen: Set[int] = set()
    current = error
    while True:
        seen.add(id(current))
        frame, nested = _expand(current, registry, seen)
        if nested is None:
            frames.append(replace(frame, root=True))
            break
        frames.append(frame)
        current = nested
    _log.debug("Analyzed cause chain of %d error(s)", len(frames))
    return frames
