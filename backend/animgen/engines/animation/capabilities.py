"""
CapabilityTable: the ordered whitelist of names generated code may use.

Binding is positional: the compiler declares the names as parameters of the
factory function, in table order, and calls it with the values in the same
order. The default table is built once per process and never mutated.
"""

import keyword
import logging
import math
import threading
from collections.abc import Iterable, Iterator
from typing import Any

from animgen.core.config import settings

from .modules import (
    AbsoluteFill,
    Circle,
    Easing,
    Ellipse,
    Fragment,
    Heart,
    Img,
    Pie,
    Polygon,
    Rect,
    Sequence,
    Star,
    TransitionSeries,
    Triangle,
    clock_wipe,
    fade,
    flip,
    interpolate,
    linear_timing,
    make_circle,
    make_ellipse,
    make_heart,
    make_log_module,
    make_pie,
    make_polygon,
    make_react_namespace,
    make_rect,
    make_remotion_namespace,
    make_shapes_namespace,
    make_star,
    make_triangle,
    slide,
    spring,
    spring_timing,
    use_current_frame,
    use_effect,
    use_memo,
    use_ref,
    use_state,
    use_video_config,
    wipe,
)

# Bump when the ordered default list changes.
CAPABILITY_TABLE_VERSION = "2"

_MISSING = object()


class CapabilityTable:
    """Immutable ordered (name, value) pairs; names are unique public identifiers."""

    __slots__ = ("_names", "_values", "_index")

    def __init__(self, items: Iterable[tuple[str, Any]]) -> None:
        names: list[str] = []
        values: list[Any] = []
        index: dict[str, int] = {}
        for name, value in items:
            if not isinstance(name, str) or not name.isidentifier():
                raise ValueError(f"Capability name must be an identifier, got {name!r}")
            if keyword.iskeyword(name):
                raise ValueError(f"Capability name must not be a keyword: {name!r}")
            if name.startswith("_"):
                raise ValueError(f"Capability name must not start with '_': {name!r}")
            if name in index:
                raise ValueError(f"Duplicate capability name: {name!r}")
            index[name] = len(names)
            names.append(name)
            values.append(value)
        self._names = tuple(names)
        self._values = tuple(values)
        self._index = index

    def names(self) -> tuple[str, ...]:
        return self._names

    def values(self) -> tuple[Any, ...]:
        return self._values

    def items(self) -> tuple[tuple[str, Any], ...]:
        return tuple(zip(self._names, self._values))

    def get(self, name: str, default: Any = None) -> Any:
        i = self._index.get(name)
        return default if i is None else self._values[i]

    def __getitem__(self, name: str) -> Any:
        value = self.get(name, _MISSING)
        if value is _MISSING:
            raise KeyError(name)
        return value

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"CapabilityTable({', '.join(self._names)})"


def default_capabilities() -> list[tuple[str, Any]]:
    """The versioned ordered list: namespaces, components, timing, hooks, shapes, transitions, extras."""
    return [
        # Namespaces
        ("React", make_react_namespace()),
        ("Remotion", make_remotion_namespace()),
        ("RemotionShapes", make_shapes_namespace()),
        # Components
        ("AbsoluteFill", AbsoluteFill),
        ("Sequence", Sequence),
        ("Img", Img),
        ("Fragment", Fragment),
        # Timing
        ("interpolate", interpolate),
        ("spring", spring),
        ("Easing", Easing),
        # Hooks
        ("use_current_frame", use_current_frame),
        ("use_video_config", use_video_config),
        ("use_state", use_state),
        ("use_effect", use_effect),
        ("use_memo", use_memo),
        ("use_ref", use_ref),
        # Shapes
        ("Rect", Rect),
        ("Circle", Circle),
        ("Triangle", Triangle),
        ("Star", Star),
        ("Polygon", Polygon),
        ("Ellipse", Ellipse),
        ("Heart", Heart),
        ("Pie", Pie),
        ("make_rect", make_rect),
        ("make_circle", make_circle),
        ("make_triangle", make_triangle),
        ("make_star", make_star),
        ("make_polygon", make_polygon),
        ("make_ellipse", make_ellipse),
        ("make_heart", make_heart),
        ("make_pie", make_pie),
        # Transitions
        ("TransitionSeries", TransitionSeries),
        ("linear_timing", linear_timing),
        ("spring_timing", spring_timing),
        ("fade", fade),
        ("slide", slide),
        ("wipe", wipe),
        ("flip", flip),
        ("clock_wipe", clock_wipe),
        # Extras
        ("math", math),
        (
            "log",
            make_log_module(logger_instance=logging.getLogger(settings.ANIMATION_LOG_NAME)),
        ),
    ]


_table: CapabilityTable | None = None
_table_lock = threading.Lock()


def get_capability_table() -> CapabilityTable:
    """Return the process-wide CapabilityTable (thread-safe double-checked locking)."""
    global _table
    if _table is None:
        with _table_lock:
            if _table is None:
                _table = CapabilityTable(default_capabilities())
    return _table
