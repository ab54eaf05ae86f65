"""
Element tree primitives for generated animations: AbsoluteFill, Sequence, Img, Fragment.

Components only describe what to draw; the renderer consumes Element.to_dict().
"""

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Element:
    """A node in the render tree."""

    type: str
    props: dict[str, Any] = field(default_factory=dict)
    children: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "props": {k: to_plain(v) for k, v in self.props.items()},
            "children": [to_plain(c) for c in self.children],
        }


def to_plain(value: Any) -> Any:
    """JSON-friendly copy of a render result; opaque values become their repr."""
    if isinstance(value, Element):
        return value.to_dict()
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [to_plain(v) for v in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value is None or isinstance(value, str | int | float):
        return value
    return repr(value)


def flatten_children(children: Any) -> tuple[Any, ...]:
    """Flatten nested lists/tuples and drop None/False (conditional rendering)."""
    out: list[Any] = []
    for child in children:
        if child is None or child is False:
            continue
        if isinstance(child, list | tuple):
            out.extend(flatten_children(child))
        else:
            out.append(child)
    return tuple(out)


def create_element(type_: str, props: dict[str, Any] | None = None, *children: Any) -> Element:
    return Element(type=type_, props=dict(props or {}), children=flatten_children(children))


def AbsoluteFill(*children: Any, style: dict[str, Any] | None = None, **props: Any) -> Element:
    """Full-size, absolutely positioned flex column container."""
    merged = {
        "position": "absolute",
        "top": 0,
        "left": 0,
        "right": 0,
        "bottom": 0,
        "width": "100%",
        "height": "100%",
        "display": "flex",
        "flexDirection": "column",
    }
    merged.update(style or {})
    return create_element("AbsoluteFill", {**props, "style": merged}, *children)


def Sequence(
    *children: Any,
    from_frame: int = 0,
    duration_in_frames: float = math.inf,
    name: str | None = None,
    **props: Any,
) -> Element:
    """Time-shift children: they see frame 0 at ``from_frame``."""
    if duration_in_frames <= 0:
        raise ValueError(f"duration_in_frames must be positive, got {duration_in_frames}")
    if not math.isinf(duration_in_frames) and int(duration_in_frames) != duration_in_frames:
        raise ValueError(f"duration_in_frames must be an integer, got {duration_in_frames}")
    if int(from_frame) != from_frame:
        raise ValueError(f"from_frame must be an integer, got {from_frame}")
    merged = {
        **props,
        "from_frame": from_frame,
        "duration_in_frames": duration_in_frames,
    }
    if name is not None:
        merged["name"] = name
    return create_element("Sequence", merged, *children)


def Img(*, src: str, **props: Any) -> Element:
    if not src:
        raise ValueError("Img requires a non-empty src")
    return create_element("Img", {**props, "src": src})


def Fragment(*children: Any) -> Element:
    return create_element("Fragment", None, *children)
