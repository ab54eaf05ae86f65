"""
Namespace handles: React, Remotion, RemotionShapes.

Generated code sometimes reaches primitives through a namespace
(``Remotion.interpolate(...)``) instead of the bare name. Each attribute is
the same object bound under the bare name.
"""

from types import SimpleNamespace
from typing import Any

from . import shapes
from .elements import AbsoluteFill, Fragment, Img, Sequence, create_element
from .frame import (
    use_current_frame,
    use_effect,
    use_memo,
    use_ref,
    use_state,
    use_video_config,
)
from .timing import interpolate, spring

_SHAPE_EXPORTS = (
    "Rect",
    "Circle",
    "Triangle",
    "Star",
    "Polygon",
    "Ellipse",
    "Heart",
    "Pie",
    "make_rect",
    "make_circle",
    "make_triangle",
    "make_star",
    "make_polygon",
    "make_ellipse",
    "make_heart",
    "make_pie",
)


def make_react_namespace() -> Any:
    return SimpleNamespace(
        create_element=create_element,
        Fragment=Fragment,
        use_state=use_state,
        use_effect=use_effect,
        use_memo=use_memo,
        use_ref=use_ref,
    )


def make_remotion_namespace() -> Any:
    return SimpleNamespace(
        AbsoluteFill=AbsoluteFill,
        interpolate=interpolate,
        use_current_frame=use_current_frame,
        use_video_config=use_video_config,
        spring=spring,
        Sequence=Sequence,
        Img=Img,
    )


def make_shapes_namespace() -> Any:
    return SimpleNamespace(**{name: getattr(shapes, name) for name in _SHAPE_EXPORTS})
