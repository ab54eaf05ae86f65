"""
Capability modules exposed to generated animation code: elements, frame,
timing, shapes, transitions, log.
"""

from animgen.engines.animation.modules.elements import (
    AbsoluteFill,
    Element,
    Fragment,
    Img,
    Sequence,
    create_element,
)
from animgen.engines.animation.modules.frame import (
    Ref,
    VideoConfig,
    frame_context,
    render,
    use_current_frame,
    use_effect,
    use_memo,
    use_ref,
    use_state,
    use_video_config,
)
from animgen.engines.animation.modules.log import make_log_module
from animgen.engines.animation.modules.namespaces import (
    make_react_namespace,
    make_remotion_namespace,
    make_shapes_namespace,
)
from animgen.engines.animation.modules.shapes import (
    Circle,
    Ellipse,
    Heart,
    Pie,
    Polygon,
    Rect,
    ShapeInfo,
    Star,
    Triangle,
    make_circle,
    make_ellipse,
    make_heart,
    make_pie,
    make_polygon,
    make_rect,
    make_star,
    make_triangle,
)
from animgen.engines.animation.modules.timing import Easing, interpolate, measure_spring, spring
from animgen.engines.animation.modules.transitions import (
    TransitionPresentation,
    TransitionSeries,
    TransitionTiming,
    clock_wipe,
    fade,
    flip,
    linear_timing,
    slide,
    spring_timing,
    wipe,
)

__all__ = [
    "AbsoluteFill",
    "Element",
    "Fragment",
    "Img",
    "Sequence",
    "create_element",
    "Ref",
    "VideoConfig",
    "frame_context",
    "render",
    "use_current_frame",
    "use_effect",
    "use_memo",
    "use_ref",
    "use_state",
    "use_video_config",
    "make_log_module",
    "make_react_namespace",
    "make_remotion_namespace",
    "make_shapes_namespace",
    "Circle",
    "Ellipse",
    "Heart",
    "Pie",
    "Polygon",
    "Rect",
    "ShapeInfo",
    "Star",
    "Triangle",
    "make_circle",
    "make_ellipse",
    "make_heart",
    "make_pie",
    "make_polygon",
    "make_rect",
    "make_star",
    "make_triangle",
    "Easing",
    "interpolate",
    "measure_spring",
    "spring",
    "TransitionPresentation",
    "TransitionSeries",
    "TransitionTiming",
    "clock_wipe",
    "fade",
    "flip",
    "linear_timing",
    "slide",
    "spring_timing",
    "wipe",
]
