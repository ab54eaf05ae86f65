"""
Shape primitives: make_* return SVG path data, the components wrap it in an Element.

All paths are drawn in a box anchored at (0, 0) with the returned width and
height; transform_origin is the box centre.
"""

import math
from dataclasses import dataclass
from typing import Any

from .elements import Element, create_element

_TRIANGLE_DIRECTIONS = ("up", "down", "left", "right")


@dataclass(frozen=True)
class ShapeInfo:
    path: str
    width: float
    height: float
    transform_origin: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "width": self.width,
            "height": self.height,
            "transform_origin": self.transform_origin,
        }


def _num(value: float) -> str:
    """Compact number for path data: 100.0 -> "100", 1/3 -> "0.3333"."""
    rounded = round(float(value), 4)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.4f}".rstrip("0").rstrip(".")


def _positive(name: str, value: float) -> None:
    if not isinstance(value, int | float) or not value > 0 or math.isinf(value):
        raise ValueError(f"{name} must be a positive number, got {value!r}")


def _info(path: str, width: float, height: float) -> ShapeInfo:
    return ShapeInfo(
        path=path,
        width=width,
        height=height,
        transform_origin=f"{_num(width / 2)} {_num(height / 2)}",
    )


def _polyline(points: list[tuple[float, float]]) -> str:
    head, *rest = points
    parts = [f"M {_num(head[0])} {_num(head[1])}"]
    parts.extend(f"L {_num(x)} {_num(y)}" for x, y in rest)
    parts.append("Z")
    return " ".join(parts)


def make_rect(width: float, height: float) -> ShapeInfo:
    _positive("width", width)
    _positive("height", height)
    return _info(_polyline([(0, 0), (width, 0), (width, height), (0, height)]), width, height)


def make_ellipse(rx: float, ry: float) -> ShapeInfo:
    _positive("rx", rx)
    _positive("ry", ry)
    path = (
        f"M {_num(rx)} 0 "
        f"A {_num(rx)} {_num(ry)} 0 1 1 {_num(rx)} {_num(ry * 2)} "
        f"A {_num(rx)} {_num(ry)} 0 1 1 {_num(rx)} 0 Z"
    )
    return _info(path, rx * 2, ry * 2)


def make_circle(radius: float) -> ShapeInfo:
    _positive("radius", radius)
    return make_ellipse(radius, radius)


def make_triangle(length: float, direction: str = "up") -> ShapeInfo:
    """Equilateral triangle with side ``length`` pointing ``direction``."""
    _positive("length", length)
    if direction not in _TRIANGLE_DIRECTIONS:
        raise ValueError(f"direction must be one of {_TRIANGLE_DIRECTIONS}, got {direction!r}")
    h = length * math.sqrt(3) / 2
    if direction == "up":
        return _info(_polyline([(length / 2, 0), (length, h), (0, h)]), length, h)
    if direction == "down":
        return _info(_polyline([(0, 0), (length, 0), (length / 2, h)]), length, h)
    if direction == "left":
        return _info(_polyline([(0, length / 2), (h, 0), (h, length)]), h, length)
    return _info(_polyline([(0, 0), (h, length / 2), (0, length)]), h, length)


def _radial_points(count: int, radii: list[float], cx: float, cy: float) -> list[tuple[float, float]]:
    """``count`` points around (cx, cy), first one straight up, cycling through radii."""
    points = []
    for i in range(count):
        angle = -math.pi / 2 + i * 2 * math.pi / count
        r = radii[i % len(radii)]
        points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
    return points


def make_polygon(points: int, radius: float) -> ShapeInfo:
    """Regular polygon with ``points`` corners inscribed in a circle of ``radius``."""
    if not isinstance(points, int) or points < 3:
        raise ValueError(f"points must be an integer >= 3, got {points!r}")
    _positive("radius", radius)
    size = radius * 2
    return _info(_polyline(_radial_points(points, [radius], radius, radius)), size, size)


def make_star(points: int = 5, inner_radius: float = 100, outer_radius: float = 200) -> ShapeInfo:
    if not isinstance(points, int) or points < 3:
        raise ValueError(f"points must be an integer >= 3, got {points!r}")
    _positive("inner_radius", inner_radius)
    _positive("outer_radius", outer_radius)
    if inner_radius >= outer_radius:
        raise ValueError("inner_radius must be smaller than outer_radius")
    size = outer_radius * 2
    corners = _radial_points(points * 2, [outer_radius, inner_radius], outer_radius, outer_radius)
    return _info(_polyline(corners), size, size)


def make_heart(height: float) -> ShapeInfo:
    """Heart drawn with four cubic curves; width is 1.1 x height."""
    _positive("height", height)
    w = height * 1.1
    h = height
    path = " ".join(
        [
            f"M {_num(w / 2)} {_num(h * 0.3)}",
            f"C {_num(w * 0.4)} {_num(h * 0.05)} 0 0 0 {_num(h * 0.32)}",
            f"C 0 {_num(h * 0.6)} {_num(w * 0.35)} {_num(h * 0.8)} {_num(w / 2)} {_num(h)}",
            f"C {_num(w * 0.65)} {_num(h * 0.8)} {_num(w)} {_num(h * 0.6)} {_num(w)} {_num(h * 0.32)}",
            f"C {_num(w)} 0 {_num(w * 0.6)} {_num(h * 0.05)} {_num(w / 2)} {_num(h * 0.3)}",
            "Z",
        ]
    )
    return _info(path, w, h)


def make_pie(
    radius: float,
    progress: float,
    *,
    closed: bool = True,
    counter_clockwise: bool = False,
    rotation: float = 0,
) -> ShapeInfo:
    """Circle slice starting at 12 o'clock; ``progress`` in [0, 1], ``rotation`` in degrees."""
    _positive("radius", radius)
    if not 0 <= progress <= 1:
        raise ValueError(f"progress must be between 0 and 1, got {progress!r}")
    size = radius * 2
    if progress == 1:
        return _info(make_circle(radius).path, size, size)

    start = -math.pi / 2 + math.radians(rotation)
    sweep = progress * 2 * math.pi * (-1 if counter_clockwise else 1)
    end = start + sweep
    sx, sy = radius + radius * math.cos(start), radius + radius * math.sin(start)
    ex, ey = radius + radius * math.cos(end), radius + radius * math.sin(end)
    large_arc = 1 if progress > 0.5 else 0
    sweep_flag = 0 if counter_clockwise else 1
    parts = []
    if closed:
        parts.append(f"M {_num(radius)} {_num(radius)} L {_num(sx)} {_num(sy)}")
    else:
        parts.append(f"M {_num(sx)} {_num(sy)}")
    parts.append(
        f"A {_num(radius)} {_num(radius)} 0 {large_arc} {sweep_flag} {_num(ex)} {_num(ey)}"
    )
    if closed:
        parts.append("Z")
    return _info(" ".join(parts), size, size)


def _shape_element(name: str, info: ShapeInfo, props: dict[str, Any]) -> Element:
    return create_element(name, {**props, **info.to_dict()})


def Rect(*, width: float, height: float, **props: Any) -> Element:
    return _shape_element("Rect", make_rect(width, height), props)


def Circle(*, radius: float, **props: Any) -> Element:
    return _shape_element("Circle", make_circle(radius), props)


def Ellipse(*, rx: float, ry: float, **props: Any) -> Element:
    return _shape_element("Ellipse", make_ellipse(rx, ry), props)


def Triangle(*, length: float, direction: str = "up", **props: Any) -> Element:
    return _shape_element("Triangle", make_triangle(length, direction), props)


def Star(*, points: int = 5, inner_radius: float = 100, outer_radius: float = 200, **props: Any) -> Element:
    return _shape_element("Star", make_star(points, inner_radius, outer_radius), props)


def Polygon(*, points: int, radius: float, **props: Any) -> Element:
    return _shape_element("Polygon", make_polygon(points, radius), props)


def Heart(*, height: float, **props: Any) -> Element:
    return _shape_element("Heart", make_heart(height), props)


def Pie(
    *,
    radius: float,
    progress: float,
    closed: bool = True,
    counter_clockwise: bool = False,
    rotation: float = 0,
    **props: Any,
) -> Element:
    info = make_pie(
        radius,
        progress,
        closed=closed,
        counter_clockwise=counter_clockwise,
        rotation=rotation,
    )
    return _shape_element("Pie", info, props)
