"""
Timing helpers: interpolate, spring, measure_spring, Easing.

interpolate() maps a frame onto an output range through piecewise-linear
segments; spring() evaluates a damped harmonic oscillator analytically.
"""

import math
from collections.abc import Callable, Sequence
from typing import Any

EasingFn = Callable[[float], float]

_EXTRAPOLATE = frozenset({"extend", "clamp", "identity"})

SPRING_DEFAULTS: dict[str, Any] = {
    "damping": 10.0,
    "mass": 1.0,
    "stiffness": 100.0,
    "overshoot_clamping": False,
}


def _cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFn:
    if not (0 <= x1 <= 1 and 0 <= x2 <= 1):
        raise ValueError("bezier x values must be in [0, 1]")

    def coord(t: float, p1: float, p2: float) -> float:
        # B(t) for P0=0, P3=1
        u = 1 - t
        return 3 * u * u * t * p1 + 3 * u * t * t * p2 + t * t * t

    def slope(t: float, p1: float, p2: float) -> float:
        u = 1 - t
        return 3 * u * u * p1 + 6 * u * t * (p2 - p1) + 3 * t * t * (1 - p2)

    def solve_t(x: float) -> float:
        t = x
        for _ in range(8):
            err = coord(t, x1, x2) - x
            if abs(err) < 1e-7:
                return t
            d = slope(t, x1, x2)
            if abs(d) < 1e-6:
                break
            t -= err / d
        # Newton did not converge: bisect.
        lo, hi = 0.0, 1.0
        t = x
        for _ in range(50):
            err = coord(t, x1, x2) - x
            if abs(err) < 1e-7:
                break
            if err > 0:
                hi = t
            else:
                lo = t
            t = (lo + hi) / 2
        return t

    def ease(x: float) -> float:
        if x <= 0:
            return 0.0
        if x >= 1:
            return 1.0
        return coord(solve_t(x), y1, y2)

    return ease


class Easing:
    """Easing functions; compose with in_/out/in_out, e.g. Easing.in_out(Easing.cubic)."""

    @staticmethod
    def linear(t: float) -> float:
        return t

    @staticmethod
    def quad(t: float) -> float:
        return t * t

    @staticmethod
    def cubic(t: float) -> float:
        return t * t * t

    @staticmethod
    def sin(t: float) -> float:
        return 1 - math.cos(t * math.pi / 2)

    @staticmethod
    def circle(t: float) -> float:
        return 1 - math.sqrt(max(0.0, 1 - t * t))

    @staticmethod
    def exp(t: float) -> float:
        return 0.0 if t == 0 else 2 ** (10 * (t - 1))

    @staticmethod
    def ease(t: float) -> float:
        return _EASE(t)

    @staticmethod
    def bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFn:
        return _cubic_bezier(x1, y1, x2, y2)

    @staticmethod
    def in_(fn: EasingFn) -> EasingFn:
        return fn

    @staticmethod
    def out(fn: EasingFn) -> EasingFn:
        return lambda t: 1 - fn(1 - t)

    @staticmethod
    def in_out(fn: EasingFn) -> EasingFn:
        def eased(t: float) -> float:
            if t < 0.5:
                return fn(t * 2) / 2
            return 1 - fn((1 - t) * 2) / 2

        return eased


_EASE = _cubic_bezier(0.42, 0, 1, 1)


def _check_ranges(input_range: Sequence[float], output_range: Sequence[float]) -> None:
    if len(input_range) != len(output_range):
        raise ValueError(
            "input_range and output_range must have the same length, "
            f"got {len(input_range)} and {len(output_range)}"
        )
    if len(input_range) < 2:
        raise ValueError("input_range must have at least 2 elements")
    for value in (*input_range, *output_range):
        if not isinstance(value, int | float) or math.isnan(value):
            raise ValueError(f"ranges must contain numbers only, got {value!r}")
    for prev, cur in zip(input_range, input_range[1:]):
        if cur <= prev:
            raise ValueError(
                f"input_range must be strictly increasing, got {list(input_range)}"
            )


def _interpolate_segment(
    value: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
    easing: EasingFn,
    extrapolate_left: str,
    extrapolate_right: str,
) -> float:
    result = value
    if result < in_min:
        if extrapolate_left == "identity":
            return result
        if extrapolate_left == "clamp":
            result = in_min
    if result > in_max:
        if extrapolate_right == "identity":
            return result
        if extrapolate_right == "clamp":
            result = in_max
    if out_min == out_max:
        return out_min
    result = (result - in_min) / (in_max - in_min)
    result = easing(result)
    return result * (out_max - out_min) + out_min


def interpolate(
    value: float,
    input_range: Sequence[float],
    output_range: Sequence[float],
    *,
    easing: EasingFn | None = None,
    extrapolate_left: str = "extend",
    extrapolate_right: str = "extend",
) -> float:
    """
    Map ``value`` from ``input_range`` onto ``output_range``.

    Outside the input range: "extend" keeps the slope of the edge segment,
    "clamp" pins to the edge output, "identity" returns the input unchanged.
    """
    if not isinstance(value, int | float):
        raise ValueError(f"interpolate() value must be a number, got {value!r}")
    _check_ranges(input_range, output_range)
    for side, mode in (("extrapolate_left", extrapolate_left), ("extrapolate_right", extrapolate_right)):
        if mode not in _EXTRAPOLATE:
            raise ValueError(f"{side} must be one of {sorted(_EXTRAPOLATE)}, got {mode!r}")

    i = 1
    while i < len(input_range) - 1 and input_range[i] < value:
        i += 1
    seg = i - 1
    return _interpolate_segment(
        value,
        input_range[seg],
        input_range[seg + 1],
        output_range[seg],
        output_range[seg + 1],
        easing or Easing.linear,
        extrapolate_left,
        extrapolate_right,
    )


def _spring_config(config: dict[str, Any] | None) -> dict[str, Any]:
    cfg = {**SPRING_DEFAULTS, **(config or {})}
    unknown = set(cfg) - set(SPRING_DEFAULTS)
    if unknown:
        raise ValueError(f"Unknown spring config key(s): {', '.join(sorted(unknown))}")
    if cfg["mass"] <= 0:
        raise ValueError("spring mass must be > 0")
    if cfg["stiffness"] <= 0:
        raise ValueError("spring stiffness must be > 0")
    if cfg["damping"] < 0:
        raise ValueError("spring damping must be >= 0")
    return cfg


def _spring_displacement(t: float, cfg: dict[str, Any]) -> float:
    """Displacement from the target at time t (s), starting at -1 with zero velocity."""
    omega0 = math.sqrt(cfg["stiffness"] / cfg["mass"])
    zeta = cfg["damping"] / (2 * math.sqrt(cfg["stiffness"] * cfg["mass"]))
    if abs(zeta - 1) < 1e-9:
        return -math.exp(-omega0 * t) * (1 + omega0 * t)
    if zeta < 1:
        omega1 = omega0 * math.sqrt(1 - zeta * zeta)
        decay = math.exp(-zeta * omega0 * t)
        return -decay * (math.cos(omega1 * t) + zeta * omega0 / omega1 * math.sin(omega1 * t))
    # Overdamped: sum of two decaying exponentials (no cosh overflow).
    omega2 = omega0 * math.sqrt(zeta * zeta - 1)
    r1 = -zeta * omega0 + omega2
    r2 = -zeta * omega0 - omega2
    c1 = -r2 / (r2 - r1)
    c2 = r1 / (r2 - r1)
    return c1 * math.exp(r1 * t) + c2 * math.exp(r2 * t)


def _spring_envelope(t: float, cfg: dict[str, Any]) -> float:
    """Upper bound of |displacement| from t onwards."""
    zeta = cfg["damping"] / (2 * math.sqrt(cfg["stiffness"] * cfg["mass"]))
    if zeta < 1 and abs(zeta - 1) >= 1e-9:
        omega0 = math.sqrt(cfg["stiffness"] / cfg["mass"])
        omega1 = omega0 * math.sqrt(1 - zeta * zeta)
        return math.exp(-zeta * omega0 * t) * math.sqrt(1 + (zeta * omega0 / omega1) ** 2)
    return abs(_spring_displacement(t, cfg))


def measure_spring(*, fps: float, config: dict[str, Any] | None = None, threshold: float = 0.005) -> int:
    """Frames until the spring stays within ``threshold`` of its target."""
    if fps <= 0:
        raise ValueError("fps must be > 0")
    if threshold <= 0:
        raise ValueError("threshold must be > 0")
    cfg = _spring_config(config)
    if cfg["damping"] == 0:
        raise ValueError("An undamped spring never settles")
    limit = int(fps * 3600)
    last_unsettled = 0
    frame = 0
    while frame <= limit:
        t = frame / fps
        if abs(_spring_displacement(t, cfg)) >= threshold:
            last_unsettled = frame
        elif _spring_envelope(t, cfg) < threshold:
            break
        frame += 1
    return last_unsettled + 1


def spring(
    *,
    frame: float,
    fps: float,
    config: dict[str, Any] | None = None,
    from_: float = 0,
    to: float = 1,
    duration_in_frames: float | None = None,
    delay: float = 0,
) -> float:
    """
    Spring-animated value at ``frame``: starts at ``from_`` and settles at ``to``.

    ``duration_in_frames`` stretches time so the spring settles on that frame.
    """
    if fps <= 0:
        raise ValueError("fps must be > 0")
    cfg = _spring_config(config)
    t_frame = frame - delay
    if duration_in_frames is not None:
        if duration_in_frames <= 0:
            raise ValueError("duration_in_frames must be > 0")
        natural = measure_spring(fps=fps, config=cfg)
        t_frame = t_frame * natural / duration_in_frames
    if t_frame <= 0:
        return from_
    progress = 1 + _spring_displacement(t_frame / fps, cfg)
    if cfg["overshoot_clamping"]:
        progress = min(progress, 1.0)
    return from_ + (to - from_) * progress
