"""
Transition primitives: TransitionSeries, linear_timing, spring_timing,
fade, slide, wipe, flip, clock_wipe.
"""

from dataclasses import dataclass, field
from typing import Any

from .elements import Element, create_element, flatten_children
from .timing import EasingFn, Easing, interpolate, measure_spring, spring

SLIDE_DIRECTIONS = ("from-left", "from-right", "from-top", "from-bottom")
WIPE_DIRECTIONS = (
    "from-left",
    "from-top-left",
    "from-top",
    "from-top-right",
    "from-right",
    "from-bottom-right",
    "from-bottom",
    "from-bottom-left",
)


@dataclass(frozen=True)
class TransitionTiming:
    kind: str
    duration_in_frames: int | None = None
    easing: EasingFn | None = None
    config: dict[str, Any] = field(default_factory=dict)

    def get_duration_in_frames(self, fps: float) -> int:
        if self.duration_in_frames is not None:
            return self.duration_in_frames
        return measure_spring(fps=fps, config=self.config)

    def get_progress(self, frame: float, fps: float) -> float:
        """Progress of the transition in [0, 1] at ``frame`` (relative to its start)."""
        if self.kind == "linear":
            return interpolate(
                frame,
                [0, self.get_duration_in_frames(fps)],
                [0, 1],
                easing=self.easing,
                extrapolate_left="clamp",
                extrapolate_right="clamp",
            )
        return spring(
            frame=frame,
            fps=fps,
            config=self.config,
            duration_in_frames=self.duration_in_frames,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "duration_in_frames": self.duration_in_frames,
            "config": dict(self.config),
        }


@dataclass(frozen=True)
class TransitionPresentation:
    name: str
    props: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "props": dict(self.props)}


def linear_timing(*, duration_in_frames: int, easing: EasingFn | None = None) -> TransitionTiming:
    if not isinstance(duration_in_frames, int) or duration_in_frames <= 0:
        raise ValueError(f"duration_in_frames must be a positive integer, got {duration_in_frames!r}")
    return TransitionTiming(kind="linear", duration_in_frames=duration_in_frames, easing=easing or Easing.linear)


def spring_timing(
    *, config: dict[str, Any] | None = None, duration_in_frames: int | None = None
) -> TransitionTiming:
    if duration_in_frames is not None and (
        not isinstance(duration_in_frames, int) or duration_in_frames <= 0
    ):
        raise ValueError(f"duration_in_frames must be a positive integer, got {duration_in_frames!r}")
    # Validate eagerly so bad configs fail at definition time.
    measure_spring(fps=30, config=config)
    return TransitionTiming(kind="spring", duration_in_frames=duration_in_frames, config=dict(config or {}))


def _direction(value: str, allowed: tuple[str, ...]) -> str:
    if value not in allowed:
        raise ValueError(f"direction must be one of {allowed}, got {value!r}")
    return value


def fade() -> TransitionPresentation:
    return TransitionPresentation("fade")


def slide(direction: str = "from-left") -> TransitionPresentation:
    return TransitionPresentation("slide", {"direction": _direction(direction, SLIDE_DIRECTIONS)})


def wipe(direction: str = "from-left") -> TransitionPresentation:
    return TransitionPresentation("wipe", {"direction": _direction(direction, WIPE_DIRECTIONS)})


def flip(direction: str = "from-left", perspective: float = 1000) -> TransitionPresentation:
    if perspective <= 0:
        raise ValueError("perspective must be > 0")
    return TransitionPresentation(
        "flip",
        {"direction": _direction(direction, SLIDE_DIRECTIONS), "perspective": perspective},
    )


def clock_wipe(*, width: float, height: float) -> TransitionPresentation:
    if width <= 0 or height <= 0:
        raise ValueError("clock_wipe width and height must be > 0")
    return TransitionPresentation("clock-wipe", {"width": width, "height": height})


class _TransitionSeries:
    """
    TransitionSeries(Sequence(...), Transition(...), Sequence(...), ...).

    Transitions overlap the neighbouring sequences, so the series lasts
    sum(sequences) - sum(transitions) frames.
    """

    @staticmethod
    def Sequence(*children: Any, duration_in_frames: int, offset: int = 0, **props: Any) -> Element:
        if not isinstance(duration_in_frames, int) or duration_in_frames <= 0:
            raise ValueError(f"duration_in_frames must be a positive integer, got {duration_in_frames!r}")
        return create_element(
            "TransitionSeries.Sequence",
            {**props, "duration_in_frames": duration_in_frames, "offset": offset},
            *children,
        )

    @staticmethod
    def Transition(
        *, timing: TransitionTiming, presentation: TransitionPresentation | None = None
    ) -> Element:
        if not isinstance(timing, TransitionTiming):
            raise ValueError("Transition timing must come from linear_timing() or spring_timing()")
        return create_element(
            "TransitionSeries.Transition",
            {"timing": timing, "presentation": presentation or fade()},
        )

    def __call__(self, *children: Any, fps: float = 30, **props: Any) -> Element:
        items = flatten_children(children)
        total = 0
        prev_kind = None
        for index, item in enumerate(items):
            kind = item.type if isinstance(item, Element) else None
            if kind == "TransitionSeries.Sequence":
                total += item.props["duration_in_frames"] + item.props["offset"]
            elif kind == "TransitionSeries.Transition":
                if index == 0 or index == len(items) - 1:
                    raise ValueError("A TransitionSeries cannot start or end with a transition")
                if prev_kind == kind:
                    raise ValueError("A TransitionSeries cannot have two transitions next to each other")
                total -= item.props["timing"].get_duration_in_frames(fps)
            else:
                raise ValueError(
                    "TransitionSeries children must be TransitionSeries.Sequence or TransitionSeries.Transition"
                )
            prev_kind = kind
        return create_element(
            "TransitionSeries", {**props, "duration_in_frames": max(total, 0)}, *items
        )


TransitionSeries = _TransitionSeries()
