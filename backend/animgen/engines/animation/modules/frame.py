"""
Frame context and hooks: use_current_frame, use_video_config, use_state,
use_memo, use_ref, use_effect.

A component is a zero-argument callable; the frame it draws comes from the
active frame_context(). The context lives in a ContextVar, so concurrent
renders (threads or tasks) never see each other's frame.

Hooks are single-pass: each render is a fresh evaluation, state setters and
effects never trigger a re-render.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class VideoConfig:
    width: int = 1920
    height: int = 1080
    fps: int = 30
    duration_in_frames: int = 150

    def __post_init__(self) -> None:
        for name in ("width", "height", "fps", "duration_in_frames"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    def to_dict(self) -> dict[str, int]:
        return {
            "width": self.width,
            "height": self.height,
            "fps": self.fps,
            "duration_in_frames": self.duration_in_frames,
        }


@dataclass
class _RenderState:
    frame: int
    config: VideoConfig
    effects: list[tuple[Callable[[], Any], Any]] = field(default_factory=list)


_current: ContextVar[_RenderState | None] = ContextVar("animgen_frame", default=None)


def _state(hook: str) -> _RenderState:
    state = _current.get()
    if state is None:
        raise RuntimeError(f"{hook}() can only be called while rendering a frame")
    return state


@contextmanager
def frame_context(frame: int = 0, config: VideoConfig | None = None) -> Iterator[VideoConfig]:
    """Make ``frame`` and ``config`` visible to hooks for the duration of the block."""
    cfg = config or VideoConfig()
    if frame < 0:
        raise ValueError(f"frame must be >= 0, got {frame}")
    token = _current.set(_RenderState(frame=frame, config=cfg))
    try:
        yield cfg
    finally:
        _current.reset(token)


def render(component: Callable[[], Any], frame: int = 0, config: VideoConfig | None = None) -> Any:
    """Invoke a component for one frame and return what it produced."""
    with frame_context(frame, config):
        out = component()
        state = _current.get()
        if state is not None and state.effects:
            _log.debug("render frame=%s: %d effect(s) not run", frame, len(state.effects))
        return out


def use_current_frame() -> int:
    return _state("use_current_frame").frame


def use_video_config() -> VideoConfig:
    return _state("use_video_config").config


class Ref:
    """Mutable box returned by use_ref(); ``ref.current = x`` is allowed in the sandbox."""

    # RestrictedPython full_write_guard: permit attribute writes on this type.
    _guarded_writes = True

    def __init__(self, current: Any = None) -> None:
        self.current = current

    def __repr__(self) -> str:
        return f"Ref(current={self.current!r})"


def use_state(initial: Any = None) -> list[Any]:
    """Return [value, setter]; a callable initial value is evaluated lazily."""
    _state("use_state")
    value = initial() if callable(initial) else initial

    def set_value(_new: Any) -> None:
        # Single-pass render: nothing to schedule.
        return None

    return [value, set_value]


def use_memo(factory: Callable[[], Any], deps: Any = None) -> Any:
    _state("use_memo")
    return factory()


def use_ref(initial: Any = None) -> Ref:
    _state("use_ref")
    return Ref(initial)


def use_effect(effect: Callable[[], Any], deps: Any = None) -> None:
    """Record the effect; one-shot renders never run effects."""
    _state("use_effect").effects.append((effect, deps))
