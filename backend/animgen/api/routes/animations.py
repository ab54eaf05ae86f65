"""
Animation routes: compile generated scene code, list capabilities.

The compile route is a plain ``def`` so FastAPI runs it in the threadpool;
compile and render are CPU-bound and never await.
"""

import logging

from fastapi import APIRouter

from animgen.core.config import settings
from animgen.engines.animation import (
    CAPABILITY_TABLE_VERSION,
    compile_code,
    get_capability_table,
)
from animgen.engines.animation.modules import VideoConfig, render
from animgen.engines.animation.modules.elements import to_plain
from animgen.schemas import AnimationCompileIn, AnimationCompileOut, CapabilityListOut

router = APIRouter(prefix="/animations", tags=["animations"])

_log = logging.getLogger(__name__)

RENDER_ERROR_KIND = "RENDER"


def default_video_config() -> VideoConfig:
    return VideoConfig(
        width=settings.VIDEO_WIDTH,
        height=settings.VIDEO_HEIGHT,
        fps=settings.VIDEO_FPS,
        duration_in_frames=settings.VIDEO_DURATION_IN_FRAMES,
    )


@router.post("/compile", response_model=AnimationCompileOut)
def compile_animation(body: AnimationCompileIn) -> AnimationCompileOut:
    """
    Compile generated code. With preview_frame, also render that frame.

    Always 200: failures are reported in the body so the caller can feed the
    diagnostic back into a regeneration attempt.
    """
    result = compile_code(body.code)
    if not result.success:
        return AnimationCompileOut(
            success=False,
            error=result.error,
            error_kind=result.kind.value if result.kind else None,
        )
    if body.preview_frame is None:
        return AnimationCompileOut(success=True)

    try:
        tree = render(result.component, frame=body.preview_frame, config=default_video_config())
    except Exception as e:
        _log.info("Animation render failed at frame %s: %s", body.preview_frame, e)
        return AnimationCompileOut(
            success=False,
            error=f"Render failed: {e}",
            error_kind=RENDER_ERROR_KIND,
        )
    return AnimationCompileOut(success=True, preview=to_plain(tree))


@router.get("/capabilities", response_model=CapabilityListOut)
def list_capabilities() -> CapabilityListOut:
    """Names available to generated code (useful when building generation prompts)."""
    return CapabilityListOut(
        version=CAPABILITY_TABLE_VERSION,
        names=list(get_capability_table().names()),
    )
