"""
Pydantic schemas for the animation API.
"""

from typing import Any

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Compile
# ---------------------------------------------------------------------------


class AnimationCompileIn(BaseModel):
    """Body for POST /animations/compile."""

    code: str = Field(..., description="Generated scene source (Python).")
    preview_frame: int | None = Field(
        default=None,
        ge=0,
        description="If set and compile succeeds, render this frame and return the element tree.",
    )


class AnimationCompileOut(BaseModel):
    """Result of compiling (and optionally rendering) generated code."""

    success: bool
    error: str | None = None
    error_kind: str | None = Field(
        default=None,
        description="EMPTY_INPUT | TRANSFORM | EMPTY_OUTPUT | SHAPE | RUNTIME | RENDER",
    )
    preview: Any | None = None


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


class CapabilityListOut(BaseModel):
    """Names generated code may reference, in binding order."""

    version: str
    names: list[str]
