"""
Health-check helpers for liveness and readiness probes.

Liveness:  is the process alive and not deadlocked?  (cheap, no compile)
Readiness: can it serve traffic?  (capability table + RestrictedPython smoke compile)
"""

import logging

from animgen.engines.animation import compile_code, get_capability_table
from animgen.engines.animation.modules import Element, render

logger = logging.getLogger(__name__)

SMOKE_SOURCE = """
def Smoke():
    frame = use_current_frame()
    opacity = interpolate(frame, [0, 10], [0, 1], extrapolate_right="clamp")
    return AbsoluteFill(Circle(radius=10), style={"opacity": opacity})
"""


# ---------------------------------------------------------------------------
# Individual dependency checks
# ---------------------------------------------------------------------------

def check_capabilities() -> bool:
    """The process-wide capability table can be built and is non-empty."""
    try:
        return len(get_capability_table()) > 0
    except Exception:
        logger.warning("Capability table failed to build", exc_info=True)
        return False


def check_smoke_compile() -> bool:
    """Compile and render a tiny scene end to end."""
    result = compile_code(SMOKE_SOURCE)
    if not result.success:
        logger.warning("Smoke compile failed: %s", result.error)
        return False
    try:
        return isinstance(render(result.component, frame=5), Element)
    except Exception:
        logger.warning("Smoke render failed", exc_info=True)
        return False


# ---------------------------------------------------------------------------
# Composite probes
# ---------------------------------------------------------------------------

def liveness_check() -> tuple[bool, list[str]]:
    """
    Lightweight liveness probe; just confirms the Python process is responsive.
    Return format matches readiness_check for consistency.
    """
    return (True, [])


def readiness_check() -> tuple[bool, list[str]]:
    """
    Run capability + smoke compile checks.
    Returns (ok, list of failure messages). ok is False if any check fails.
    """
    failures: list[str] = []

    if not check_capabilities():
        failures.append("capabilities")
    elif not check_smoke_compile():
        failures.append("smoke_compile")

    return (len(failures) == 0, failures)
