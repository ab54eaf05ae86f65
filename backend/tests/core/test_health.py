"""Unit tests for core.health probes."""

from unittest.mock import patch

from animgen.core.health import (
    check_capabilities,
    check_smoke_compile,
    liveness_check,
    readiness_check,
)
from animgen.engines.animation import CompilationResult, CompileErrorKind


class TestChecks:
    def test_capabilities(self) -> None:
        assert check_capabilities() is True

    def test_capabilities_failure(self) -> None:
        with patch(
            "animgen.core.health.get_capability_table", side_effect=RuntimeError("boom")
        ):
            assert check_capabilities() is False

    def test_smoke_compile(self) -> None:
        assert check_smoke_compile() is True

    def test_smoke_compile_failure(self) -> None:
        failed = CompilationResult.fail("boom", CompileErrorKind.RUNTIME)
        with patch("animgen.core.health.compile_code", return_value=failed):
            assert check_smoke_compile() is False

    def test_smoke_render_failure(self) -> None:
        with patch("animgen.core.health.render", side_effect=ValueError("bad frame")):
            assert check_smoke_compile() is False


class TestProbes:
    def test_liveness(self) -> None:
        assert liveness_check() == (True, [])

    def test_readiness(self) -> None:
        assert readiness_check() == (True, [])

    def test_readiness_reports_first_failure(self) -> None:
        with patch("animgen.core.health.check_capabilities", return_value=False):
            assert readiness_check() == (False, ["capabilities"])
        with patch("animgen.core.health.check_smoke_compile", return_value=False):
            assert readiness_check() == (False, ["smoke_compile"])
