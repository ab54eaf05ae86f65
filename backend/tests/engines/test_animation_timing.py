"""Unit tests for engines.animation.modules.timing."""

import pytest

from animgen.engines.animation.modules.timing import Easing, interpolate, measure_spring, spring


class TestInterpolate:
    def test_midpoint(self) -> None:
        assert interpolate(15, [0, 30], [0, 1]) == 0.5

    def test_multi_segment(self) -> None:
        assert interpolate(25, [0, 50, 100], [0, 1, 0]) == 0.5
        assert interpolate(75, [0, 50, 100], [0, 1, 0]) == 0.5
        assert interpolate(50, [0, 50, 100], [0, 1, 0]) == 1

    def test_extrapolation_modes(self) -> None:
        assert interpolate(45, [0, 30], [0, 1]) == 1.5
        assert interpolate(45, [0, 30], [0, 1], extrapolate_right="clamp") == 1
        assert interpolate(45, [0, 30], [0, 1], extrapolate_right="identity") == 45
        assert interpolate(-10, [0, 30], [0, 1], extrapolate_left="clamp") == 0

    def test_flat_output(self) -> None:
        assert interpolate(5, [0, 10], [3, 3]) == 3

    def test_easing(self) -> None:
        assert interpolate(5, [0, 10], [0, 100], easing=Easing.quad) == pytest.approx(25)

    @pytest.mark.parametrize(
        "input_range, output_range",
        [
            ([0, 10], [0, 1, 2]),
            ([0], [0]),
            ([10, 0], [0, 1]),
            ([0, 0], [0, 1]),
            ([0, "10"], [0, 1]),
        ],
    )
    def test_invalid_ranges(self, input_range: list, output_range: list) -> None:
        with pytest.raises(ValueError):
            interpolate(5, input_range, output_range)

    def test_invalid_extrapolation(self) -> None:
        with pytest.raises(ValueError, match="extrapolate_left"):
            interpolate(5, [0, 10], [0, 1], extrapolate_left="wrap")

    def test_non_numeric_value(self) -> None:
        with pytest.raises(ValueError):
            interpolate("5", [0, 10], [0, 1])


class TestEasing:
    def test_compositions(self) -> None:
        assert Easing.out(Easing.quad)(0.5) == pytest.approx(0.75)
        assert Easing.in_out(Easing.quad)(0.25) == pytest.approx(0.125)
        assert Easing.in_out(Easing.quad)(0.75) == pytest.approx(0.875)
        assert Easing.in_(Easing.cubic)(0.5) == pytest.approx(0.125)

    def test_bezier(self) -> None:
        ease = Easing.bezier(0.42, 0, 0.58, 1)
        assert ease(0) == 0
        assert ease(1) == 1
        assert ease(0.5) == pytest.approx(0.5, abs=1e-4)
        assert ease(0.25) < 0.25

    def test_bezier_rejects_x_outside_unit(self) -> None:
        with pytest.raises(ValueError):
            Easing.bezier(1.5, 0, 0.5, 1)

    @pytest.mark.parametrize("name", ["linear", "quad", "cubic", "sin", "circle", "exp", "ease"])
    def test_endpoints(self, name: str) -> None:
        fn = getattr(Easing, name)
        assert fn(0) == pytest.approx(0, abs=1e-3)
        assert fn(1) == pytest.approx(1, abs=1e-3)


class TestSpring:
    def test_starts_and_settles(self) -> None:
        assert spring(frame=0, fps=30) == 0
        assert spring(frame=300, fps=30) == pytest.approx(1, abs=1e-3)

    def test_default_overshoots(self) -> None:
        assert max(spring(frame=f, fps=30) for f in range(60)) > 1

    def test_overshoot_clamping(self) -> None:
        values = [spring(frame=f, fps=30, config={"overshoot_clamping": True}) for f in range(60)]
        assert max(values) <= 1

    def test_from_to(self) -> None:
        assert spring(frame=0, fps=30, from_=10, to=20) == 10
        assert spring(frame=300, fps=30, from_=10, to=20) == pytest.approx(20, abs=1e-2)

    def test_delay(self) -> None:
        assert spring(frame=10, fps=30, delay=10) == 0
        assert spring(frame=20, fps=30, delay=10) == spring(frame=10, fps=30)

    def test_duration_stretches_time(self) -> None:
        assert spring(frame=60, fps=30, duration_in_frames=60) == pytest.approx(1, abs=0.005)

    @pytest.mark.parametrize(
        "config",
        [{"mass": 0}, {"stiffness": -1}, {"damping": -1}, {"bounce": 1}],
    )
    def test_invalid_config(self, config: dict) -> None:
        with pytest.raises(ValueError):
            spring(frame=1, fps=30, config=config)

    def test_invalid_fps(self) -> None:
        with pytest.raises(ValueError):
            spring(frame=1, fps=0)


class TestMeasureSpring:
    def test_default(self) -> None:
        frames = measure_spring(fps=30)
        assert 10 < frames < 60
        assert abs(spring(frame=frames, fps=30) - 1) < 0.005

    def test_undamped_never_settles(self) -> None:
        with pytest.raises(ValueError):
            measure_spring(fps=30, config={"damping": 0})

    def test_critically_damped(self) -> None:
        frames = measure_spring(fps=30, config={"damping": 20})
        assert frames > 0
        assert abs(spring(frame=frames, fps=30, config={"damping": 20}) - 1) < 0.005
