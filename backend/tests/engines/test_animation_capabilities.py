"""Unit tests for engines.animation.capabilities."""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from animgen.engines.animation.capabilities import (
    CAPABILITY_TABLE_VERSION,
    CapabilityTable,
    default_capabilities,
    get_capability_table,
)
from animgen.engines.animation.modules import AbsoluteFill, Rect, interpolate, make_pie, use_state


class TestCapabilityTable:
    def test_accessors(self) -> None:
        fn = object()
        table = CapabilityTable([("square", fn), ("scale", 2)])
        assert table.names() == ("square", "scale")
        assert table.values() == (fn, 2)
        assert table.items() == (("square", fn), ("scale", 2))
        assert table["square"] is fn
        assert table.get("missing") is None
        assert table.get("missing", 0) == 0
        assert "scale" in table
        assert "missing" not in table
        assert list(table) == ["square", "scale"]
        assert len(table) == 2

    def test_missing_key(self) -> None:
        with pytest.raises(KeyError):
            CapabilityTable([])["square"]

    def test_none_value_is_present(self) -> None:
        table = CapabilityTable([("nothing", None)])
        assert table["nothing"] is None

    @pytest.mark.parametrize("name", ["1abc", "a-b", "", "class", "_hidden", "__builtins__"])
    def test_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError):
            CapabilityTable([(name, 1)])

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            CapabilityTable([("a", 1), ("a", 2)])


class TestDefaultTable:
    def test_order_and_size(self) -> None:
        names = get_capability_table().names()
        assert len(names) == 42
        assert names[:3] == ("React", "Remotion", "RemotionShapes")
        assert names[3:7] == ("AbsoluteFill", "Sequence", "Img", "Fragment")
        assert names[-2:] == ("math", "log")
        assert names.index("interpolate") < names.index("use_current_frame") < names.index("Rect")

    def test_values(self) -> None:
        table = get_capability_table()
        assert table["AbsoluteFill"] is AbsoluteFill
        assert table["interpolate"] is interpolate
        assert table["math"] is math
        assert callable(table["log"].info)

    def test_matches_default_list(self) -> None:
        assert get_capability_table().names() == tuple(n for n, _ in default_capabilities())

    def test_version(self) -> None:
        assert CAPABILITY_TABLE_VERSION == "2"

    def test_singleton(self) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            tables = list(pool.map(lambda _: get_capability_table(), range(16)))
        assert all(t is tables[0] for t in tables)

    def test_namespaces_share_bare_values(self) -> None:
        table = get_capability_table()
        assert table["Remotion"].interpolate is table["interpolate"] is interpolate
        assert table["Remotion"].AbsoluteFill is AbsoluteFill
        assert table["RemotionShapes"].Rect is Rect
        assert table["RemotionShapes"].make_pie is make_pie
        assert table["React"].use_state is use_state
