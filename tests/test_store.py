"""Tests for tailpane.tail.store."""

from tailpane.tail.store import PaneStore, TailPane
from tailpane.types import TailConfig


class TestPaneStore:
    def test_get_or_create_returns_same_pane(self) -> None:
        store = PaneStore(TailConfig())
        first = store.get_or_create("build.log")
        for _ in range(5):
            assert store.get_or_create("build.log") is first
        assert len(store) == 1

    def test_new_pane_takes_config_policy(self) -> None:
        store = PaneStore(TailConfig(max_height=8, erase_on_update=False, scrollback=100))
        pane = store.get_or_create("x")
        assert pane.max_height == 8
        assert pane.erase is False
        assert pane.scrollback == 100
        assert pane.region_id is None
        assert pane.timer is None

    def test_remove_is_idempotent(self) -> None:
        store = PaneStore(TailConfig())
        pane = store.get_or_create("x")
        assert store.remove("x") is pane
        assert store.remove("x") is None
        assert "x" not in store

    def test_remove_checks_identity(self) -> None:
        store = PaneStore(TailConfig())
        old = store.get_or_create("x")
        store.remove("x")
        new = store.get_or_create("x")
        assert new is not old
        assert store.remove("x", old) is None
        assert store.get("x") is new
        assert store.remove("x", new) is new

    def test_clear(self) -> None:
        store = PaneStore(TailConfig())
        store.get_or_create("a")
        store.get_or_create("b")
        assert sorted(store.keys()) == ["a", "b"]
        store.clear()
        assert len(store) == 0


class TestTailPane:
    def test_insert_erase_replaces(self) -> None:
        pane = TailPane(key="x", max_height=5, erase=True)
        pane.insert("old\n")
        pane.insert("new\n")
        assert pane.content == "new\n"
        assert pane.chunks == 2

    def test_insert_append_concatenates(self) -> None:
        pane = TailPane(key="x", max_height=5, erase=False)
        pane.insert("a\n")
        pane.insert("b")
        pane.insert("c\n")
        assert pane.content == "a\nbc\n"

    def test_scrollback_keeps_latest_lines(self) -> None:
        pane = TailPane(key="x", max_height=5, erase=False, scrollback=3)
        pane.insert("1\n2\n3\n4\n5\n")
        assert pane.content == "3\n4\n5\n"
        assert pane.line_count == 3

    def test_unbounded_scrollback(self) -> None:
        pane = TailPane(key="x", max_height=5, erase=False, scrollback=0)
        pane.insert("".join(f"{i}\n" for i in range(100)))
        assert pane.line_count == 100

    def test_content_height_counts_wrapped_rows(self) -> None:
        pane = TailPane(key="x", max_height=5, erase=False)
        pane.insert("a" * 25 + "\n" + "\n" + "short\n")
        assert pane.content_height() == 3
        # 25 chars at width 10 take 3 rows, the empty line still takes 1
        assert pane.content_height(width=10) == 5

    def test_empty_content_has_no_height(self) -> None:
        pane = TailPane(key="x", max_height=5, erase=True)
        pane.insert("")
        assert pane.content_height(80) == 0
