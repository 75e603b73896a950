"""Tests for window record extraction from the sway tree."""

from types import SimpleNamespace

import pytest

from swaydgets.platform.windows import WindowRecord, extract_windows, is_app_window


def _node(
    id,
    type="con",
    name=None,
    app_id=None,
    window_class=None,
    window_properties=None,
    focused=False,
    nodes=(),
    floating_nodes=(),
):
    """Minimal stand-in for an i3ipc Con."""
    ipc_data = {"id": id, "type": type, "name": name}
    if window_properties is not None:
        ipc_data["window_properties"] = window_properties
    return SimpleNamespace(
        id=id,
        type=type,
        name=name,
        app_id=app_id,
        window_class=window_class,
        ipc_data=ipc_data,
        focused=focused,
        nodes=list(nodes),
        floating_nodes=list(floating_nodes),
    )


def _workspace(id, nodes=(), floating_nodes=()):
    return _node(
        id, type="workspace", name=str(id), nodes=nodes, floating_nodes=floating_nodes
    )


class TestIsAppWindow:
    def test_wayland_window(self):
        assert is_app_window(_node(1, name="foot", app_id="foot")) is True

    def test_xwayland_window(self):
        node = _node(1, name="xterm", window_properties={"class": "XTerm"})
        assert is_app_window(node) is True

    def test_container_without_app_id_or_properties(self):
        # Split containers have no app_id and no window_properties
        assert is_app_window(_node(1, name="split")) is False

    def test_untitled_window_is_skipped(self):
        assert is_app_window(_node(1, name=None, app_id="foot")) is False

    def test_non_container_types_are_skipped(self):
        assert is_app_window(_node(1, type="workspace", name="1", app_id="x")) is False
        assert is_app_window(_node(1, type="output", name="DP-1", app_id="x")) is False


class TestExtractWindows:
    def test_empty_tree(self):
        # Given
        tree = _node(0, type="root", name="root")
        # When / Then
        assert extract_windows(tree) == []

    def test_depth_first_children_before_floating(self):
        # Given
        split = _node(
            10,
            name=None,
            nodes=[_node(2, name="b", app_id="b"), _node(3, name="c", app_id="c")],
        )
        ws1 = _workspace(
            100,
            nodes=[_node(1, name="a", app_id="a"), split],
            floating_nodes=[_node(4, name="d", app_id="d")],
        )
        ws2 = _workspace(101, nodes=[_node(5, name="e", app_id="e")])
        tree = _node(0, type="root", name="root", nodes=[ws1, ws2])
        # When
        ids = [w.id for w in extract_windows(tree)]
        # Then -- each subtree finished before its next sibling
        assert ids == [1, 2, 3, 4, 5]

    def test_children_of_windows_are_visited(self):
        # Given -- a tabbed window with a nested child
        inner = _node(2, name="inner", app_id="inner")
        parent = _node(1, name="outer", app_id="outer", nodes=[inner])
        # When
        ids = [w.id for w in extract_windows(parent)]
        # Then
        assert ids == [1, 2]

    def test_same_tree_same_records(self):
        # Given
        tree = _workspace(100, nodes=[_node(1, name="a", app_id="a", focused=True)])
        # When
        first = extract_windows(tree)
        second = extract_windows(tree)
        # Then -- equal values, fresh objects
        assert first == second
        assert first[0] is not second[0]

    def test_node_without_app_id_or_properties_never_included(self):
        # Given
        tree = _workspace(
            100, nodes=[_node(1, name="ghost"), _node(2, name="real", app_id="x")]
        )
        # When
        ids = [w.id for w in extract_windows(tree)]
        # Then
        assert ids == [2]

    def test_app_id_falls_back_to_window_class(self):
        # Given
        node = _node(
            1, name="xterm", window_class="XTerm", window_properties={"class": "XTerm"}
        )
        # When
        (record,) = extract_windows(node)
        # Then
        assert record.app_id == "XTerm"

    def test_app_id_falls_back_to_properties_class(self):
        # Given -- class only present in the raw properties
        node = _node(1, name="xterm", window_properties={"class": "XTerm"})
        # When
        (record,) = extract_windows(node)
        # Then
        assert record.app_id == "XTerm"

    def test_app_id_empty_when_nothing_known(self):
        # Given
        node = _node(1, name="mystery", window_properties={"instance": "m"})
        # When
        (record,) = extract_windows(node)
        # Then
        assert record.app_id == ""

    def test_empty_title_is_kept_as_record(self):
        # Given -- titled with "", still a window
        node = _node(2, name="", app_id="xterm")
        # When / Then
        assert extract_windows(node) == [WindowRecord(id=2, title="", app_id="xterm")]

    def test_focused_flag(self):
        # Given
        tree = _workspace(
            100,
            nodes=[
                _node(1, name="a", app_id="a"),
                _node(2, name="b", app_id="b", focused=True),
            ],
        )
        # When
        records = extract_windows(tree)
        # Then
        assert [r.focused for r in records] == [False, True]

    def test_firefox_and_untitled_xterm(self):
        # Given
        tree = _workspace(
            100,
            nodes=[
                _node(1, name="Mozilla Firefox", app_id="firefox"),
                _node(2, name=None, app_id="xterm"),
            ],
        )
        # When
        records = extract_windows(tree)
        # Then
        assert records == [
            WindowRecord(id=1, title="Mozilla Firefox", app_id="firefox")
        ]


class TestWindowRecord:
    def test_is_immutable(self):
        record = WindowRecord(id=1, title="t", app_id="a")
        with pytest.raises(AttributeError):
            record.title = "other"
