"""窗口导航测试"""

import pytest

from editmux.editor import SnapshotEditorAdapter
from editmux.models import (
    MultiplexerPaneSnapshot,
    NavAction,
    NavigationVariant,
    WindowLayoutSnapshot,
)
from editmux.navigation import NavigationRouter, route_next_window
from editmux.tmux_control import TmuxController

PANES = [
    MultiplexerPaneSnapshot(),
    MultiplexerPaneSnapshot(pane_count=2),
    MultiplexerPaneSnapshot(pane_count=3, is_rightmost=True, is_leftmost=True),
    MultiplexerPaneSnapshot(is_leftmost=True),
]


class TestRouteNextWindow:
    """route_next_window 测试"""

    @pytest.mark.parametrize("pane", PANES)
    @pytest.mark.parametrize("variant", list(NavigationVariant))
    def test_single_window_delegates(self, pane, variant):
        layout = WindowLayoutSnapshot(window_count=1)
        assert route_next_window(layout, pane, variant) is NavAction.DELEGATE_TO_MULTIPLEXER

    @pytest.mark.parametrize("pane", PANES)
    def test_window_below_moves_in_editor(self, pane):
        layout = WindowLayoutSnapshot(window_count=3, has_window_below=True)
        assert route_next_window(layout, pane) is NavAction.MOVE_WITHIN_EDITOR

    def test_window_right_moves_in_editor(self):
        layout = WindowLayoutSnapshot(window_count=2, has_window_right=True)
        pane = MultiplexerPaneSnapshot(pane_count=4, is_rightmost=True)
        assert route_next_window(layout, pane) is NavAction.MOVE_WITHIN_EDITOR

    def test_last_window_single_middle_pane(self):
        layout = WindowLayoutSnapshot(window_count=2)
        pane = MultiplexerPaneSnapshot(pane_count=1, is_rightmost=False, is_leftmost=False)
        assert route_next_window(layout, pane) is NavAction.MOVE_WITHIN_EDITOR

    def test_last_window_multiple_panes(self):
        layout = WindowLayoutSnapshot(window_count=2)
        pane = MultiplexerPaneSnapshot(pane_count=2, is_rightmost=False, is_leftmost=False)
        assert route_next_window(layout, pane) is NavAction.MOVE_WITHIN_EDITOR_THEN_DELEGATE

    @pytest.mark.parametrize("pane", [
        MultiplexerPaneSnapshot(is_rightmost=True),
        MultiplexerPaneSnapshot(is_leftmost=True),
    ])
    def test_last_window_edge_pane(self, pane):
        layout = WindowLayoutSnapshot(window_count=2)
        assert route_next_window(layout, pane) is NavAction.MOVE_WITHIN_EDITOR_THEN_DELEGATE

    def test_simple_variant_never_wraps(self):
        layout = WindowLayoutSnapshot(window_count=2)
        pane = MultiplexerPaneSnapshot(pane_count=5, is_rightmost=True)
        result = route_next_window(layout, pane, NavigationVariant.SIMPLE)
        assert result is NavAction.MOVE_WITHIN_EDITOR

    def test_invalid_window_count(self):
        with pytest.raises(ValueError):
            WindowLayoutSnapshot(window_count=0)


class TestNavigationRouter:
    """NavigationRouter 测试（tmux 由 fake_tmux 模拟）"""

    def test_single_window_selects_next_pane(self, fake_tmux):
        editor = SnapshotEditorAdapter(layout=WindowLayoutSnapshot(window_count=1))
        action = NavigationRouter(editor, TmuxController()).next_window()
        assert action is NavAction.DELEGATE_TO_MULTIPLEXER
        assert editor.moves == 0
        assert fake_tmux.commands() == [['select-pane', '-t', ':.+']]

    def test_not_last_window_skips_tmux_queries(self, fake_tmux):
        layout = WindowLayoutSnapshot(window_count=3, has_window_below=True)
        editor = SnapshotEditorAdapter(layout=layout)
        action = NavigationRouter(editor, TmuxController()).next_window()
        assert action is NavAction.MOVE_WITHIN_EDITOR
        assert editor.moves == 1
        assert fake_tmux.calls == []

    def test_wraps_into_tmux(self, fake_tmux):
        fake_tmux.set('#{window_panes}', '2')
        fake_tmux.set('#{pane_at_right}', '0')
        fake_tmux.set('#{pane_at_left}', '0')
        editor = SnapshotEditorAdapter(layout=WindowLayoutSnapshot(window_count=2))
        action = NavigationRouter(editor, TmuxController()).next_window()
        assert action is NavAction.MOVE_WITHIN_EDITOR_THEN_DELEGATE
        assert editor.moves == 1
        assert fake_tmux.commands() == [['select-pane', '-t', ':.+']]

    def test_query_failure_degrades_to_editor(self, fake_tmux):
        fake_tmux.fail_all = True
        editor = SnapshotEditorAdapter(layout=WindowLayoutSnapshot(window_count=2))
        action = NavigationRouter(editor, TmuxController()).next_window()
        assert action is NavAction.MOVE_WITHIN_EDITOR
        assert editor.moves == 1

    def test_missing_tmux_never_raises(self, fake_tmux):
        fake_tmux.missing = True
        editor = SnapshotEditorAdapter(layout=WindowLayoutSnapshot(window_count=1))
        action = NavigationRouter(editor, TmuxController()).next_window()
        assert action is NavAction.DELEGATE_TO_MULTIPLEXER

    def test_simple_variant_skips_queries(self, fake_tmux):
        editor = SnapshotEditorAdapter(layout=WindowLayoutSnapshot(window_count=2))
        router = NavigationRouter(editor, TmuxController(), NavigationVariant.SIMPLE)
        assert router.next_window() is NavAction.MOVE_WITHIN_EDITOR
        assert fake_tmux.calls == []
