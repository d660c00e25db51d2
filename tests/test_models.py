"""模型测试"""

import pytest

from editmux.models import (
    BufferKind,
    MultiplexerPaneSnapshot,
    NavAction,
    NavigationVariant,
    PaneDirectoryPolicy,
    WindowLayoutSnapshot,
)


class TestEnums:
    """枚举解析"""

    def test_from_str(self):
        assert PaneDirectoryPolicy.from_str("Project") is PaneDirectoryPolicy.PROJECT_ROOT
        assert NavigationVariant.from_str(" simple ") is NavigationVariant.SIMPLE
        assert BufferKind.from_str("directory") is BufferKind.DIRECTORY

    def test_from_str_invalid(self):
        with pytest.raises(ValueError):
            PaneDirectoryPolicy.from_str("root")

    def test_choices(self):
        assert PaneDirectoryPolicy.choices() == ['project', 'buffer', 'home']

    def test_action_flags(self):
        assert NavAction.MOVE_WITHIN_EDITOR.moves_editor
        assert not NavAction.MOVE_WITHIN_EDITOR.delegates
        assert not NavAction.DELEGATE_TO_MULTIPLEXER.moves_editor
        assert NavAction.MOVE_WITHIN_EDITOR_THEN_DELEGATE.moves_editor
        assert NavAction.MOVE_WITHIN_EDITOR_THEN_DELEGATE.delegates


class TestSnapshots:
    """布局快照"""

    def test_last_window(self):
        assert WindowLayoutSnapshot(window_count=2).is_last_window
        assert not WindowLayoutSnapshot(window_count=2, has_window_right=True).is_last_window
        assert not WindowLayoutSnapshot(window_count=2, has_window_below=True).is_last_window

    def test_multiple_panes(self):
        assert not MultiplexerPaneSnapshot().has_multiple_panes
        assert MultiplexerPaneSnapshot(pane_count=2).has_multiple_panes
