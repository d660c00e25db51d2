"""
editmux - 编辑器窗口与 tmux pane 统一导航

"切换窗口"、"分屏"、"新建 tab" 三个快捷键无论焦点在编辑器还是 tmux 中
都表现一致：

- 新建 tab / 分屏：调用 tmux new-window / split-window，目录按策略解析
- 切换窗口：编辑器只有一个窗口，或已到窗口循环末尾时，交给 tmux select-pane
"""

__version__ = "0.1.0"

from .models import (
    BufferKind,
    PaneDirectoryPolicy,
    NavigationVariant,
    NavAction,
    EditorContext,
    WindowLayoutSnapshot,
    MultiplexerPaneSnapshot,
)
from .directory import resolve_pane_directory, find_project_root
from .navigation import route_next_window, NavigationRouter
from .tmux_control import TmuxController, CommandResult
from .keys import KeyRouter
from .mode import NavigationMode
from .editor import EditorAdapter, SnapshotEditorAdapter

__all__ = [
    # 数据模型
    "BufferKind",
    "PaneDirectoryPolicy",
    "NavigationVariant",
    "NavAction",
    "EditorContext",
    "WindowLayoutSnapshot",
    "MultiplexerPaneSnapshot",
    # 目录与导航
    "resolve_pane_directory",
    "find_project_root",
    "route_next_window",
    "NavigationRouter",
    # tmux
    "TmuxController",
    "CommandResult",
    # 按键与模式
    "KeyRouter",
    "NavigationMode",
    # 编辑器适配器
    "EditorAdapter",
    "SnapshotEditorAdapter",
]
