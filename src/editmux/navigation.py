"""窗口导航 - 决定"下一个窗口"在编辑器内移动还是交给 tmux"""

import logging
from typing import Optional

from .models import (
    MultiplexerPaneSnapshot,
    NavAction,
    NavigationVariant,
    WindowLayoutSnapshot,
)
from .tmux_control import TmuxController

logger = logging.getLogger(__name__)


def route_next_window(
    layout: WindowLayoutSnapshot,
    pane: MultiplexerPaneSnapshot,
    variant: NavigationVariant = NavigationVariant.BOUNDARY,
) -> NavAction:
    """计算"下一个窗口"的动作

    1. 编辑器只有一个窗口：交给 tmux 切换 pane
    2. 当前是编辑器窗口循环的最后一个，且 tmux 侧 pane 在最右/最左
       或 pane 数大于 1：编辑器内循环回第一个窗口，同时让 tmux 切到下一个 pane
    3. 其他情况：编辑器内移动

    SIMPLE 只保留第 1 条。
    """
    if layout.window_count == 1:
        return NavAction.DELEGATE_TO_MULTIPLEXER

    if variant is NavigationVariant.SIMPLE:
        return NavAction.MOVE_WITHIN_EDITOR

    if layout.is_last_window and (
        pane.is_rightmost or pane.is_leftmost or pane.has_multiple_panes
    ):
        return NavAction.MOVE_WITHIN_EDITOR_THEN_DELEGATE

    return NavAction.MOVE_WITHIN_EDITOR


class NavigationRouter:
    """每次按键重新获取快照并执行导航动作

    只在判断需要时才查询 tmux：BOUNDARY 模式下，编辑器有多个窗口
    且当前窗口是最后一个。
    """

    def __init__(
        self,
        editor,
        tmux: Optional[TmuxController] = None,
        variant: NavigationVariant = NavigationVariant.BOUNDARY,
    ):
        self.editor = editor
        self.tmux = tmux or TmuxController()
        self.variant = variant

    def _pane_snapshot(self, layout: WindowLayoutSnapshot) -> MultiplexerPaneSnapshot:
        if (
            self.variant is NavigationVariant.BOUNDARY
            and layout.window_count > 1
            and layout.is_last_window
        ):
            return self.tmux.pane_snapshot()
        return MultiplexerPaneSnapshot()

    def decide(self) -> NavAction:
        layout = self.editor.window_layout()
        action = route_next_window(layout, self._pane_snapshot(layout), self.variant)
        logger.debug(
            f"[导航] windows={layout.window_count}, last={layout.is_last_window}, "
            f"variant={self.variant.value} -> {action.value}"
        )
        return action

    def next_window(self) -> NavAction:
        """执行"下一个窗口"，返回实际采取的动作"""
        action = self.decide()
        if action.moves_editor:
            self.editor.other_window()
        if action.delegates:
            self.tmux.select_next_pane()
        return action
