"""导航模式 - 启用时安装快捷键，禁用时恢复"""

import logging
from typing import Optional

from .config import Config
from .directory import context_with_project_root, resolve_pane_directory
from .editor import EditorAdapter
from .keys import KeyRouter
from .models import NavAction, PaneDirectoryPolicy
from .navigation import NavigationRouter
from .tmux_control import TmuxController

logger = logging.getLogger(__name__)


class NavigationMode:
    """编辑器与 tmux 统一导航

    快捷键：
        <prefix> <new_tab_key>  新建 tmux 窗口
        <prefix> <split_key>    tmux 左右分屏
        <next_window_key>       切换到下一个窗口 / pane
    """

    def __init__(
        self,
        editor: EditorAdapter,
        config: Config,
        router: Optional[KeyRouter] = None,
        tmux: Optional[TmuxController] = None,
    ):
        self.editor = editor
        self.config = config
        self.router = router or KeyRouter()
        self.tmux = tmux or TmuxController(config.tmux.binary, config.tmux.timeout)
        self.navigator = NavigationRouter(editor, self.tmux, config.navigation)
        self._token = None

    @property
    def enabled(self) -> bool:
        return self._token is not None

    def enable(self) -> None:
        if self.enabled:
            return
        self._token = self.router.install({
            self.config.new_tab_sequence: self.new_tab,
            self.config.split_sequence: self.split_pane,
            self.config.next_window_key: self.next_window,
        })
        logger.info(f"[模式] 已启用 ({self.editor.name})")

    def disable(self) -> None:
        if not self.enabled:
            return
        self.router.restore(self._token)
        self._token = None
        logger.info("[模式] 已禁用")

    # ========== 命令 ==========

    def pane_directory(self) -> str:
        """当前上下文下新 pane 的目录"""
        policy = self.config.directory_policy
        ctx = self.editor.current_context()
        if policy is PaneDirectoryPolicy.PROJECT_ROOT:
            ctx = context_with_project_root(ctx, self.config.project_markers)
        return resolve_pane_directory(policy, ctx, self.config.fallback_path)

    def new_tab(self) -> str:
        """新建 tmux 窗口，返回使用的目录"""
        directory = self.pane_directory()
        self.tmux.new_window(directory)
        return directory

    def split_pane(self) -> str:
        """tmux 左右分屏，返回使用的目录"""
        directory = self.pane_directory()
        self.tmux.split_window(directory)
        return directory

    def next_window(self) -> NavAction:
        return self.navigator.next_window()
