"""Tmux 命令封装 - 所有调用尽力而为，失败静默"""

import subprocess
import logging
from typing import Optional
from dataclasses import dataclass

from .models import MultiplexerPaneSnapshot

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """tmux 命令执行结果

    Attributes:
        success: 是否成功
        output: 去掉首尾空白的 stdout
        error: 错误信息
    """
    success: bool
    output: str = ""
    error: Optional[str] = None


class TmuxController:
    """Tmux 控制器 - 新建窗口、分屏、切换 pane、查询 pane 位置

    任何失败（找不到 tmux、非零退出、超时）都不会抛出异常：
    动作返回失败的 CommandResult，查询返回 False。
    """

    def __init__(self, binary: str = "tmux", timeout: Optional[float] = None):
        self.binary = binary or "tmux"
        self.timeout = timeout

    def _run(self, *args) -> subprocess.CompletedProcess:
        """执行 tmux 命令"""
        cmd = [self.binary] + list(args)
        logger.debug(f"[tmux] 执行: {' '.join(map(str, cmd))}")
        try:
            return subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            return subprocess.CompletedProcess(cmd, 1, '', 'timeout')
        except FileNotFoundError:
            return subprocess.CompletedProcess(cmd, 127, '', f'{self.binary} not found')
        except OSError as e:
            return subprocess.CompletedProcess(cmd, 1, '', str(e))

    def _action(self, *args) -> CommandResult:
        result = self._run(*args)
        if result.returncode != 0:
            logger.debug(f"[tmux] {args[0]} 失败: {(result.stderr or '').strip()}")
            return CommandResult(False, error=(result.stderr or '').strip() or f"exit {result.returncode}")
        return CommandResult(True, output=(result.stdout or '').strip())

    def _display(self, fmt: str) -> Optional[str]:
        """display-message -p 查询，失败返回 None"""
        result = self._run('display-message', '-p', fmt)
        if result.returncode != 0:
            return None
        return (result.stdout or '').strip()

    def is_available(self) -> bool:
        """检查 tmux 是否可用"""
        return self._run('-V').returncode == 0

    # ========== 动作 ==========

    def new_window(self, directory: str) -> CommandResult:
        """新建 tmux 窗口（tab）"""
        return self._action('new-window', '-c', directory)

    def split_window(self, directory: str) -> CommandResult:
        """左右分屏"""
        return self._action('split-window', '-h', '-c', directory)

    def select_next_pane(self) -> CommandResult:
        """切换到下一个 pane"""
        return self._action('select-pane', '-t', ':.+')

    # ========== 查询 ==========

    def is_rightmost_pane(self) -> bool:
        """当前 pane 是否在最右侧"""
        return self._display('#{pane_at_right}') == '1'

    def is_leftmost_pane(self) -> bool:
        """当前 pane 是否在最左侧"""
        return self._display('#{pane_at_left}') == '1'

    def pane_count(self) -> int:
        """当前窗口的 pane 数量，无法解析时按 1 处理"""
        output = self._display('#{window_panes}')
        if output is None:
            return 1
        try:
            return max(int(output), 1)
        except ValueError:
            return 1

    def has_multiple_panes(self) -> bool:
        return self.pane_count() > 1

    def pane_snapshot(self) -> MultiplexerPaneSnapshot:
        """查询当前 pane 布局"""
        return MultiplexerPaneSnapshot(
            pane_count=self.pane_count(),
            is_rightmost=self.is_rightmost_pane(),
            is_leftmost=self.is_leftmost_pane(),
        )


def check_tmux(binary: str = "tmux") -> tuple[bool, str]:
    """检查 tmux 是否可用"""
    try:
        result = subprocess.run([binary, '-V'], capture_output=True, text=True)
        if result.returncode == 0:
            return True, result.stdout.strip()
        return False, "tmux 命令执行失败"
    except FileNotFoundError:
        return False, "未找到 tmux，请安装: sudo apt install tmux"
    except OSError as e:
        return False, f"无法执行 {binary}: {e}"
