"""数据模型定义

所有快照都在每次按键时重新获取，不做任何缓存。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class _ConfigEnum(Enum):
    """可从配置/命令行字符串解析的枚举"""

    @classmethod
    def from_str(cls, value: str) -> '_ConfigEnum':
        normalized = value.strip().lower().replace('_', '-')
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"无效的 {cls.__name__}: {value!r}")

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


class BufferKind(_ConfigEnum):
    """当前缓冲区类型"""
    FILE = 'file'              # 访问文件的缓冲区
    DIRECTORY = 'directory'    # 目录列表（dired 一类）
    OTHER = 'other'


class PaneDirectoryPolicy(_ConfigEnum):
    """新 pane 的目录策略"""
    PROJECT_ROOT = 'project'
    BUFFER_PATH = 'buffer'
    HOME = 'home'


class NavigationVariant(_ConfigEnum):
    """下一个窗口的判断方式"""
    BOUNDARY = 'boundary'      # 边界检测 + pane 数量启发式
    SIMPLE = 'simple'          # 只有一个窗口时交给 tmux


class NavAction(Enum):
    """导航动作"""
    MOVE_WITHIN_EDITOR = 'editor'
    DELEGATE_TO_MULTIPLEXER = 'tmux'
    MOVE_WITHIN_EDITOR_THEN_DELEGATE = 'editor+tmux'

    @property
    def moves_editor(self) -> bool:
        return self is not NavAction.DELEGATE_TO_MULTIPLEXER

    @property
    def delegates(self) -> bool:
        return self is not NavAction.MOVE_WITHIN_EDITOR


@dataclass(frozen=True)
class EditorContext:
    """编辑器上下文

    Attributes:
        buffer_kind: 当前缓冲区类型
        buffer_path: 文件路径或目录列表的目录
        project_root: 项目根目录（未找到时为 None）
    """
    buffer_kind: BufferKind = BufferKind.OTHER
    buffer_path: Optional[str] = None
    project_root: Optional[str] = None


@dataclass(frozen=True)
class WindowLayoutSnapshot:
    """编辑器窗口布局快照"""
    window_count: int = 1
    has_window_right: bool = False
    has_window_below: bool = False

    def __post_init__(self):
        if self.window_count < 1:
            raise ValueError(f"window_count 必须 >= 1: {self.window_count}")

    @property
    def is_last_window(self) -> bool:
        """右侧和下方都没有窗口，即窗口循环中的最后一个"""
        return not self.has_window_right and not self.has_window_below


@dataclass(frozen=True)
class MultiplexerPaneSnapshot:
    """tmux pane 布局快照"""
    pane_count: int = 1
    is_rightmost: bool = False
    is_leftmost: bool = False

    @property
    def has_multiple_panes(self) -> bool:
        return self.pane_count > 1
