"""快照适配器

编辑器通过命令行把自己的状态传进来，editmux 负责 tmux 一侧，
编辑器内的移动由调用方根据输出的动作自行完成。
"""

from ..models import EditorContext, WindowLayoutSnapshot
from .adapter import EditorAdapter


class SnapshotEditorAdapter(EditorAdapter):
    """由固定快照构造的编辑器适配器

    other_window() 不直接操作编辑器，只记录调用次数，供 CLI 报告。
    """

    def __init__(self, context: EditorContext = None, layout: WindowLayoutSnapshot = None):
        self._context = context or EditorContext()
        self._layout = layout or WindowLayoutSnapshot()
        self.moves = 0

    @property
    def name(self) -> str:
        return "snapshot"

    def current_context(self) -> EditorContext:
        return self._context

    def window_layout(self) -> WindowLayoutSnapshot:
        return self._layout

    def other_window(self) -> None:
        self.moves += 1
