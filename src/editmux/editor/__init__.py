"""编辑器适配器模块

使用示例：
    from editmux.editor import SnapshotEditorAdapter
    from editmux.models import WindowLayoutSnapshot

    editor = SnapshotEditorAdapter(layout=WindowLayoutSnapshot(window_count=2))
"""

from .adapter import EditorAdapter
from .snapshot_adapter import SnapshotEditorAdapter

__all__ = [
    'EditorAdapter',
    'SnapshotEditorAdapter',
]
