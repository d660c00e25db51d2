"""编辑器适配器抽象接口

定义编辑器一侧的统一接口：查询上下文、查询窗口布局、在编辑器内切换窗口。
"""

from abc import ABC, abstractmethod

from ..models import EditorContext, WindowLayoutSnapshot


class EditorAdapter(ABC):
    """编辑器适配器抽象接口

    所有宿主编辑器的适配器必须实现此接口。每次调用都应返回调用时刻的状态，
    不做缓存。
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """适配器名称（如 'snapshot'）"""
        pass

    @abstractmethod
    def current_context(self) -> EditorContext:
        """获取当前缓冲区上下文

        Returns:
            EditorContext
        """
        pass

    @abstractmethod
    def window_layout(self) -> WindowLayoutSnapshot:
        """获取当前窗口布局

        Returns:
            WindowLayoutSnapshot
        """
        pass

    @abstractmethod
    def other_window(self) -> None:
        """在编辑器内切换到下一个窗口（最后一个窗口时回到第一个）"""
        pass
