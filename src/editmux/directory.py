"""新 pane 的目录解析

按顺序尝试，第一个可用的结果胜出，最终兜底为 fallback，永不返回空值。
"""

import os
import logging
from pathlib import Path
from typing import Iterable, Optional

from .models import BufferKind, EditorContext, PaneDirectoryPolicy

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_MARKERS = ('.git', '.hg', '.svn', '.projectile', 'pyproject.toml')


def _working_directory() -> Optional[str]:
    try:
        return os.getcwd()
    except OSError:
        # 当前目录已被删除
        return None


def buffer_directory(ctx: EditorContext) -> Optional[str]:
    """由当前缓冲区推导目录

    - 目录列表：直接返回该目录（保留末尾的 /）
    - 文件缓冲区：文件所在目录，没有路径时用进程当前目录
    - 其他：None
    """
    kind = ctx.buffer_kind
    if kind is BufferKind.DIRECTORY:
        return ctx.buffer_path or None
    if kind is BufferKind.FILE:
        if ctx.buffer_path:
            return os.path.dirname(ctx.buffer_path) or _working_directory()
        return _working_directory()
    if kind is BufferKind.OTHER:
        return None
    raise AssertionError(f"未处理的缓冲区类型: {kind}")


def resolve_pane_directory(
    policy: PaneDirectoryPolicy,
    ctx: EditorContext,
    fallback: str,
) -> str:
    """解析新 pane 应打开的目录

    Args:
        policy: 目录策略
        ctx: 编辑器上下文
        fallback: 兜底目录

    Returns:
        目录路径，保证非空
    """
    if not fallback:
        fallback = os.path.expanduser('~')

    directory = None
    if policy is PaneDirectoryPolicy.PROJECT_ROOT:
        directory = ctx.project_root or buffer_directory(ctx)
    elif policy is PaneDirectoryPolicy.BUFFER_PATH:
        directory = buffer_directory(ctx)

    result = directory or fallback
    logger.debug(f"[目录] policy={policy.value}, kind={ctx.buffer_kind.value} -> {result}")
    return result


def _safe_check(check) -> bool:
    """无权限访问的目录按不存在处理"""
    try:
        return check()
    except OSError:
        return False


def find_project_root(start: str, markers: Iterable[str] = DEFAULT_PROJECT_MARKERS) -> Optional[str]:
    """从 start 向上查找包含项目标记的目录

    Args:
        start: 文件或目录路径
        markers: 项目标记文件/目录名

    Returns:
        项目根目录，未找到返回 None
    """
    markers = list(markers)
    if not start or not markers:
        return None

    path = Path(start).expanduser()
    try:
        path = path.resolve()
    except OSError:
        return None
    if not _safe_check(path.is_dir):
        path = path.parent

    for candidate in (path, *path.parents):
        for marker in markers:
            if _safe_check((candidate / marker).exists):
                logger.debug(f"[项目] 找到 {marker}: {candidate}")
                return str(candidate)
    return None


def context_with_project_root(
    ctx: EditorContext,
    markers: Iterable[str] = DEFAULT_PROJECT_MARKERS,
) -> EditorContext:
    """补全缺失的 project_root"""
    if ctx.project_root or not ctx.buffer_path:
        return ctx
    root = find_project_root(ctx.buffer_path, markers)
    if root is None:
        return ctx
    return EditorContext(
        buffer_kind=ctx.buffer_kind,
        buffer_path=ctx.buffer_path,
        project_root=root,
    )
