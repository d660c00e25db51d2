"""配置管理模块"""

import os
import yaml
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional

from .directory import DEFAULT_PROJECT_MARKERS
from .models import NavigationVariant, PaneDirectoryPolicy

logger = logging.getLogger(__name__)

# 默认配置文件路径
DEFAULT_CONFIG_PATH = Path.home() / '.config' / 'editmux' / 'config.yaml'


@dataclass
class TmuxConfig:
    """tmux 调用配置"""
    binary: str = "tmux"                 # tmux 可执行文件
    timeout: Optional[float] = None      # 超时（秒），None 表示不限


@dataclass
class Config:
    """主配置

    Attributes:
        prefix_key: 新建 tab / 分屏快捷键的前缀
        new_tab_key: 新建 tab 键（前缀之后）
        split_key: 分屏键（前缀之后）
        next_window_key: "切换窗口"快捷键
        fallback_directory: 兜底目录
        directory_policy: 新 pane 的目录策略
        navigation: 导航方式
        project_markers: 项目根目录标记
        tmux: tmux 调用配置
    """
    prefix_key: str = "C-c t"
    new_tab_key: str = "c"
    split_key: str = "%"
    next_window_key: str = "C-x o"
    fallback_directory: str = "~"
    directory_policy: PaneDirectoryPolicy = PaneDirectoryPolicy.PROJECT_ROOT
    navigation: NavigationVariant = NavigationVariant.BOUNDARY
    project_markers: List[str] = field(default_factory=lambda: list(DEFAULT_PROJECT_MARKERS))
    tmux: TmuxConfig = field(default_factory=TmuxConfig)

    @property
    def fallback_path(self) -> str:
        """展开 ~ 后的兜底目录"""
        return os.path.expanduser(self.fallback_directory or '~')

    @property
    def new_tab_sequence(self) -> str:
        return f"{self.prefix_key} {self.new_tab_key}"

    @property
    def split_sequence(self) -> str:
        return f"{self.prefix_key} {self.split_key}"


def _parse_str(value, default: str) -> str:
    if value is None:
        return default
    value = str(value)
    return value if value.strip() else default


def _parse_enum(enum_cls, value, default):
    if value is None:
        return default
    try:
        return enum_cls.from_str(str(value))
    except ValueError as e:
        logger.warning(f"[配置] {e}，使用默认值 {default.value}")
        return default


def load_config(config_path: Path = None) -> Config:
    """加载配置文件

    Args:
        config_path: 配置文件路径，默认 ~/.config/editmux/config.yaml

    Returns:
        Config 对象
    """
    path = config_path or DEFAULT_CONFIG_PATH
    config = Config()

    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            # YAML 中的 null（如 `fallback_directory: ~`）视为未设置
            config.prefix_key = _parse_str(data.get('prefix_key'), config.prefix_key)
            config.new_tab_key = _parse_str(data.get('new_tab_key'), config.new_tab_key)
            config.split_key = _parse_str(data.get('split_key'), config.split_key)
            config.next_window_key = _parse_str(data.get('next_window_key'), config.next_window_key)
            config.fallback_directory = _parse_str(
                data.get('fallback_directory'), config.fallback_directory)
            config.directory_policy = _parse_enum(
                PaneDirectoryPolicy, data.get('directory_policy'), config.directory_policy)
            config.navigation = _parse_enum(
                NavigationVariant, data.get('navigation'), config.navigation)

            markers = data.get('project_markers')
            if markers is not None:
                config.project_markers = [str(m) for m in markers]

            # 解析 tmux 配置
            if 'tmux' in data:
                tmux_data = data['tmux'] or {}
                timeout = tmux_data.get('timeout')
                config.tmux = TmuxConfig(
                    binary=_parse_str(tmux_data.get('binary'), 'tmux'),
                    timeout=float(timeout) if timeout is not None else None,
                )

            logger.info(f"[配置] 已加载: {path}")
        except Exception as e:
            logger.warning(f"[配置] 加载失败，使用默认值: {e}")
            config = Config()
    else:
        logger.info(f"[配置] 文件不存在，使用默认值: {path}")

    return config


def save_default_config(config_path: Path = None) -> Path:
    """保存默认配置文件（用于生成示例）

    Args:
        config_path: 配置文件路径

    Returns:
        写入的文件路径
    """
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    default_yaml = """# editmux 配置文件

# 快捷键
prefix_key: "C-c t"        # 新建 tab / 分屏的前缀
new_tab_key: "c"           # <prefix> c 新建 tmux 窗口
split_key: "%"             # <prefix> % 左右分屏
next_window_key: "C-x o"   # 切换窗口（编辑器与 tmux 统一）

# 新 pane 的目录
#   project: 项目根目录 -> 当前缓冲区目录 -> fallback
#   buffer:  当前缓冲区目录 -> fallback
#   home:    总是 fallback
directory_policy: project
fallback_directory: "~"

# 项目根目录标记
project_markers:
  - .git
  - .hg
  - .svn
  - .projectile
  - pyproject.toml

# 导航方式
#   boundary: 最后一个窗口且 tmux 还有其他 pane 时，同时切换 tmux pane
#   simple:   只有一个编辑器窗口时才交给 tmux
navigation: boundary

tmux:
  binary: tmux
  timeout: null            # 秒，null 表示不限
"""

    with open(path, 'w', encoding='utf-8') as f:
        f.write(default_yaml)

    logger.info(f"[配置] 已生成默认配置: {path}")
    return path


def save_config(config: Config, config_path: Path = None) -> None:
    """保存配置

    Args:
        config: Config 对象
        config_path: 配置文件路径
    """
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'prefix_key': config.prefix_key,
        'new_tab_key': config.new_tab_key,
        'split_key': config.split_key,
        'next_window_key': config.next_window_key,
        'fallback_directory': config.fallback_directory,
        'directory_policy': config.directory_policy.value,
        'navigation': config.navigation.value,
        'project_markers': list(config.project_markers),
        'tmux': {
            'binary': config.tmux.binary,
            'timeout': config.tmux.timeout,
        },
    }

    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True)

    logger.info(f"[配置] 已保存: {path}")


# 全局配置实例
_config: Config = None


def get_config() -> Config:
    """获取全局配置（懒加载）"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Path = None) -> Config:
    """重新加载配置"""
    global _config
    _config = load_config(config_path)
    return _config
