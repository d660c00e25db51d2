"""命令行入口 - 供编辑器插件调用的 tmux 导航命令"""

import argparse
import logging
import sys
from pathlib import Path

from . import config as config_module
from .config import load_config, save_default_config
from .editor import SnapshotEditorAdapter
from .mode import NavigationMode
from .models import (
    BufferKind,
    EditorContext,
    NavigationVariant,
    PaneDirectoryPolicy,
    WindowLayoutSnapshot,
)
from .tmux_control import check_tmux

logger = logging.getLogger(__name__)


def _add_context_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--buffer-kind', choices=BufferKind.choices(), default='other',
                        help='当前缓冲区类型')
    parser.add_argument('--buffer-path', help='文件路径或目录列表的目录')
    parser.add_argument('--project-root', help='项目根目录（省略时按标记查找）')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='editmux',
        description='editmux - 编辑器窗口与 tmux pane 统一导航',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
命令:
  new-tab       在解析出的目录新建 tmux 窗口
  split         在解析出的目录左右分屏
  next-window   下一个窗口，输出 editor / tmux / editor+tmux
  resolve-dir   只输出解析出的目录
  check         检查环境
  init-config   生成默认配置

示例:
  editmux new-tab --buffer-kind file --buffer-path ~/src/app/main.py
  editmux next-window --windows 2 --right
        """
    )
    parser.add_argument('--version', '-v', action='store_true', help='显示版本')
    parser.add_argument('--config', type=Path, help='配置文件路径')
    parser.add_argument('--policy', choices=PaneDirectoryPolicy.choices(),
                        help='覆盖配置中的目录策略')
    parser.add_argument('--navigation', choices=NavigationVariant.choices(),
                        help='覆盖配置中的导航方式')
    parser.add_argument('--debug', action='store_true', help='输出调试日志')

    sub = parser.add_subparsers(dest='command')

    for name, help_text in (
        ('new-tab', '新建 tmux 窗口'),
        ('split', 'tmux 左右分屏'),
        ('resolve-dir', '输出新 pane 的目录'),
    ):
        _add_context_arguments(sub.add_parser(name, help=help_text))

    nav = sub.add_parser('next-window', help='切换到下一个窗口 / pane')
    nav.add_argument('--windows', type=int, default=1, help='编辑器可见窗口数')
    nav.add_argument('--right', action='store_true', help='当前窗口右侧还有窗口')
    nav.add_argument('--below', action='store_true', help='当前窗口下方还有窗口')

    sub.add_parser('check', help='检查环境')

    init = sub.add_parser('init-config', help='生成默认配置')
    init.add_argument('--force', action='store_true', help='覆盖已有文件')

    return parser


def _build_mode(args) -> NavigationMode:
    config = load_config(args.config)
    if args.policy:
        config.directory_policy = PaneDirectoryPolicy.from_str(args.policy)
    if args.navigation:
        config.navigation = NavigationVariant.from_str(args.navigation)

    context = EditorContext(
        buffer_kind=BufferKind.from_str(getattr(args, 'buffer_kind', 'other')),
        buffer_path=getattr(args, 'buffer_path', None),
        project_root=getattr(args, 'project_root', None),
    )
    layout = WindowLayoutSnapshot(
        window_count=getattr(args, 'windows', 1),
        has_window_right=getattr(args, 'right', False),
        has_window_below=getattr(args, 'below', False),
    )
    return NavigationMode(SnapshotEditorAdapter(context, layout), config)


def main(argv=None):
    """主入口"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if args.version:
        from . import __version__
        print(f"editmux v{__version__}")
        return 0

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == 'check':
        return check_environment(args.config)

    if args.command == 'init-config':
        return init_config(args.config, args.force)

    if getattr(args, 'windows', 1) < 1:
        parser.error('--windows 必须 >= 1')

    mode = _build_mode(args)

    if args.command == 'resolve-dir':
        print(mode.pane_directory())
    elif args.command == 'new-tab':
        print(mode.new_tab())
    elif args.command == 'split':
        print(mode.split_pane())
    elif args.command == 'next-window':
        print(mode.next_window().value)

    return 0


def init_config(path: Path = None, force: bool = False) -> int:
    """生成默认配置"""
    target = path or config_module.DEFAULT_CONFIG_PATH
    if target.exists() and not force:
        print(f"配置已存在: {target}（使用 --force 覆盖）", file=sys.stderr)
        return 1
    print(save_default_config(target))
    return 0


def check_environment(path: Path = None) -> int:
    """检查环境"""
    print("检查环境...\n")
    config = load_config(path)
    all_ok = True

    ok, msg = check_tmux(config.tmux.binary)
    if ok:
        print(f"✅ tmux: {msg}")
    else:
        print(f"❌ tmux: {msg}")
        all_ok = False

    config_path = path or config_module.DEFAULT_CONFIG_PATH
    state = "已存在" if config_path.exists() else "不存在，使用默认值"
    print(f"ℹ️  配置: {config_path}（{state}）")
    print(f"   目录策略: {config.directory_policy.value}, 导航: {config.navigation.value}")

    print()
    if all_ok:
        print("✓ 所有检查通过")
    else:
        print("✗ 部分检查失败，请查看上方信息")

    return 0 if all_ok else 1


if __name__ == '__main__':
    sys.exit(main())
