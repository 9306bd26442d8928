#!/usr/bin/env python3
"""
PolyComp显示屏驱动 - 模块CLI入口
================================

支持通过 python -m polycomp_sign 调用
"""

import sys
import logging
import argparse

from . import __version__
from .cli.sign_cli import SignCLI
from .config.constants import (
    BROADCAST_ADDRESS,
    DEFAULT_BAUDRATE,
    DEFAULT_DURATION,
    DEFAULT_LINES,
    DEFAULT_WIDTH,
    Transition,
)
from .utils.logger import get_logger, set_level

logger = get_logger(__name__)

PROGRAM_NAME = "PolyComp显示屏驱动"


def _add_connection_arguments(parser: argparse.ArgumentParser) -> None:
    """串口与显示屏的公共参数"""
    parser.add_argument("--port", required=True, help="串口号（如 /dev/ttyS0, COM1）")
    parser.add_argument("--baudrate", type=int, default=DEFAULT_BAUDRATE,
                        help=f"波特率（默认{DEFAULT_BAUDRATE}）")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help=f"每行字符数（默认{DEFAULT_WIDTH}）")
    parser.add_argument("--lines", type=int, default=DEFAULT_LINES,
                        help=f"物理行数（默认{DEFAULT_LINES}）")
    parser.add_argument("--address", type=int, default=BROADCAST_ADDRESS,
                        help="显示屏地址（默认0，广播）")
    parser.add_argument("--joined-width", type=int, default=None,
                        help="合并行超过该长度时使用滑动效果（默认为宽度的一半）")


def create_parser():
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        description=f"{PROGRAM_NAME} v{__version__}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
使用示例：
  # 居中显示两行
  python -m polycomp_sign page --port /dev/ttyS0 HELLO WORLD --center --duration 4

  # 显示时间
  python -m polycomp_sign page --port /dev/ttyS0 --time --center

  # 只设置时钟
  python -m polycomp_sign clock --port /dev/ttyS0
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"{PROGRAM_NAME} v{__version__}"
    )
    parser.add_argument("--verbose", action="store_true", help="输出调试日志")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    subparsers.add_parser("ports", help="列出可用串口")

    clock_parser = subparsers.add_parser("clock", help="设置显示屏时钟")
    _add_connection_arguments(clock_parser)

    page_parser = subparsers.add_parser("page", help="发送一个页面")
    _add_connection_arguments(page_parser)
    page_parser.add_argument("line1", nargs="?", help="第一行文本")
    page_parser.add_argument("line2", nargs="?", help="第二行文本")
    token = page_parser.add_mutually_exclusive_group()
    token.add_argument("--time", action="store_true", help="第一行显示时间")
    token.add_argument("--temp", action="store_true", help="第一行显示温度")
    page_parser.add_argument("--center", action="store_true", help="居中显示")
    page_parser.add_argument("--invert", action="store_true", help="反色显示")
    page_parser.add_argument("--no-join", action="store_true", help="单行时不合并")
    page_parser.add_argument("--last", action="store_true", help="最后一页，立即开始显示")
    page_parser.add_argument(
        "--transition",
        default=Transition.AUTO.name.lower(),
        choices=[t.name.lower() for t in Transition],
        help="切换效果（默认auto）",
    )
    page_parser.add_argument("--duration", type=int, default=DEFAULT_DURATION,
                             help=f"停留时间，秒（默认{DEFAULT_DURATION}）")

    return parser


def main(argv=None):
    """主函数"""
    try:
        parser = create_parser()
        args = parser.parse_args(argv)

        if not args.command:
            parser.print_help()
            return

        if args.verbose:
            set_level(logging.DEBUG)

        if args.command == "ports":
            success = SignCLI.show_available_ports()
        elif args.command == "clock":
            success = SignCLI.set_clock(args)
        else:
            success = SignCLI.send_page(args)

        sys.exit(0 if success else 1)

    except KeyboardInterrupt:
        print("\n用户中断程序，退出")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"参数错误: {e}")
        print(f"\n参数错误: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
