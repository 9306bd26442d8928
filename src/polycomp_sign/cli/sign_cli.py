"""
显示屏命令行接口
================

根据命令行参数建立会话并发送页面或设置时钟。
"""

import argparse

from ..config.constants import DisplayToken, Transition
from ..config.settings import PageOptions, SerialConfig, SignConfig
from ..core.serial_manager import SerialManager
from ..sign.session import SignSession, SignSessionError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class SignCLI:
    """显示屏命令行接口"""

    @staticmethod
    def show_available_ports() -> bool:
        """显示可用的串口"""
        SerialManager.print_available_ports()
        return True

    @staticmethod
    def build_configs(args: argparse.Namespace):
        """
        从命令行参数创建串口和显示屏配置

        Returns:
            元组(SerialConfig, SignConfig)
        """
        serial_config = SerialConfig(port=args.port, baudrate=args.baudrate)
        sign_config = SignConfig(
            width=args.width,
            lines=args.lines,
            address=args.address,
            joined_width=args.joined_width,
        )
        return serial_config, sign_config

    @staticmethod
    def build_page(args: argparse.Namespace):
        """
        从命令行参数创建页面内容和选项

        Returns:
            元组(第一行, 第二行, PageOptions)
        """
        if args.time:
            line1 = DisplayToken.TIME
        elif args.temp:
            line1 = DisplayToken.TEMPERATURE
        else:
            line1 = args.line1

        options = PageOptions(
            join=False if args.no_join else None,
            center=args.center,
            invert=args.invert,
            last=args.last,
            transition=Transition[args.transition.upper()],
            duration=args.duration,
        )
        return line1, args.line2, options

    @staticmethod
    def set_clock(args: argparse.Namespace) -> bool:
        """设置显示屏时钟的CLI入口，建立会话时即完成设置"""
        serial_config, sign_config = SignCLI.build_configs(args)
        try:
            with SignSession.open(serial_config, sign_config):
                print("显示屏时钟已设置")
            return True
        except SignSessionError as e:
            print(f"设置时钟失败: {e}")
            return False

    @staticmethod
    def send_page(args: argparse.Namespace) -> bool:
        """发送单个页面的CLI入口"""
        serial_config, sign_config = SignCLI.build_configs(args)
        line1, line2, options = SignCLI.build_page(args)

        if line1 is None:
            print("必须提供第一行文本，或使用 --time / --temp")
            return False

        try:
            with SignSession.open(serial_config, sign_config) as sign:
                result = sign.page(line1, line2, options)
        except SignSessionError as e:
            print(f"建立会话失败: {e}")
            return False

        if result:
            print("页面发送成功！")
            return True

        print(f"页面发送失败: {result}")
        return False
