"""
配置模块
=======

包含协议常量定义和配置管理功能。
"""

from .constants import *
from .settings import *

__all__ = [
    # 常量
    "ACK",
    "ACK_TIMEOUT",
    "DEFAULT_BAUDRATE",
    "DEFAULT_WIDTH",
    "DEFAULT_LINES",
    "BROADCAST_ADDRESS",
    "SerialStatus",
    "WeeklyStatus",
    "Tempo",
    "Function",
    "PageStatus",
    "Transition",
    "DisplayToken",
    "Markup",
    # 配置
    "SerialConfig",
    "SignConfig",
    "PageOptions",
]
