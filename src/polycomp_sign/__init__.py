"""
PolyComp显示屏驱动
==================

通过串口驱动PolyComp电子显示屏，发送带校验和与确认应答的数据帧。

主要功能：
- 页面组装（居中、补齐、合并行、切换效果）
- 数据帧封装与异或校验
- 显示屏时钟设置
- 确认应答等待

版本: 1.0.0
"""

__version__ = "1.0.0"
__description__ = "PolyComp电子显示屏串口驱动"

# 导出主要类
from .config.constants import DisplayToken, Markup, Transition
from .config.settings import PageOptions, SerialConfig, SignConfig
from .core.result import ErrorKind, SignResult
from .sign.session import SignSession, SignSessionError

__all__ = [
    "SignSession",
    "SignSessionError",
    "SerialConfig",
    "SignConfig",
    "PageOptions",
    "DisplayToken",
    "Markup",
    "Transition",
    "ErrorKind",
    "SignResult",
]
