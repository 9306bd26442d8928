"""
核心模块
========

包含数据帧处理、页面组装、应答等待、串口管理和校验算法等核心功能。
"""

from .frame_handler import FrameHandler
from .checksum import calculate_checksum
from .composer import PageComposer, visible_length
from .ack import wait_for_ack
from .result import ErrorKind, SignResult
from .serial_manager import SerialManager

__all__ = [
    "FrameHandler",
    "calculate_checksum",
    "PageComposer",
    "visible_length",
    "wait_for_ack",
    "ErrorKind",
    "SignResult",
    "SerialManager"
]
