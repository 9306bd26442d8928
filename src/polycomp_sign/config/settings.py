"""
配置管理
========

提供串口、显示屏和页面相关的配置类。
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional
import serial

from .constants import (
    BROADCAST_ADDRESS,
    DEFAULT_BAUDRATE,
    DEFAULT_DURATION,
    DEFAULT_LINES,
    DEFAULT_TIMEOUT,
    DEFAULT_WIDTH,
    SETTLE_DELAY,
    Transition,
)


@dataclass
class SerialConfig:
    """串口配置类，对应 raw -parenb cstopb 的线路设置"""

    port: str  # 串口号
    baudrate: int = DEFAULT_BAUDRATE  # 波特率
    bytesize: int = serial.EIGHTBITS  # 数据位
    parity: str = serial.PARITY_NONE  # 校验位
    stopbits: float = serial.STOPBITS_TWO  # 停止位
    timeout: float = DEFAULT_TIMEOUT  # 读超时时间
    settle_delay: float = SETTLE_DELAY  # 打开后的稳定等待时间

    def __post_init__(self):
        """参数验证"""
        if not self.port:
            raise ValueError("port不能为空")
        if self.baudrate <= 0:
            raise ValueError("baudrate必须大于0")
        if self.settle_delay < 0:
            raise ValueError("settle_delay不能为负数")

    def to_serial_kwargs(self) -> dict:
        """转换为serial.Serial的参数字典"""
        return {
            "port": self.port,
            "baudrate": self.baudrate,
            "bytesize": self.bytesize,
            "parity": self.parity,
            "stopbits": self.stopbits,
            "timeout": self.timeout,
        }


@dataclass
class SignConfig:
    """显示屏配置类"""

    width: int = DEFAULT_WIDTH  # 每行可见字符数
    lines: int = DEFAULT_LINES  # 物理行数，写入每个帧头
    address: int = BROADCAST_ADDRESS  # 显示屏地址，0为广播
    joined_width: Optional[int] = None  # 合并行超过该长度时强制滑动效果

    def __post_init__(self):
        """参数验证"""
        if self.width <= 0:
            raise ValueError("width必须大于0")
        if not 0 <= self.lines <= 0xFF:
            raise ValueError("lines必须在0到255之间")
        if not 0 <= self.address <= 0xFF:
            raise ValueError("address必须在0到255之间")
        if self.joined_width is None:
            self.joined_width = self.width // 2
        elif self.joined_width < 0:
            raise ValueError("joined_width不能为负数")


@dataclass
class PageOptions:
    """单个页面的显示选项"""

    join: Optional[bool] = None  # None表示未指定：只有一行时默认合并
    center: bool = False
    invert: bool = False
    last: bool = False  # 最后一页，设备立即开始显示新页面
    transition: Transition = Transition.AUTO
    duration: int = DEFAULT_DURATION  # 停留时间(秒)，只使用低4位

    def resolve_join(self, line2: Any) -> bool:
        """
        计算实际的合并标志

        Args:
            line2: 第二行内容，可能为None

        Returns:
            未显式指定时，没有第二行则合并
        """
        if self.join is None:
            return line2 is None
        return bool(self.join)

    def merged(self, overrides: Dict[str, Any]) -> "PageOptions":
        """
        返回叠加了关键字参数的新选项

        Raises:
            TypeError: 出现未知选项时抛出
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"未知的页面选项: {', '.join(sorted(unknown))}")
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update(overrides)
        return PageOptions(**values)
