"""
系统常量定义
============

定义PolyComp显示屏串口协议中使用的各种常量。
所有位标志的取值均与设备固件一致，不可修改。
"""

import re
from enum import Enum, IntEnum, IntFlag
from typing import Final, Pattern


# 数据帧标记
HEADER_START: Final[int] = 0x00  # 帧起始
HEADER_END: Final[int] = 0x03  # 帧头结束
END_OF_TEXT: Final[int] = 0x04  # 正文结束

# 应答
ACK: Final[int] = 0x06  # 设备确认字节
ACK_TIMEOUT: Final[float] = 10.0  # 等待确认的超时时间(秒)

# 串口配置默认值
DEFAULT_BAUDRATE: Final[int] = 1200  # 默认波特率
DEFAULT_TIMEOUT: Final[float] = 0.1  # 默认读超时(秒)
SETTLE_DELAY: Final[float] = 0.5  # 配置串口后的稳定等待时间(秒)

# 显示屏默认值
BROADCAST_ADDRESS: Final[int] = 0  # 广播地址
DEFAULT_LINES: Final[int] = 2  # 默认物理行数
DEFAULT_WIDTH: Final[int] = 16  # 默认每行字符数
DEFAULT_DURATION: Final[int] = 3  # 默认页面停留时间(秒)

# 页码字段
PAGE_NUMBER_FORMAT: Final[str] = "%03d"
MAX_PAGE_NUMBER: Final[int] = 999
CLOCK_PAGE_MARKER: Final[bytes] = b"000"  # 时钟设置命令的保留页码

# 文本编码，每个字符对应一个字节
TEXT_ENCODING: Final[str] = "latin-1"


class SerialStatus(IntFlag):
    """串口状态字节"""

    BASE = 0b11000000
    INTERRUPT = 0b00000010
    MORE_PAGES = 0b00000100
    ACK_WANTED = 0b00001000
    SCHED_MODE = 0b00010000


class WeeklyStatus(IntFlag):
    """周计划状态字节"""

    BASE = 0b10000000
    MONDAY = 0b00000001
    TUESDAY = 0b00000010
    WEDNESDAY = 0b00000100
    THURSDAY = 0b00001000
    FRIDAY = 0b00010000
    SATURDAY = 0b00100000
    SUNDAY = 0b01000000


class Tempo(IntFlag):
    """时间控制字节，低4位为停留时长"""

    BASE = 0b11000000
    TIMER = 0b00000000  # 因为ALWAYS_ON总是被置位，实际上不会生效
    ALWAYS_ON = 0b00100000
    ALWAYS_OFF = 0b00010000

    @staticmethod
    def duration(seconds: int) -> int:
        """停留时长只占低4位"""
        return int(seconds) & 0x0F


class Function(IntFlag):
    """功能字节，低4位为切换效果"""

    BASE = 0b11000000
    TIME = 0b00010000
    TEMPERATURE = 0b00100000

    @staticmethod
    def transition(value: int) -> int:
        """切换效果只占低4位"""
        return int(value) & 0x0F


class PageStatus(IntFlag):
    """页面状态字节"""

    BASE = 0b10000000
    JOIN_12 = 0b00000001
    JOIN_34 = 0b00000010
    JOIN_56 = 0b00000100
    JOIN_78 = 0b00001000
    CENTER = 0b00010000
    FOREIGN = 0b00100000
    INVERT = 0b01000000


class Transition(IntEnum):
    """页面切换效果"""

    AUTO = 0x0
    APPEAR = 0x1
    WIPE = 0x2
    OPEN = 0x3
    LOCK = 0x4
    ROTATE = 0x5
    RIGHT = 0x6
    LEFT = 0x7
    ROLL_UP = 0x8
    ROLL_DOWN = 0x9
    PING_PONG = 0xA
    FILL_UP = 0xB
    PAINT = 0xC
    FADE_IN = 0xD
    JUMP = 0xE
    SLIDE = 0xF


class DisplayToken(Enum):
    """第一行可用的特殊显示内容，由设备自行渲染"""

    TIME = "time"
    TEMPERATURE = "temperature"


class Markup:
    """
    文本标记码

    每个标记码固定2字节：转义字节0x1C + 代码字节。
    标记码原样发送，但不计入可见长度。
    """

    ESCAPE = "\x1c"

    FLASH = "\x1cF"
    BOLD = "\x1cE"
    RED = "\x1cR"
    GREEN = "\x1cG"
    YELLOW = "\x1cY"
    RAINBOW = "\x1cM"
    DEFAULT = "\x1cD"

    MATCHER: Pattern[str] = re.compile(r"\x1c.", re.DOTALL)
