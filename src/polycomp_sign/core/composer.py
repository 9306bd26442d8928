"""
页面内容组装模块
================

生成页面和时钟设置命令的内容字节（不含帧头帧尾）。

页面内容格式：
| 串口状态(1B) | 页码(3B ASCII) | 时间控制(1B) | 功能(1B) | 页面状态(1B) | 文本(NB) |

时钟设置格式：
| 串口状态(1B) | "000" | 时分秒日月(10B) | "0" | 星期(1B) |
"""

import datetime
from typing import Optional, Union

from ..config.constants import (
    CLOCK_PAGE_MARKER,
    PAGE_NUMBER_FORMAT,
    TEXT_ENCODING,
    DisplayToken,
    Function,
    Markup,
    PageStatus,
    SerialStatus,
    Tempo,
    Transition,
)
from ..config.settings import PageOptions
from .result import ErrorKind, SignResult

LineContent = Union[str, DisplayToken]


def visible_length(text: str) -> int:
    """
    计算文本的可见长度，标记码不计入

    Examples:
        >>> visible_length(Markup.BOLD + "HELLO" + Markup.DEFAULT)
        5
    """
    return len(Markup.MATCHER.sub("", text))


def center_text(text: str, width: int) -> str:
    """
    按原始长度居中，左侧取较少的一半空格

    注意这里使用的是包含标记码的原始长度，与可见长度的校验不一致。
    """
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class PageComposer:
    """页面内容组装器"""

    def __init__(self, width: int, joined_width: int):
        """
        Args:
            width: 每行可见字符数
            joined_width: 合并行超过该长度时强制使用滑动效果
        """
        self.width = width
        self.joined_width = joined_width

    def compose_page(
        self,
        line1: LineContent,
        line2: Optional[LineContent],
        options: PageOptions,
        page_number: int,
    ) -> SignResult:
        """
        组装页面内容字节

        Args:
            line1: 第一行文本，或时间/温度特殊内容
            line2: 第二行文本，可为None
            options: 页面选项
            page_number: 页码

        Returns:
            成功时payload为内容字节，transition为实际使用的切换效果；
            参数不合法时返回对应的校验错误
        """
        join = options.resolve_join(line2)
        if join and line2 is not None:
            return SignResult.failure(
                ErrorKind.JOIN_CONFLICT, "给出两行内容时不能合并"
            )

        transition = options.transition
        token = line1 if isinstance(line1, DisplayToken) else None

        if token is not None:
            # 时间/温度由设备渲染，文本部分最终不发送
            message = " " * self.width
        else:
            line1_length = visible_length(line1)
            if join:
                message = line1
                if line1_length > self.joined_width:
                    transition = Transition.SLIDE
            elif line1_length > self.width:
                return SignResult.failure(
                    ErrorKind.LINE_TOO_LONG,
                    f"第一行最多{self.width}个字符 (实际{line1_length})",
                )
            elif options.center:
                message = center_text(line1, self.width)
            else:
                message = line1 + " " * (self.width - line1_length)

        if line2 is not None:
            if not isinstance(line2, str):
                return SignResult.failure(
                    ErrorKind.INVALID_SECOND_LINE, "第二行不能显示时间/温度"
                )
            message += line2
            if visible_length(line2) > self.width:
                transition = Transition.SLIDE

        try:
            text = message.encode(TEXT_ENCODING)
        except UnicodeEncodeError as e:
            return SignResult.failure(
                ErrorKind.UNENCODABLE_TEXT,
                f"无法编码的字符 {e.object[e.start:e.end]!r}",
            )

        status = SerialStatus.BASE | SerialStatus.ACK_WANTED
        if not options.last:
            status |= SerialStatus.MORE_PAGES

        tempo = Tempo.BASE | Tempo.duration(options.duration) | Tempo.ALWAYS_ON

        function = Function.BASE | Function.transition(transition)
        if token is DisplayToken.TIME:
            function |= Function.TIME
        elif token is DisplayToken.TEMPERATURE:
            function |= Function.TEMPERATURE

        page_status = PageStatus.BASE
        if join:
            page_status |= PageStatus.JOIN_12
        if options.center:
            page_status |= PageStatus.CENTER
        if options.invert:
            page_status |= PageStatus.INVERT

        body = bytearray([status])
        body += (PAGE_NUMBER_FORMAT % page_number).encode("ascii")
        body += bytes([tempo, function, page_status])
        if token is None:
            body += text

        return SignResult.success(
            payload=bytes(body),
            transition=Transition(Function.transition(transition)),
        )

    @staticmethod
    def compose_clock_set(moment: Optional[datetime.datetime] = None) -> bytes:
        """
        组装时钟设置命令内容

        星期按周日为0计算，再加1后以十进制写入，不补零。

        Args:
            moment: 要设置的时间，默认为当前时间

        Returns:
            内容字节
        """
        moment = moment or datetime.datetime.now()
        status = SerialStatus.BASE | SerialStatus.ACK_WANTED | SerialStatus.MORE_PAGES

        weekday = moment.isoweekday() % 7 + 1
        fields = moment.strftime("%H%M%S%d%m") + "0" + str(weekday)

        return bytes([status]) + CLOCK_PAGE_MARKER + fields.encode("ascii")
