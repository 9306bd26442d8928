"""
操作结果
========

页面发送、时钟设置等操作不抛出异常，而是返回携带错误类型的结果对象。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config.constants import Transition


class ErrorKind(Enum):
    """错误类型"""

    # 参数校验错误
    JOIN_CONFLICT = "join_conflict"  # 给出第二行时不能合并
    LINE_TOO_LONG = "line_too_long"  # 第一行超过宽度
    INVALID_SECOND_LINE = "invalid_second_line"  # 第二行不能是时间/温度
    UNENCODABLE_TEXT = "unencodable_text"  # 文本含有单字节编码以外的字符

    # 传输错误
    WRITE_FAILED = "write_failed"
    READ_FAILED = "read_failed"  # 等待确认时串口出错
    ACK_TIMEOUT = "ack_timeout"
    UNEXPECTED_ACK = "unexpected_ack"

    @property
    def is_validation(self) -> bool:
        """是否属于参数校验错误"""
        return self in (
            ErrorKind.JOIN_CONFLICT,
            ErrorKind.LINE_TOO_LONG,
            ErrorKind.INVALID_SECOND_LINE,
            ErrorKind.UNENCODABLE_TEXT,
        )


@dataclass(frozen=True)
class SignResult:
    """操作结果"""

    error: Optional[ErrorKind] = None
    message: str = ""
    received: Optional[int] = None  # UNEXPECTED_ACK时收到的字节
    payload: Optional[bytes] = None  # 组包成功时的内容字节
    transition: Optional[Transition] = None  # 实际使用的切换效果

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, **kwargs) -> "SignResult":
        return cls(error=None, **kwargs)

    @classmethod
    def failure(
        cls, error: ErrorKind, message: str, received: Optional[int] = None
    ) -> "SignResult":
        return cls(error=error, message=message, received=received)

    def __str__(self) -> str:
        if self.ok:
            return "OK"
        return f"{self.error.value}: {self.message}"
