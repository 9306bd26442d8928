"""
应答等待模块
============

每发送一帧后，设备回复一个确认字节。
"""

from typing import Optional, Protocol

from ..config.constants import ACK, ACK_TIMEOUT
from .result import ErrorKind, SignResult
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ByteChannel(Protocol):
    """显示屏会话所需的字节通道接口，SerialManager即为其实现"""

    def write(self, data: bytes) -> bool: ...

    def flush(self) -> bool: ...

    def read_byte(self, timeout: float) -> Optional[int]: ...


def wait_for_ack(channel: ByteChannel, timeout: float = ACK_TIMEOUT) -> SignResult:
    """
    阻塞等待一个确认字节

    Args:
        channel: 字节通道
        timeout: 超时时间(秒)

    Returns:
        收到0x06时成功；超时返回ACK_TIMEOUT；收到其他字节返回UNEXPECTED_ACK；
        串口读取出错返回READ_FAILED
    """
    try:
        received = channel.read_byte(timeout)
    except OSError as e:
        # serial.SerialException 是 OSError 的子类
        logger.error(f"等待显示屏确认时串口出错: {e}")
        return SignResult.failure(ErrorKind.READ_FAILED, f"读取确认字节失败: {e}")

    if received is None:
        logger.error(f"等待显示屏确认超时 ({timeout}s)")
        return SignResult.failure(
            ErrorKind.ACK_TIMEOUT, f"{timeout}秒内未收到显示屏确认"
        )

    if received != ACK:
        logger.error(f"显示屏确认字节错误: 期望={hex(ACK)}, 接收={hex(received)}")
        return SignResult.failure(
            ErrorKind.UNEXPECTED_ACK,
            f"未收到显示屏确认 (收到 {received})",
            received=received,
        )

    logger.debug("收到显示屏确认")
    return SignResult.success()
