"""
显示屏会话模块
==============

负责页面计数和 复位 -> 设置时钟 -> 发送页面 的流程控制。
"""

import datetime
import time
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from ..config.constants import ACK_TIMEOUT, MAX_PAGE_NUMBER
from ..config.settings import PageOptions, SerialConfig, SignConfig
from ..core.ack import ByteChannel, wait_for_ack
from ..core.composer import LineContent, PageComposer
from ..core.frame_handler import FrameHandler
from ..core.result import ErrorKind, SignResult
from ..core.serial_manager import (
    SerialManager,
    capture_line_settings,
    restore_line_settings,
)
from ..utils.logger import format_bytes, get_logger

logger = get_logger(__name__)


class SignSessionError(RuntimeError):
    """会话无法建立：串口打不开或时钟设置失败"""

    def __init__(self, message: str, result: Optional[SignResult] = None):
        self.result = result
        super().__init__(message)


class SignSession:
    """
    显示屏会话

    一个会话独占一个字节通道。创建时复位页码并设置显示屏时钟，
    之后可以多次调用 page()。所有操作都是同步的，
    多线程使用时需要调用方自行加锁。
    """

    def __init__(
        self,
        channel: ByteChannel,
        config: Optional[SignConfig] = None,
        clock: Optional[datetime.datetime] = None,
        ack_timeout: float = ACK_TIMEOUT,
    ):
        """
        初始化会话，复位页码并设置时钟

        Args:
            channel: 字节通道，通常是已打开的SerialManager
            config: 显示屏配置（可选）
            clock: 要设置的时间，默认为当前时间
            ack_timeout: 等待确认的超时时间(秒)

        Raises:
            SignSessionError: 时钟设置失败时抛出
        """
        self.channel = channel
        self.config = config or SignConfig()
        self.ack_timeout = ack_timeout
        self.composer = PageComposer(self.config.width, self.config.joined_width)
        self.reset()
        result = self.set_clock(clock)
        if not result:
            raise SignSessionError(f"设置显示屏时钟失败: {result}", result)

    @property
    def page_number(self) -> int:
        """下一个要发送的页码"""
        return self._page_number

    def reset(self) -> None:
        """页码复位为1"""
        self._page_number = 1

    def set_clock(self, moment: Optional[datetime.datetime] = None) -> SignResult:
        """
        设置显示屏时钟

        Args:
            moment: 要设置的时间，默认为当前时间

        Returns:
            发送结果
        """
        content = PageComposer.compose_clock_set(moment)
        result = self._transmit(content)
        if result:
            logger.info("显示屏时钟已设置")
        return result

    def page(
        self,
        line1: LineContent,
        line2: Optional[LineContent] = None,
        options: Optional[PageOptions] = None,
        **overrides: Any,
    ) -> SignResult:
        """
        发送一个页面

        Args:
            line1: 第一行文本，或DisplayToken.TIME / DisplayToken.TEMPERATURE
            line2: 第二行文本（可选）
            options: 页面选项（可选）
            **overrides: 覆盖options中的单个选项，如 center=True

        Returns:
            发送结果；只有成功时页码才会加1

        Examples:
            >>> session.page("HELLO", "WORLD", center=True, duration=4)
            >>> session.page(DisplayToken.TIME, center=True)
            >>> session.page("THE", "END.", last=True)
        """
        options = options or PageOptions()
        if overrides:
            options = options.merged(overrides)

        composed = self.composer.compose_page(line1, line2, options, self._page_number)
        if not composed:
            logger.error(f"页面 {self._page_number} 参数错误: {composed.message}")
            return composed

        if composed.transition != options.transition:
            logger.debug(f"页面 {self._page_number} 切换效果改为 {composed.transition.name}")

        result = self._transmit(composed.payload)
        if not result:
            return result

        logger.info(f"页面 {self._page_number} 发送成功")
        self._page_number += 1
        if self._page_number == MAX_PAGE_NUMBER + 1:
            logger.warning(f"页码超过{MAX_PAGE_NUMBER}，页码字段将超出3位")

        return composed

    def _transmit(self, content: bytes) -> SignResult:
        """
        封装数据帧、写入通道并等待确认

        Args:
            content: 内容字节

        Returns:
            发送结果
        """
        frame = FrameHandler.pack_frame(self.config.lines, self.config.address, content)
        logger.debug(f"发送数据帧: {format_bytes(frame)}")

        try:
            if not self.channel.write(frame):
                return SignResult.failure(ErrorKind.WRITE_FAILED, "写入数据帧失败")
            if not self.channel.flush():
                return SignResult.failure(ErrorKind.WRITE_FAILED, "刷新串口输出失败")
        except OSError as e:
            logger.error(f"发送数据帧失败: {e}")
            return SignResult.failure(ErrorKind.WRITE_FAILED, f"发送数据帧失败: {e}")

        return wait_for_ack(self.channel, self.ack_timeout)

    @classmethod
    @contextmanager
    def open(
        cls,
        serial_config: SerialConfig,
        sign_config: Optional[SignConfig] = None,
        clock: Optional[datetime.datetime] = None,
    ) -> Iterator["SignSession"]:
        """
        打开串口并建立会话

        退出时无论成功与否都会关闭串口并恢复原来的线路设置。

        Examples:
            >>> with SignSession.open(SerialConfig(port='/dev/ttyS0')) as sign:
            ...     sign.page("HELLO", "WORLD", center=True)
        """
        try:
            saved = capture_line_settings(serial_config.port)
        except OSError as e:
            raise SignSessionError(f"无法读取串口 {serial_config.port} 的线路设置: {e}") from e

        manager = SerialManager(serial_config)
        try:
            if not manager.open():
                raise SignSessionError(f"无法打开串口 {serial_config.port}")
            time.sleep(serial_config.settle_delay)
            yield cls(manager, sign_config, clock)
        finally:
            manager.close()
            try:
                restore_line_settings(serial_config.port, saved)
            except OSError as e:
                logger.error(f"恢复串口 {serial_config.port} 的线路设置失败: {e}")
