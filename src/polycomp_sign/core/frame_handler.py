"""
数据帧处理模块
==============

负责显示屏通信中数据帧的封装和解析。
"""

from typing import Optional, Tuple

from ..config.constants import END_OF_TEXT, HEADER_END, HEADER_START
from .checksum import calculate_checksum
from ..utils.logger import format_bytes, get_logger

logger = get_logger(__name__)

# 帧头4字节 + 正文结束1字节 + 校验和1字节
FRAME_OVERHEAD_SIZE = 6


class FrameHandler:
    """数据帧处理器"""

    @staticmethod
    def pack_frame(line_count: int, address: int, content: bytes) -> bytes:
        """
        将页面内容打包成数据帧

        数据帧格式：| 0x00 | 行数(1B) | 地址(1B) | 0x03 | 内容(NB) | 0x04 | 校验和(1B) |

        内容字节原样插入，不做任何转义。

        Args:
            line_count: 显示屏物理行数
            address: 显示屏地址，0为广播
            content: 页面内容字节

        Returns:
            打包后的数据帧

        Examples:
            >>> FrameHandler.pack_frame(2, 0, b'')
            b'\\x00\\x02\\x00\\x03\\x04\\x05'
        """
        packet = (
            bytes([HEADER_START, line_count, address, HEADER_END])
            + bytes(content)
            + bytes([END_OF_TEXT])
        )
        return packet + bytes([calculate_checksum(packet)])

    @staticmethod
    def unpack_frame(frame_data: bytes) -> Optional[Tuple[int, int, bytes]]:
        """
        解析数据帧

        Args:
            frame_data: 完整的数据帧

        Returns:
            元组(行数, 地址, 内容)，格式或校验和错误时返回None
        """
        if len(frame_data) < FRAME_OVERHEAD_SIZE:
            logger.debug(f'数据长度不足一帧: {len(frame_data)}')
            return None

        if frame_data[0] != HEADER_START or frame_data[3] != HEADER_END:
            logger.error(f'帧头错误: {format_bytes(frame_data[:4])}')
            return None

        if frame_data[-2] != END_OF_TEXT:
            logger.error(f'缺少正文结束标记: {hex(frame_data[-2])}')
            return None

        received = frame_data[-1]
        calculated = calculate_checksum(frame_data[:-1])
        if received != calculated:
            logger.error(
                f'校验和错误: 接收={hex(received)}, 计算={hex(calculated)}'
            )
            return None

        return frame_data[1], frame_data[2], bytes(frame_data[4:-2])
