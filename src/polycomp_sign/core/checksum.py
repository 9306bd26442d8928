"""
校验算法模块
============

提供数据帧校验相关的算法实现。
"""

from functools import reduce
from operator import xor


def calculate_checksum(data: bytes) -> int:
    """
    计算数据的异或校验和

    将所有字节逐个异或，结果为单字节。

    Args:
        data: 需要计算校验和的字节数据

    Returns:
        校验和值，8位无符号整数

    Raises:
        TypeError: 当输入不是bytes类型时抛出

    Examples:
        >>> calculate_checksum(b'\\x00\\x02\\x00\\x03\\x04')
        5
        >>> calculate_checksum(b'')
        0
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("输入数据必须是bytes类型")

    return reduce(xor, data, 0)
