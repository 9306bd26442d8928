"""
串口管理模块
============

提供串口的统一管理和操作接口，以及线路设置的保存与恢复。
"""

import os
import sys
import serial
from serial.tools import list_ports
from typing import Any, Dict, List, Optional

from ..config.settings import SerialConfig
from ..utils.logger import get_logger

if sys.platform != "win32":
    import termios

logger = get_logger(__name__)


def capture_line_settings(port: str) -> Optional[List[Any]]:
    """
    读取串口当前的线路设置

    相当于 stty -g，在打开串口之前调用，以便退出时恢复。

    Args:
        port: 串口设备路径

    Returns:
        termios属性列表；Windows下串口没有持久的线路设置，返回None
    """
    if sys.platform == "win32":
        return None

    fd = os.open(port, os.O_RDWR | os.O_NOCTTY | os.O_NONBLOCK)
    try:
        settings = termios.tcgetattr(fd)
    finally:
        os.close(fd)

    logger.debug(f"已保存串口 {port} 的线路设置")
    return settings


def restore_line_settings(port: str, settings: Optional[List[Any]]) -> None:
    """
    恢复之前保存的线路设置

    Args:
        port: 串口设备路径
        settings: capture_line_settings 的返回值
    """
    if settings is None or sys.platform == "win32":
        return

    fd = os.open(port, os.O_RDWR | os.O_NOCTTY | os.O_NONBLOCK)
    try:
        termios.tcsetattr(fd, termios.TCSANOW, settings)
    finally:
        os.close(fd)

    logger.debug(f"已恢复串口 {port} 的线路设置")


class SerialManager:
    """串口管理器"""

    def __init__(self, config: SerialConfig):
        """
        初始化串口管理器

        Args:
            config: 串口配置对象
        """
        self.config = config
        self._port: Optional[serial.Serial] = None

    @property
    def port(self) -> Optional[serial.Serial]:
        """获取串口对象"""
        return self._port

    @property
    def is_open(self) -> bool:
        """检查串口是否已打开"""
        return self._port is not None and self._port.is_open

    def open(self) -> bool:
        """
        打开串口连接

        Returns:
            成功返回True，失败返回False
        """
        try:
            if self.is_open:
                logger.warning(f"串口 {self.config.port} 已经打开")
                return True

            self._port = serial.Serial(**self.config.to_serial_kwargs())

            logger.info(
                f"成功打开串口 {self.config.port} ({self.config.baudrate} baud)"
            )
            return True

        except (serial.SerialException, OSError, ValueError) as e:
            logger.error(f"打开串口失败: {e}")
            self._port = None
            return False

    def close(self) -> None:
        """关闭串口连接"""
        try:
            if self._port and self._port.is_open:
                self._port.close()
                logger.info(f"已关闭串口 {self.config.port}")
        except (serial.SerialException, OSError) as e:
            logger.error(f"关闭串口失败: {e}")
        finally:
            self._port = None

    def write(self, data: bytes) -> bool:
        """
        向串口写入数据

        Args:
            data: 要写入的字节数据

        Returns:
            成功返回True，失败返回False
        """
        try:
            if not self.is_open:
                logger.error("串口未打开，无法写入数据")
                return False

            bytes_written = self._port.write(data)
            return bytes_written == len(data)

        except (serial.SerialException, OSError) as e:
            logger.error(f"写入数据失败: {e}")
            return False

    def flush(self) -> bool:
        """
        等待输出缓冲区发送完毕

        Returns:
            成功返回True，失败返回False
        """
        try:
            if not self.is_open:
                logger.error("串口未打开，无法刷新输出")
                return False

            self._port.flush()
            return True

        except (serial.SerialException, OSError) as e:
            logger.error(f"刷新输出失败: {e}")
            return False

    def read_byte(self, timeout: float) -> Optional[int]:
        """
        在超时时间内读取一个字节

        Args:
            timeout: 超时时间(秒)

        Returns:
            读取到的字节值，超时或串口未打开返回None

        Raises:
            serial.SerialException: 串口读取出错
        """
        if not self.is_open:
            logger.error("串口未打开，无法读取数据")
            return None

        previous = self._port.timeout
        try:
            self._port.timeout = timeout
            data = self._port.read(1)
        except (serial.SerialException, OSError) as e:
            logger.error(f"读取数据失败: {e}")
            raise
        finally:
            self._port.timeout = previous

        return data[0] if data else None

    @staticmethod
    def list_available_ports() -> List[Dict[str, str]]:
        """
        获取系统可用的串口列表

        Returns:
            串口信息列表，每个元素包含device、description等字段
        """
        ports = []
        for port_info in list_ports.comports():
            ports.append({
                'device': port_info.device,
                'description': port_info.description or '未知设备',
                'hwid': port_info.hwid or '未知硬件ID'
            })
        return ports

    @staticmethod
    def print_available_ports() -> None:
        """打印系统可用的串口信息"""
        ports = SerialManager.list_available_ports()

        if not ports:
            print("没有找到可用的串口。")
            return

        print("可用的串口：")
        for port in ports:
            print(f"  {port['device']} - {port['description']}")
