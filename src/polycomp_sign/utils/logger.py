"""
日志记录模块
============

提供统一的日志记录功能，支持彩色输出和调用位置追踪。
"""

import datetime
import inspect
import logging
import sys
from typing import Dict, Optional
from pathlib import Path


class ColoredFormatter(logging.Formatter):
    """彩色日志格式化器"""

    # ANSI颜色代码
    COLORS = {
        'DEBUG': '\033[36m',    # 青色
        'INFO': '\033[0m',      # 默认色
        'WARNING': '\033[33m',  # 黄色
        'ERROR': '\033[31m',    # 红色
        'CRITICAL': '\033[35m', # 紫色
        'RESET': '\033[0m'      # 重置
    }

    def format(self, record):
        """格式化日志记录"""
        # 跳过logging模块自身的栈帧，找到真正的调用者
        frame = inspect.currentframe()
        caller = ("unknown", "unknown", 0)
        try:
            while frame:
                filename = frame.f_code.co_filename
                if filename != __file__ and filename != logging.__file__:
                    caller = (
                        Path(filename).name,
                        frame.f_code.co_name,
                        frame.f_lineno,
                    )
                    break
                frame = frame.f_back
        finally:
            del frame

        now = datetime.datetime.fromtimestamp(record.created)
        milliseconds = now.microsecond // 1000
        timestamp = now.strftime(f"%Y-%m-%d %H:%M:%S.{milliseconds:03d}")

        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        return (
            f"{color}[{timestamp}] {record.getMessage()} "
            f"[{caller[0]}.{caller[1]}():{caller[2]}]{reset}"
        )


# 全局日志器字典
_loggers: Dict[str, logging.Logger] = {}


def setup_logger(
    name: str = "polycomp_sign",
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    设置日志器

    Args:
        name: 日志器名称
        level: 日志级别
        log_file: 日志文件路径，None表示不写入文件
        console_output: 是否输出到控制台

    Returns:
        配置好的日志器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 清除已有的处理器
    logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(ColoredFormatter())
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)

    # 防止重复输出
    logger.propagate = False

    return logger


def get_logger(name: str = "polycomp_sign") -> logging.Logger:
    """
    获取日志器实例

    Args:
        name: 日志器名称

    Returns:
        日志器实例
    """
    if name not in _loggers:
        _loggers[name] = setup_logger(name)
    return _loggers[name]


def set_level(level: int) -> None:
    """调整所有已创建日志器的级别"""
    for logger in _loggers.values():
        logger.setLevel(level)


def format_bytes(data: bytes) -> str:
    """
    将字节数据格式化为便于阅读的十六进制字符串

    Examples:
        >>> format_bytes(b'\\x00\\x02\\x00\\x03')
        '00 02 00 03'
    """
    return data.hex(" ").upper() if data else "<empty>"
