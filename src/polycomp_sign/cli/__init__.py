"""
命令行接口模块
==============

提供发送页面、设置时钟和查看串口的命令行接口。
"""

from .sign_cli import SignCLI

__all__ = [
    "SignCLI"
]
