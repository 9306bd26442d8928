"""
会话模块
========

显示屏会话的生命周期管理。
"""

from .session import SignSession, SignSessionError

__all__ = [
    "SignSession",
    "SignSessionError"
]
