"""Notice system.

This module provides the NoticeManager class, which shows short-lived messages on screen.
"""

from roomwalk.systems.notice.base import Notice, NoticeBaseManager
from roomwalk.systems.notice.manager import NoticeManager

__all__ = ["Notice", "NoticeBaseManager", "NoticeManager"]
