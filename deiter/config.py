"""
Configuration for traversal checks.

This module manages the global traversal configuration and provides
settings for diagnosing misuse of adapters across threads.
"""

from __future__ import annotations

import os
import threading

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class TraversalConfig:
    """
    Global configuration for adapter traversal.

    Adapters are single-threaded by design. When the thread check is
    enabled, adapters remember the thread that created them and warn the
    first time they are traversed from a different one.
    """

    _instance: TraversalConfig | None = None
    _lock = threading.Lock()

    def __init__(self):
        self._thread_check: bool | None = None

    @classmethod
    def global_config(cls) -> TraversalConfig:
        """Get the global traversal configuration instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = TraversalConfig()
        return cls._instance

    @property
    def thread_check(self) -> bool:
        """
        Whether adapters warn when traversed from a foreign thread.

        Defaults to the DEITER_THREAD_CHECK environment variable, which
        enables the check for "1", "true", "yes" or "on".
        """
        if self._thread_check is None:
            env_check = os.environ.get("DEITER_THREAD_CHECK", "")
            self._thread_check = env_check.strip().lower() in _TRUTHY
        return self._thread_check

    @thread_check.setter
    def thread_check(self, enabled: bool) -> None:
        """Enable or disable the thread check."""
        with self._lock:
            self._thread_check = bool(enabled)

    def reset(self) -> None:
        """Forget explicit settings and fall back to the environment."""
        with self._lock:
            self._thread_check = None


# Global configuration instance
_global_config = TraversalConfig.global_config()


def set_thread_check(enabled: bool) -> None:
    """
    Enable or disable the cross-thread traversal check.

    Only adapters created after the call are affected.

    Args:
        enabled: True to record owner threads and warn on foreign use

    Example:
        >>> from deiter import set_thread_check
        >>> set_thread_check(True)
    """
    _global_config.thread_check = enabled


def get_thread_check() -> bool:
    """
    Get the current cross-thread traversal check setting.

    Returns:
        True if new adapters record their owner thread
    """
    return _global_config.thread_check
