"""Shared utilities for the car wash client"""

from .storage import TokenStorage, MemoryTokenStorage
from .debug_console import (
    DebugCapturingConsole,
    configure_logging,
    create_debug_console,
    setup_debug_logger,
)

__all__ = [
    "TokenStorage",
    "MemoryTokenStorage",
    "DebugCapturingConsole",
    "configure_logging",
    "create_debug_console",
    "setup_debug_logger",
]
