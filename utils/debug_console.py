"""Logging setup and a Rich console that mirrors its output into the debug log.

With --debug every log record goes to the debug file, and everything the CLI
prints is copied there as plain text, so one file holds the whole session.
"""

import io
import logging
import os
import re
from typing import Optional
from rich.console import Console as RichConsole
from rich.logging import RichHandler

ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
CONSOLE_LOGGER_NAME = "debug_console"


class DebugCapturingConsole(RichConsole):
    """Rich Console that also writes a plain-text copy of its output to a logger"""

    def __init__(self, debug_logger: Optional[logging.Logger] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.debug_logger = debug_logger
        self._log_prefix = "[CONSOLE] "

    def print(self, *objects, **kwargs):
        super().print(*objects, **kwargs)

        if self.debug_logger and self.debug_logger.isEnabledFor(logging.DEBUG):
            plain_text = self._render_to_plain_text(*objects, **kwargs)
            if plain_text.strip():
                self.debug_logger.debug(f"{self._log_prefix}{plain_text}")

    def _render_to_plain_text(self, *objects, **kwargs) -> str:
        string_buffer = io.StringIO()
        temp_console = RichConsole(
            file=string_buffer,
            force_terminal=False,
            width=self.width,
            legacy_windows=False
        )
        temp_console.print(*objects, **kwargs)
        return ANSI_ESCAPE.sub('', string_buffer.getvalue()).rstrip()


def create_debug_console(debug_enabled: bool = False,
                         debug_logger: Optional[logging.Logger] = None) -> RichConsole:
    """DebugCapturingConsole if debug is enabled, regular Console otherwise"""
    if debug_enabled and debug_logger:
        return DebugCapturingConsole(debug_logger=debug_logger)
    return RichConsole()


def setup_debug_logger(log_file: str) -> logging.Logger:
    """Dedicated logger receiving the console copy, appended to ``log_file``"""
    logger = logging.getLogger(CONSOLE_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))
    logger.addHandler(file_handler)

    # Prevent propagation to avoid duplicate logs
    logger.propagate = False
    return logger


def configure_logging(level: str = "info", debug: bool = False, log_file: Optional[str] = None) -> Optional[str]:
    """Configure the root logger for the CLI

    Warnings and errors go to stderr through Rich; with ``debug`` everything
    down to DEBUG is also appended to ``log_file``.

    Returns:
        Absolute path of the debug log file, or None without debug
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = RichHandler(
        console=RichConsole(stderr=True),
        show_path=False,
        rich_tracebacks=debug,
    )
    console_handler.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)

    # httpx logs every request at INFO; keep that out of normal output
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)

    if not debug:
        root_logger.setLevel(console_handler.level)
        return None

    root_logger.setLevel(logging.DEBUG)
    log_path = os.path.abspath(log_file or "carwash_debug.log")
    file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(file_handler)
    logging.getLogger(__name__).info(f"Debug logging enabled - appending to {log_path}")
    return log_path
