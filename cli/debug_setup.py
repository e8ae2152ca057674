"""Debug console setup for CLI"""

from rich.console import Console

import settings
from utils.debug_console import configure_logging, create_debug_console, setup_debug_logger


def setup_debug_console(debug: bool) -> Console:
    """
    Configure logging and return the console the CLI prints to

    Args:
        debug: Whether debug mode is enabled

    Returns:
        Console instance (either regular or debug-enabled)
    """
    log_file = configure_logging(settings.LOG_LEVEL, debug=debug, log_file=settings.DEBUG_LOG_FILE)
    if not log_file:
        return Console()

    debug_logger = setup_debug_logger(log_file)
    debug_logger.debug("[CLI] ===== CLI SESSION STARTED =====")
    debug_logger.debug(f"[CLI] API base URL: {settings.API_BASE_URL}/api/{settings.API_VERSION}")
    return create_debug_console(debug_enabled=True, debug_logger=debug_logger)
