from pathlib import Path
from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Backend API configuration
API_BASE_URL = config.get_url("CARWASH_API_URL", "http://localhost:5000")
# The API version segment is fixed by the backend routes
API_VERSION = "v1"
REFRESH_PATH = "/auth/refresh"

# Timeout configuration
# Connection timeout: Time to establish TCP connection
CONNECT_TIMEOUT = config.get("CARWASH_CONNECT_TIMEOUT", 10.0)
# Request timeout: Upper bound for a whole request, never retried
REQUEST_TIMEOUT = config.get("CARWASH_REQUEST_TIMEOUT", 30.0)

# Token storage
TOKEN_FILE = config.get("CARWASH_TOKEN_FILE", str(Path.home() / ".carwash" / "tokens.json"))

# Where an expired session is sent to sign in again
LOGIN_PATH = config.get("CARWASH_LOGIN_PATH", "/login")

# Logging
LOG_LEVEL = config.get("CARWASH_LOG_LEVEL", "info")
DEBUG_LOG_FILE = config.get("CARWASH_DEBUG_LOG_FILE", "carwash_debug.log")

# Receipt printer paper width in mm (58 or 80)
RECEIPT_PRINTER_WIDTH = config.get("CARWASH_PRINTER_WIDTH", 80)
