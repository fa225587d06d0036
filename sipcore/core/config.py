"""sipcore configuration constants.

OPERATIONAL settings are read from environment variables once, at import.
"""

import os

# =============================================================================
# HEADER NAMES
# =============================================================================

ROUTE_HEADER: str = "Route"
RECORD_ROUTE_HEADER: str = "Record-Route"

# =============================================================================
# OPERATIONAL (env vars)
# =============================================================================

# Root log level applied by configure_logging()
LOG_LEVEL: str = os.getenv("SIPCORE_LOG_LEVEL", "WARNING").upper()

# Optional log file; empty means console only
LOG_FILE: str = os.getenv("SIPCORE_LOG_FILE", "")

# Header name used by the CLI when --header-name is not given
DEFAULT_HEADER: str = os.getenv("SIPCORE_DEFAULT_HEADER", ROUTE_HEADER)
