"""Configuration for the shelly relay scheduler.

Device address comes from the environment (or .env), everything else lives here.
"""

import os

from errors import MissingConfigurationError

APP_NAME = "shelly"

# ---------------------------------------------------------------------------
# Device address
# ---------------------------------------------------------------------------
SHELLY_IP_ENV = "SHELLY_IP"    # Shelly Gen2 relay, e.g. 192.168.2.110
RPC_PATH = "rpc"

# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
HTTP_CONNECT_TIMEOUT = 5     # seconds
HTTP_READ_TIMEOUT = 10       # seconds
HTTP_TIMEOUT = (HTTP_CONNECT_TIMEOUT, HTTP_READ_TIMEOUT)

# ---------------------------------------------------------------------------
# Scheduling
# ---------------------------------------------------------------------------
# Each relay in the list is shifted by its position * this many seconds so the
# device never gets two schedules firing in the same second.
RELAY_OFFSET_SECONDS = 2

# Timespec weekday names, indexed Sunday-first like the device expects
WEEKDAYS = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL_ENV = "SHELLY_LOG_LEVEL"   # DEBUG also logs argument parsing token by token
DEFAULT_LOG_LEVEL = "INFO"


def get_log_level():
    return os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def get_shelly_ip():
    """Return the device address from SHELLY_IP. Raises if it is not set."""
    ip = os.getenv(SHELLY_IP_ENV)
    if not ip:
        raise MissingConfigurationError(f"Environment variable {SHELLY_IP_ENV} not set")
    return ip
