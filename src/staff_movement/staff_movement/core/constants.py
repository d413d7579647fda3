"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ISO_DATE_FORMAT = "%Y-%m-%d"
DISPLAY_EMPTY = "-"

DEFAULT_REFRESH_SECONDS = 60
DEFAULT_HTTP_TIMEOUT_SECONDS = 15
DEFAULT_SYNC_MAX_WORKERS = 4
DEFAULT_SYNC_MAX_PENDING = 64

MOVEMENT_ID_PREFIX = "m"
