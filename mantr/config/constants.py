"""
Static constants configuration.

Values that are fixed by the Mantr API contract and do not change with the
environment.
"""

# =============================================================================
# API CONTRACT
# =============================================================================

# Credentials must start with this prefix
API_KEY_PREFIX = "vak_"

# Production endpoint
DEFAULT_BASE_URL = "https://api.mantr.net"

# Walk endpoint path
WALK_PATH = "/v1/walk"

# Client identification
CLIENT_VERSION = "1.0.0"
USER_AGENT = f"mantr-python/{CLIENT_VERSION}"

# =============================================================================
# OPERATIONAL CONSTANTS
# =============================================================================

# Default Timeouts (seconds)
DEFAULT_HTTP_TIMEOUT = 30

# Walk defaults applied when the request leaves them unset (zero)
DEFAULT_WALK_DEPTH = 3
DEFAULT_WALK_LIMIT = 100

# Calls slower than this are logged as warnings (milliseconds)
SLOW_REQUEST_THRESHOLD_MS = 5000
