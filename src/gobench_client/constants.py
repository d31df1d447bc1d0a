"""
Application-wide constants for the gobench client.

Defaults for the API gateway, polling and logging live here so that the
configuration models and the runtime share one source of truth.
"""

# File size constants (bytes)
BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024

# API gateway
DEFAULT_API_URL = "http://localhost:6891"
APPLICATIONS_ENDPOINT = "/api/applications"
# No client-side timeout unless configured; a hung call stays pending.
DEFAULT_TIMEOUT_SECONDS = None
MAX_TIMEOUT_SECONDS = 300
DEFAULT_MAX_RETRIES = 0
MAX_RETRIES_LIMIT = 10
DEFAULT_BACKOFF_FACTOR = 0.3

# Polling
DEFAULT_POLL_INTERVAL_SECONDS = 10.0
MIN_POLL_INTERVAL_SECONDS = 0.01
MAX_POLL_INTERVAL_SECONDS = 3600.0

# HTTP status codes
HTTP_STATUS_NOT_FOUND = 404

# Routes
ROOT_ROUTE = "/"
APPLICATION_ROUTE = "/application/{id}"
CREATE_APPLICATION_ROUTE = "/application-create"
CLONE_QUERY_PARAM = "n"

# Logging and file constants
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * BYTES_PER_MB
MIN_LOG_FILE_SIZE_BYTES = BYTES_PER_KB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_SERVICE_NAME = "gobench-client"

# Configuration
CONFIG_DIR_NAME = "gobench-client"
CONFIG_FILE_NAME = "config.toml"
ENV_PREFIX = "GOBENCH_"
