import os

# Client-visible page cap; the server is always asked for one row more.
MAX_LIMIT = 25
DEFAULT_TIMEOUT_SECONDS = 1.0

SEARCH_SERVICE_URL = os.getenv("SEARCH_SERVICE_URL")
SEARCH_ACCESS_TOKEN = os.getenv("SEARCH_ACCESS_TOKEN", "")
SEARCH_TIMEOUT_SECONDS = float(os.getenv("SEARCH_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))

LOG_LEVEL = os.getenv("SEARCH_LOG_LEVEL", "INFO")
LOG_JSON = os.getenv("SEARCH_LOG_JSON", "false").lower() in ("1", "true", "yes")
