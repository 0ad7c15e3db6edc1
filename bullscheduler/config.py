import os

# Credentials the host hands to the node
BULLSCHEDULER_URL = os.getenv("BULLSCHEDULER_URL", "")
BULLSCHEDULER_API_KEY = os.getenv("BULLSCHEDULER_API_KEY", "")

# Timeout of the HTTP client owned by the host, the node never sets its own
HTTP_TIMEOUT = float(os.getenv("BULLSCHEDULER_TIMEOUT", "30"))

API_KEY = os.getenv("API_KEY", "dev-key")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
