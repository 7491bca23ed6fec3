"""
Constants for the Cerberius client library.
"""

# HTTP Headers
HEADER_API_KEY = "X-API-Key"
HEADER_TIMESTAMP = "X-Timestamp"
HEADER_SIGNATURE = "X-Signature"

DEFAULT_BASE_URL = "https://service.cerberius.com/api"

# Endpoints
EMAIL_LOOKUP_PATH = "/email-lookup"
IP_LOOKUP_PATH = "/ip-lookup"
PROMPT_CHECK_PATH = "/prompt-check"

# Default configuration values
DEFAULT_CONFIG = {
    'base_url': DEFAULT_BASE_URL,
    'timeout': 30,              # HTTP timeout in seconds
}

# Environment variables read by CerberiusClient.from_env()
ENV_API_KEY = "CERBERIUS_API_KEY"
ENV_API_SECRET = "CERBERIUS_API_SECRET"
ENV_BASE_URL = "CERBERIUS_BASE_URL"
