"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Network and logging settings can be overridden via environment variables.
"""

import os

# Breach corpus endpoint (k-Anonymity range API)
BREACH_API_URL = os.environ.get("BREACH_API_URL", "https://api.pwnedpasswords.com/range/")
USER_AGENT = os.environ.get("BREACH_USER_AGENT", "PasswordBreachCheck/1.0")
REQUEST_TIMEOUT = float(os.environ.get("BREACH_REQUEST_TIMEOUT", "5"))  # seconds

# Retry policy
DEFAULT_MAX_RETRIES = int(os.environ.get("BREACH_MAX_RETRIES", "3"))
RETRY_WAIT_SECONDS = float(os.environ.get("BREACH_RETRY_WAIT", "2"))

# TLS peer verification toward the breach corpus
# SECURITY: Only disable for debugging against a local mirror.
VERIFY_TLS = os.environ.get("BREACH_VERIFY_TLS", "true").lower() == "true"

# Password and digest limits
MAX_PASSWORD_LENGTH = 512  # bytes, after UTF-8 normalization
SHA1_HASH_SIZE = 20
HASH_PREFIX_LENGTH = 5

# Returned when a check cannot be completed.
# Arbitrary large value: callers must treat it as "unknown", not as a count.
UNKNOWN_RESULT = 1_000_000

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
SIEM_LOG_FILE = os.path.join(LOG_DIR, "breach_events.jsonl")
SIEM_LOGGING_ENABLED = os.environ.get("SIEM_LOGGING_ENABLED", "false").lower() == "true"
SIEM_LOG_MAX_BYTES = int(os.environ.get("SIEM_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
SIEM_LOG_BACKUP_COUNT = int(os.environ.get("SIEM_LOG_BACKUP_COUNT", 5))

# HTTPS enforcement for the HTTP adapter
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"
