"""Password Breach Check package.

Checks passwords against a public breach corpus using k-Anonymity:
- config: Centralized configuration constants
- normalize: Canonical UTF-8 conversion
- hashing: SHA-1 digest and prefix/suffix split
- transport: HTTP transport and process-wide lifecycle
- lookup: Range query client with retries
- checker: Per-password breach checker
- validation: Validation service with secondary validators
- policy: Offline password policy validator
- siem: Diagnostics and security event logging
"""

# Configuration constants
from breachcheck.config import (
    BREACH_API_URL,
    DEFAULT_MAX_RETRIES,
    RETRY_WAIT_SECONDS,
    MAX_PASSWORD_LENGTH,
    HASH_PREFIX_LENGTH,
    UNKNOWN_RESULT,
)

# Errors
from breachcheck.errors import (
    BreachCheckError,
    NormalizationError,
    DigestError,
    BreachLookupError,
    TransportError,
    RetriesExhaustedError,
    ParseError,
)

# Engine
from breachcheck.normalize import convert_to_canonical_text
from breachcheck.hashing import digest, split_digest
from breachcheck.transport import (
    Transport,
    UrllibTransport,
    init_environment,
    deinit_environment,
    is_initialized,
)
from breachcheck.lookup import BreachLookupClient
from breachcheck.checker import (
    BreachChecker,
    CheckerState,
    check_password,
    parse_breach_count,
    is_acceptable,
    strength_from_count,
)

# Validation
from breachcheck.validation import (
    PasswordValidator,
    BreachPasswordValidation,
    password_breach_check,
)
from breachcheck.policy import PolicyValidator, check_password_strength

# Logging
from breachcheck.siem import report, log_siem_event, get_siem_events

__all__ = [
    # Config
    "BREACH_API_URL",
    "DEFAULT_MAX_RETRIES",
    "RETRY_WAIT_SECONDS",
    "MAX_PASSWORD_LENGTH",
    "HASH_PREFIX_LENGTH",
    "UNKNOWN_RESULT",
    # Errors
    "BreachCheckError",
    "NormalizationError",
    "DigestError",
    "BreachLookupError",
    "TransportError",
    "RetriesExhaustedError",
    "ParseError",
    # Engine
    "convert_to_canonical_text",
    "digest",
    "split_digest",
    "Transport",
    "UrllibTransport",
    "init_environment",
    "deinit_environment",
    "is_initialized",
    "BreachLookupClient",
    "BreachChecker",
    "CheckerState",
    "check_password",
    "parse_breach_count",
    "is_acceptable",
    "strength_from_count",
    # Validation
    "PasswordValidator",
    "BreachPasswordValidation",
    "password_breach_check",
    "PolicyValidator",
    "check_password_strength",
    # Logging
    "report",
    "log_siem_event",
    "get_siem_events",
]
