"""SHA-1 digest generation for k-Anonymity range queries.

SHA-1 is dictated by the breach corpus API format, it is not used here
for any security property. Only the first HASH_PREFIX_LENGTH characters
of the digest ever leave this process.
"""

from cryptography.exceptions import AlreadyFinalized, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from breachcheck.config import HASH_PREFIX_LENGTH, SHA1_HASH_SIZE
from breachcheck.errors import DigestError


def digest(password: bytes) -> str:
    """Compute the uppercase hex SHA-1 digest of password.

    Args:
        password: Normalized password bytes (non-empty, length checked
            by the caller)

    Returns:
        40-character uppercase hexadecimal string

    Raises:
        DigestError: If the hash backend fails
    """
    try:
        ctx = hashes.Hash(hashes.SHA1())
        ctx.update(password)
        raw = ctx.finalize()
    except (UnsupportedAlgorithm, AlreadyFinalized, TypeError, ValueError) as e:
        raise DigestError(f"Received error from hash backend: {e}")

    if len(raw) != SHA1_HASH_SIZE:
        raise DigestError(f"Unexpected digest size {len(raw)}")

    return "".join(f"{byte:02X}" for byte in raw)


def split_digest(sha1_digest: str, prefix_length: int = HASH_PREFIX_LENGTH) -> tuple[str, str]:
    """Split a digest into (prefix, suffix).

    The prefix is sent to the breach corpus, the suffix is matched
    locally against the response.
    """
    return sha1_digest[:prefix_length], sha1_digest[prefix_length:]
