"""Password normalization.

Converts incoming passwords to canonical UTF-8 bytes before hashing so the
same password typed through different front ends produces the same digest.
"""

from typing import Union

from breachcheck.config import MAX_PASSWORD_LENGTH
from breachcheck.errors import NormalizationError


def convert_to_canonical_text(
    raw: Union[str, bytes, bytearray],
    max_len: int = MAX_PASSWORD_LENGTH,
    encoding: str = "utf-8",
) -> bytes:
    """Convert a password to UTF-8 bytes.

    Args:
        raw: Password as text, or as bytes in the given encoding
        max_len: Maximum supported length in bytes after conversion
        encoding: Source encoding when raw is bytes

    Returns:
        UTF-8 encoded password

    Raises:
        NormalizationError: If raw is empty, too long, of an unsupported
            type, or cannot be converted
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            text = bytes(raw).decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise NormalizationError(f"Failed to convert password from '{encoding}': {e}")
    elif isinstance(raw, str):
        text = raw
    else:
        raise NormalizationError(f"Unsupported password type: {type(raw).__name__}")

    try:
        converted = text.encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates cannot be represented in UTF-8
        raise NormalizationError(f"Failed to convert password to 'utf8' format: {e}")

    if not converted:
        raise NormalizationError("Password is empty.")

    if len(converted) > max_len:
        raise NormalizationError(
            f"Password exceeds maximum supported length of {max_len} bytes."
        )

    return converted
