"""
Random opaque key generation.

Used for license keys and account tokens. Keys carry no structure;
uniqueness, where required, is enforced against the store by callers.
"""
import secrets
import string

from core.domain.exceptions import InvalidConfigurationError

KEY_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "."

# Column width of the key and token fields
MAX_KEY_LENGTH = 255


def generate_key(length: int) -> str:
    """
    Generate a random key drawn uniformly from KEY_ALPHABET.

    Args:
        length: Number of characters

    Returns:
        Generated key string

    Raises:
        InvalidConfigurationError: If length is not between 1 and MAX_KEY_LENGTH
    """
    validate_key_length(length)
    return "".join(secrets.choice(KEY_ALPHABET) for _ in range(length))


def validate_key_length(length: int) -> None:
    """Raise InvalidConfigurationError unless 1 <= length <= MAX_KEY_LENGTH."""
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidConfigurationError(f"Key length must be a positive integer, got {length!r}")
    if length > MAX_KEY_LENGTH:
        raise InvalidConfigurationError(
            f"Key length must be at most {MAX_KEY_LENGTH}, got {length}"
        )


def keyspace_size(length: int) -> int:
    """Number of distinct keys of the given length."""
    validate_key_length(length)
    return len(KEY_ALPHABET) ** length
