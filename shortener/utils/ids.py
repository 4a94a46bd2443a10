"""
Short code generation.

Generated codes are drawn uniformly from a 62-character alphabet. The draw is
not cryptographic: short codes are public identifiers, not secrets.
"""
import random
import string

# Base62 character set: [A-Za-z0-9]
SHORT_CODE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits

SHORT_CODE_LENGTH = 6


def generate_short_code(length: int = SHORT_CODE_LENGTH) -> str:
    """
    Generate a random short code.

    All characters are sampled in a single call, each one independently and
    uniformly from SHORT_CODE_ALPHABET.

    Args:
        length: Length of the output string (default: 6 characters)

    Returns:
        Random code using [A-Za-z0-9] characters

    Examples:
        >>> generate_short_code()
        'aB7xkT'

    Notes:
        - 62^6 is about 5.7 * 10^10 possible codes
        - Uniqueness is not guaranteed here; the store checks for collisions
    """
    if length < 1:
        raise ValueError("length must be at least 1")
    return "".join(random.choices(SHORT_CODE_ALPHABET, k=length))
