import re

# RFC 3986 unreserved characters, safe in a URL path segment without escaping
PATH_SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9\-._~]+")

# "." and ".." are resolved away by clients before the request is sent
DOT_SEGMENTS = {".", ".."}

# Top-level paths served by the application itself
RESERVED_CODES = {"api", "health", "docs", "redoc", "openapi.json"}


class ValidationError(Exception):
    """Input validation error exception"""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def _is_utf8_encodable(value: str) -> bool:
    # Lone surrogates (e.g. JSON "\ud800") decode into str but cannot be encoded
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def validate_long_url(url: str) -> None:
    """
    Validate a long URL before it is stored.

    Only emptiness and UTF-8 encodability are checked. Malformed URLs are
    stored and redirected as-is.

    Raises:
        ValidationError: When the URL is empty, not a string, or not UTF-8 encodable
    """
    if not isinstance(url, str) or not url:
        raise ValidationError(["URL must be a non-empty string"])

    if not _is_utf8_encodable(url):
        raise ValidationError(["URL must be valid UTF-8 text"])


def validate_short_code(code: str, max_length: int = 64) -> None:
    """
    Validate a caller-supplied short code.

    Rules:
    - Non-empty
    - Encodable as UTF-8
    - At most max_length characters
    - Only letters, digits, '-', '.', '_' and '~'
    - Not a dot segment ('.' or '..')
    - Not one of RESERVED_CODES

    Raises:
        ValidationError: When the code does not meet requirements
    """
    if not isinstance(code, str) or not code:
        raise ValidationError(["Short code must be a non-empty string"])

    if not _is_utf8_encodable(code):
        raise ValidationError(["Short code must be valid UTF-8 text"])

    errors = []

    if len(code) > max_length:
        errors.append(f"Short code must be at most {max_length} characters long")

    if not PATH_SEGMENT_PATTERN.fullmatch(code):
        errors.append(
            "Short code may only contain letters, digits, '-', '.', '_' and '~'"
        )
    elif code in DOT_SEGMENTS or code in RESERVED_CODES:
        errors.append(f"'{code}' cannot be used as a short code")

    if errors:
        raise ValidationError(errors)
