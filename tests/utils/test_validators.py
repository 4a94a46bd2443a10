import pytest

from shortener.utils.validators import (
    ValidationError,
    validate_long_url,
    validate_short_code,
)


class TestLongUrl:
    """Long URL validation tests"""

    def test_valid_url(self):
        validate_long_url("https://example.com")

    def test_malformed_url_accepted(self):
        """Only emptiness is checked"""
        validate_long_url("example dot com")

    def test_empty_url(self):
        with pytest.raises(ValidationError) as exc:
            validate_long_url("")
        assert "non-empty" in str(exc.value)

    def test_non_string_url(self):
        with pytest.raises(ValidationError):
            validate_long_url(None)

    def test_lone_surrogate_url(self):
        with pytest.raises(ValidationError) as exc:
            validate_long_url("https://x.com/\ud800")
        assert "UTF-8" in str(exc.value)


class TestShortCode:
    """Requested short code validation tests"""

    def test_valid_code(self):
        validate_short_code("my-link_1.0~x")

    def test_empty_code(self):
        with pytest.raises(ValidationError) as exc:
            validate_short_code("")
        assert "non-empty" in str(exc.value)

    def test_unsafe_characters(self):
        with pytest.raises(ValidationError) as exc:
            validate_short_code("a/b")
        assert "may only contain" in str(exc.value)

    def test_trailing_newline(self):
        with pytest.raises(ValidationError):
            validate_short_code("abc\n")

    def test_lone_surrogate_code(self):
        with pytest.raises(ValidationError) as exc:
            validate_short_code("ab\udc00")
        assert "UTF-8" in str(exc.value)

    def test_dot_segment(self):
        with pytest.raises(ValidationError) as exc:
            validate_short_code("..")
        assert "cannot be used" in str(exc.value)

    def test_reserved_code(self):
        with pytest.raises(ValidationError):
            validate_short_code("api")

    def test_too_long(self):
        with pytest.raises(ValidationError) as exc:
            validate_short_code("a" * 11, max_length=10)
        assert "at most 10 characters" in str(exc.value)

    def test_multiple_errors_collected(self):
        with pytest.raises(ValidationError) as exc:
            validate_short_code("a b" * 10, max_length=5)
        assert len(exc.value.errors) == 2
