import string

import pytest

from shortener.utils.ids import SHORT_CODE_ALPHABET, SHORT_CODE_LENGTH, generate_short_code


def test_alphabet_is_base62():
    assert len(SHORT_CODE_ALPHABET) == 62
    assert set(SHORT_CODE_ALPHABET) == set(string.ascii_letters + string.digits)


def test_default_length():
    assert SHORT_CODE_LENGTH == 6
    assert len(generate_short_code()) == 6


def test_custom_length():
    assert len(generate_short_code(10)) == 10


def test_only_alphabet_characters():
    for _ in range(500):
        assert set(generate_short_code()) <= set(SHORT_CODE_ALPHABET)


def test_every_character_reachable():
    """Each alphabet character shows up across many draws."""
    seen = set()
    for _ in range(2000):
        seen.update(generate_short_code())
    assert seen == set(SHORT_CODE_ALPHABET)


def test_invalid_length():
    with pytest.raises(ValueError):
        generate_short_code(0)
