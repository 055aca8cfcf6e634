import string

import pytest

from tuxpdf.utils import random_character_string


def test_length_matches_request():
    assert len(random_character_string(32)) == 32


def test_only_alphanumeric_characters():
    result = random_character_string(200)
    allowed = set(string.ascii_letters + string.digits)
    assert set(result) <= allowed


def test_zero_length_is_empty():
    assert random_character_string(0) == ""


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        random_character_string(-1)


def test_successive_calls_differ():
    assert len({random_character_string(32) for _ in range(5)}) == 5