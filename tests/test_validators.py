# /tests/test_validators.py

import pytest

from attendance_app.common.validators import parse_target_days, require_non_empty


@pytest.mark.parametrize("raw, expected", [
    (None, None),
    ("", None),
    ("   ", None),
    ("10", 10),
    (" 7 ", 7),
    (3, 3),
])
def test_parse_target_days_accepts_blank_and_positive_numbers(raw, expected):
    assert parse_target_days(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "4.5", "0", "-2", 0, True])
def test_parse_target_days_rejects_non_numbers_and_non_positive(raw):
    with pytest.raises(ValueError):
        parse_target_days(raw)


def test_require_non_empty_trims():
    assert require_non_empty("  Algebra  ", "Class name") == "Algebra"


@pytest.mark.parametrize("raw", [None, "", "   \t"])
def test_require_non_empty_rejects_blank(raw):
    with pytest.raises(ValueError, match="Class name must not be empty"):
        require_non_empty(raw, "Class name")
