import pytest

from docvault.models.inputs import is_valid_mobile, is_valid_otp, normalize_mobile, normalize_otp


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        (None, ""),
        ("555-123-4567", "5551234567"),
        ("+91 98765 43210 99", "9198765432"),
        ("abc", ""),
        ("１２３", ""),  # full-width digits are not ASCII digits
    ],
)
def test_normalize_mobile(raw, expected):
    assert normalize_mobile(raw) == expected


@pytest.mark.parametrize("raw", ["", "12ab34cd56ef78gh90ij", "0" * 25, "(555) 123-4567 ext. 89", "🙂 42"])
def test_normalize_mobile_is_bounded_digits_and_idempotent(raw):
    once = normalize_mobile(raw)
    assert len(once) <= 10
    assert once == "" or once.isdigit()
    assert normalize_mobile(once) == once


def test_normalize_otp_truncates_to_six_digits():
    assert normalize_otp("12 34 56 78") == "123456"
    assert normalize_otp(normalize_otp("1a2b3")) == "123"


def test_validity_requires_exact_length():
    assert is_valid_mobile("5551234567")
    assert not is_valid_mobile("555123456")
    assert not is_valid_mobile("55512345678")
    assert not is_valid_mobile("555123456a")
    assert not is_valid_mobile(None)
    assert is_valid_otp("000111")
    assert not is_valid_otp("00011")
    assert not is_valid_otp(" 000111")
