"""Normalization and validation of the numeric login inputs."""

import re

MOBILE_NUMBER_LENGTH = 10
OTP_LENGTH = 6

_NON_DIGITS = re.compile(r"[^0-9]")


def normalize_digits(value: str | None, max_length: int) -> str:
    """Strip every non-digit character and truncate to max_length."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)[:max_length]


def normalize_mobile(value: str | None) -> str:
    return normalize_digits(value, MOBILE_NUMBER_LENGTH)


def normalize_otp(value: str | None) -> str:
    return normalize_digits(value, OTP_LENGTH)


def is_valid_mobile(value: str | None) -> bool:
    return bool(value) and re.fullmatch(rf"[0-9]{{{MOBILE_NUMBER_LENGTH}}}", value) is not None


def is_valid_otp(value: str | None) -> bool:
    return bool(value) and re.fullmatch(rf"[0-9]{{{OTP_LENGTH}}}", value) is not None
