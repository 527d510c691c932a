import re
from hmac import compare_digest

from .exceptions import ValidationError

_WHITESPACE = re.compile(r"\s+")
_OTP = re.compile(r"[0-9]{6}")


def is_otp(code: str) -> bool:
    return isinstance(code, str) and _OTP.fullmatch(code) is not None


def format_otp(otp: str) -> str:
    """
    Splits a 6-digit OTP into two groups of three for display,
    e.g. "123456" -> "123 456".
    """
    if not is_otp(otp):
        raise ValidationError("OTP must be exactly 6 ASCII digits")
    return "{} {}".format(otp[:3], otp[3:])


def normalize_code(code: str) -> str:
    """
    Strips grouping whitespace from a user-entered code.
    """
    return _WHITESPACE.sub("", code)


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length. The result is always the same as ``s1 == s2``.
    """
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
