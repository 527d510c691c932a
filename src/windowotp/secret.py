import re
import string
from typing import Union

from .compat import random
from .exceptions import ValidationError

HEX_WIDTH = 16
MAX_VALUE = 16**HEX_WIDTH - 1

_WHITESPACE = re.compile(r"\s+")


class Secret(object):
    """
    Shared secret, held as its fixed-width lowercase hex rendering.

    Build instances with :meth:`from_hex` or :meth:`from_int` so that bad
    input is rejected here rather than deep inside the HMAC derivation.
    """

    __slots__ = ("_hex",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError("secret must be an integer")
        if value < 0 or value > MAX_VALUE:
            raise ValidationError("secret must fit in {} hex digits".format(HEX_WIDTH))
        self._hex = format(value, "0{}x".format(HEX_WIDTH))

    @classmethod
    def from_hex(cls, s: str) -> "Secret":
        """
        :param s: up to 16 hex digits; grouping whitespace is ignored
        :returns: Secret
        """
        if not isinstance(s, str):
            raise ValidationError("secret must be a string of hex digits")
        digits = _WHITESPACE.sub("", s)
        if not digits:
            raise ValidationError("secret is empty")
        if any(c not in string.hexdigits for c in digits):
            raise ValidationError("secret is not a hex value")
        if len(digits) > HEX_WIDTH:
            raise ValidationError("secret must fit in {} hex digits".format(HEX_WIDTH))
        return cls(int(digits, 16))

    @classmethod
    def from_int(cls, value: int) -> "Secret":
        return cls(value)

    @property
    def hex(self) -> str:
        return self._hex

    def __int__(self) -> int:
        return int(self._hex, 16)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return self._hex == other._hex

    def __hash__(self) -> int:
        return hash(self._hex)

    def __repr__(self) -> str:
        # never echo the secret itself
        return "Secret(<hidden>)"


SecretLike = Union[Secret, str, int]


def as_secret(s: SecretLike) -> Secret:
    """
    Coerces a caller-supplied secret into a :class:`Secret`.

    Strings are parsed as hex and integers are taken as the numeric value.
    """
    if isinstance(s, Secret):
        return s
    if isinstance(s, str):
        return Secret.from_hex(s)
    return Secret.from_int(s)


def random_secret(length: int = HEX_WIDTH) -> str:
    if not 0 < length <= HEX_WIDTH:
        raise ValueError("secret length must be between 1 and {} hex digits".format(HEX_WIDTH))
    return "".join(random.choice("0123456789abcdef") for _ in range(length))
