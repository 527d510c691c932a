import hashlib
import hmac
from typing import Union

from .exceptions import PlatformError


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError("expected str or bytes, got {}".format(type(value).__name__))


def hmac_sha256(key: Union[str, bytes], message: Union[str, bytes]) -> str:
    """
    Computes HMAC-SHA256 over the message.

    Text arguments are encoded as UTF-8. The key is handed to :mod:`hmac`
    untouched, which applies the standard padding/pre-hashing rules.

    :param key: HMAC key
    :param message: message to authenticate
    :returns: the 32-byte tag as 64 lowercase hex characters
    """
    try:
        hasher = hmac.new(_to_bytes(key), _to_bytes(message), hashlib.sha256)
    except (AttributeError, ValueError) as e:
        raise PlatformError("HMAC-SHA256 is not available on this platform") from e
    return hasher.hexdigest()
