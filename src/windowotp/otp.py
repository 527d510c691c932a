from .digest import hmac_sha256
from .exceptions import ValidationError
from .secret import HEX_WIDTH, SecretLike, as_secret

DIGITS = 6


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(self, s: SecretLike) -> None:
        """
        :param s: secret as a :class:`~windowotp.secret.Secret`, a hex string or an integer
        """
        self.secret = as_secret(s)
        self.digits = DIGITS

    def generate_otp(self, input: int) -> str:
        """
        :param input: the counter value to use as the OTP input.
            Usually the number of whole windows elapsed since the Unix epoch.
        """
        # Counter and key are both fed to the HMAC as hex text, not as the
        # 8-byte binary counter of RFC 4226.
        hmac_hash = hmac_sha256(self.hex_secret(), self.int_to_hexstring(input))
        offset = int(hmac_hash[-1], 16)
        code = int(hmac_hash[offset * 2 : offset * 2 + 8], 16) & 0x7FFFFFFF
        return str(code % 10**self.digits).zfill(self.digits)

    def hex_secret(self) -> str:
        return self.secret.hex

    @staticmethod
    def int_to_hexstring(i: int, width: int = HEX_WIDTH) -> str:
        """
        Renders the counter as fixed-width lowercase hex, which is
        the message fed to the HMAC along with the secret
        """
        if isinstance(i, bool) or not isinstance(i, int):
            raise ValidationError("input must be an integer")
        if i < 0:
            raise ValidationError("input must be positive integer")
        if i >= 16**width:
            raise ValidationError("input must fit in {} hex digits".format(width))
        return format(i, "0{}x".format(width))


def generate_otp(input: int, secret: SecretLike) -> str:
    """
    Generates the OTP for a single counter value.

    :param input: counter value
    :param secret: secret as a Secret, a hex string or an integer
    :returns: 6-digit OTP
    """
    return OTP(secret).generate_otp(input)
