class OTPError(Exception):
    """
    Base class for errors raised by windowotp.
    """


class ValidationError(OTPError, ValueError):
    """
    A secret, counter or code could not be rendered in the expected format.
    """


class PlatformError(OTPError, RuntimeError):
    """
    The HMAC-SHA256 primitive is not available from the running interpreter.
    """
