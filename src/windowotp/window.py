import datetime
import time
from typing import NamedTuple, Optional, Tuple, Union

from . import utils
from .exceptions import ValidationError
from .otp import OTP
from .secret import SecretLike


class Granularity(NamedTuple):
    label: str
    millis: int


MONTHLY = Granularity("Monthly", 2_592_000_000)
BIWEEKLY = Granularity("Bi-Weekly", 1_209_600_000)
WEEKLY = Granularity("Weekly", 604_800_000)
DAILY = Granularity("Daily", 86_400_000)
HOURLY = Granularity("Hourly", 3_600_000)
THIRTY_MINUTE = Granularity("30-Minute", 1_800_000)
MINUTE = Granularity("Minute", 60_000)

# Longest window first; matching reports the first hit in this order.
GRANULARITIES: Tuple[Granularity, ...] = (
    MONTHLY,
    BIWEEKLY,
    WEEKLY,
    DAILY,
    HOURLY,
    THIRTY_MINUTE,
    MINUTE,
)

TimeLike = Union[int, datetime.datetime]


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def to_millis(for_time: TimeLike) -> int:
    """
    :param for_time: Unix time in milliseconds, or a datetime
    :returns: Unix time in milliseconds
    """
    if isinstance(for_time, datetime.datetime):
        # timedelta arithmetic keeps whole milliseconds exact
        if for_time.tzinfo is None:
            for_time = for_time.astimezone()
        delta = for_time - datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
        return delta // datetime.timedelta(milliseconds=1)
    if isinstance(for_time, bool) or not isinstance(for_time, int):
        raise ValidationError("time must be integer milliseconds or a datetime")
    return for_time


class WindowOTP(OTP):
    """
    Handler for OTPs that change once per fixed time window.
    """

    def __init__(self, s: SecretLike, granularity: Granularity = MINUTE) -> None:
        """
        :param s: secret as a Secret, a hex string or an integer
        :param granularity: window the counter advances on, one of :data:`GRANULARITIES`
        """
        if granularity not in GRANULARITIES:
            raise ValidationError("unknown granularity {!r}".format(granularity))
        self.granularity = granularity
        self.interval = granularity.millis
        super().__init__(s=s)

    def at(self, for_time: TimeLike) -> str:
        """
        Accepts either Unix milliseconds or a `datetime` object to specify the time.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(now_millis())

    def verify(self, otp: str, for_time: Optional[TimeLike] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        :param otp: the OTP to check against, grouping whitespace allowed
        :param for_time: time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = now_millis()
        code = utils.normalize_code(str(otp))
        return utils.is_otp(code) and utils.strings_equal(code, self.at(for_time))

    def timecode(self, for_time: TimeLike) -> int:
        """
        Number of whole windows elapsed since the Unix epoch.
        """
        millis = to_millis(for_time)
        if millis < 0:
            raise ValidationError("time must not be before the Unix epoch")
        return millis // self.interval

    def valid_until(self, for_time: TimeLike) -> int:
        """
        :returns: Unix milliseconds at which the window containing `for_time` ends
        """
        return (self.timecode(for_time) + 1) * self.interval


def _shortcut(granularity: Granularity):
    def generate(secret: SecretLike, for_time: Optional[TimeLike] = None) -> str:
        if for_time is None:
            for_time = now_millis()
        return WindowOTP(secret, granularity).at(for_time)

    generate.__doc__ = "Generates the {} OTP.".format(granularity.label)
    return generate


monthly_otp = _shortcut(MONTHLY)
biweekly_otp = _shortcut(BIWEEKLY)
weekly_otp = _shortcut(WEEKLY)
daily_otp = _shortcut(DAILY)
hourly_otp = _shortcut(HOURLY)
thirty_minute_otp = _shortcut(THIRTY_MINUTE)
minute_otp = _shortcut(MINUTE)
