from .candidates import Candidate as Candidate
from .candidates import CandidateSet as CandidateSet
from .candidates import describe_match as describe_match
from .candidates import find_match as find_match
from .candidates import generate_candidates as generate_candidates
from .digest import hmac_sha256 as hmac_sha256
from .exceptions import OTPError as OTPError
from .exceptions import PlatformError as PlatformError
from .exceptions import ValidationError as ValidationError
from .otp import OTP as OTP
from .otp import generate_otp as generate_otp
from .refresh import Refresher as Refresher
from .secret import Secret as Secret
from .secret import random_secret as random_secret
from .utils import format_otp as format_otp
from .utils import normalize_code as normalize_code
from .window import BIWEEKLY as BIWEEKLY
from .window import DAILY as DAILY
from .window import GRANULARITIES as GRANULARITIES
from .window import HOURLY as HOURLY
from .window import MINUTE as MINUTE
from .window import MONTHLY as MONTHLY
from .window import THIRTY_MINUTE as THIRTY_MINUTE
from .window import WEEKLY as WEEKLY
from .window import Granularity as Granularity
from .window import WindowOTP as WindowOTP
from .window import biweekly_otp as biweekly_otp
from .window import daily_otp as daily_otp
from .window import hourly_otp as hourly_otp
from .window import minute_otp as minute_otp
from .window import monthly_otp as monthly_otp
from .window import thirty_minute_otp as thirty_minute_otp
from .window import weekly_otp as weekly_otp
