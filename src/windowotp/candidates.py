from typing import Iterator, List, NamedTuple, Optional, Tuple

from . import utils
from .secret import SecretLike, as_secret
from .window import GRANULARITIES, Granularity, TimeLike, WindowOTP, now_millis, to_millis

NO_MATCH = "Code does not match any code"


class Candidate(NamedTuple):
    granularity: Granularity
    otp: str
    counter: int
    valid_until: int

    @property
    def label(self) -> str:
        return self.granularity.label

    def formatted(self) -> str:
        return utils.format_otp(self.otp)


class CandidateSet(object):
    """
    The codes of every window for one instant, longest window first.
    """

    def __init__(self, for_time: int, candidates: List[Candidate]) -> None:
        self.for_time = for_time
        self._candidates = tuple(candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self._candidates[index]

    def __repr__(self) -> str:
        return "CandidateSet(for_time={}, labels={})".format(self.for_time, [c.label for c in self])

    def find(self, code: str) -> Optional[Candidate]:
        """
        Returns the first candidate whose OTP equals `code`, or None.

        :param code: user-entered code; grouping whitespace is ignored
        """
        code = utils.normalize_code(str(code))
        if not utils.is_otp(code):
            return None
        for candidate in self._candidates:
            if utils.strings_equal(code, candidate.otp):
                return candidate
        return None

    def formatted(self) -> List[Tuple[str, str]]:
        """
        :returns: (label, "123 456") pairs in window order
        """
        return [(c.label, c.formatted()) for c in self._candidates]


def generate_candidates(secret: SecretLike, for_time: Optional[TimeLike] = None) -> CandidateSet:
    """
    Computes the OTP of every window for a single instant.

    The clock is read once, so all seven codes come from the same moment even
    if a window boundary passes during the computation.

    :param secret: secret as a Secret, a hex string or an integer
    :param for_time: Unix milliseconds or a datetime (defaults to now)
    :returns: CandidateSet
    """
    secret = as_secret(secret)
    millis = now_millis() if for_time is None else to_millis(for_time)
    candidates = []
    for granularity in GRANULARITIES:
        handler = WindowOTP(secret, granularity)
        counter = handler.timecode(millis)
        candidates.append(
            Candidate(
                granularity=granularity,
                otp=handler.generate_otp(counter),
                counter=counter,
                valid_until=handler.valid_until(millis),
            )
        )
    return CandidateSet(millis, candidates)


def find_match(secret: SecretLike, code: str, for_time: Optional[TimeLike] = None) -> Optional[str]:
    """
    Checks a user-entered code against every window valid at `for_time`.

    :param secret: secret as a Secret, a hex string or an integer
    :param code: user-entered code, grouping whitespace allowed
    :param for_time: Unix milliseconds or a datetime (defaults to now)
    :returns: label of the first matching window, or None
    """
    match = generate_candidates(secret, for_time).find(code)
    return match.label if match is not None else None


def describe_match(label: Optional[str]) -> str:
    if label is None:
        return NO_MATCH
    return "Code matches {} code".format(label)
