import datetime

import pytest

import windowotp
from windowotp import GRANULARITIES, HOURLY, MINUTE, MONTHLY, ValidationError, WindowOTP
from windowotp import window


def test_seven_fixed_windows() -> None:
    assert [(g.label, g.millis) for g in GRANULARITIES] == [
        ("Monthly", 2592000000),
        ("Bi-Weekly", 1209600000),
        ("Weekly", 604800000),
        ("Daily", 86400000),
        ("Hourly", 3600000),
        ("30-Minute", 1800000),
        ("Minute", 60000),
    ]


def test_timecode(moment) -> None:
    assert WindowOTP("1", MINUTE).timecode(moment) == 28333333
    assert WindowOTP("1", HOURLY).timecode(moment) == 472222
    assert WindowOTP("1", MONTHLY).timecode(moment) == 655
    assert WindowOTP("1", MINUTE).timecode(0) == 0


@pytest.mark.parametrize("granularity", GRANULARITIES, ids=lambda g: g.label)
def test_at(secret, moment, expected, granularity) -> None:
    assert WindowOTP(secret, granularity).at(moment) == expected[granularity.label]


def test_same_minute_same_code(secret, moment) -> None:
    otp = WindowOTP(secret, MINUTE)
    assert otp.at(moment) == otp.at(moment - 20_000) == otp.at(moment + 39_999)


def test_next_window_differs(secret, moment) -> None:
    minute = WindowOTP(secret, MINUTE)
    assert minute.at(moment + 40_000) == "410416"
    assert minute.at(moment + 40_000) != minute.at(moment)
    assert WindowOTP(secret, HOURLY).at(moment + 3_600_000) == "245023"


def test_datetime_input(secret, moment, expected) -> None:
    aware = datetime.datetime(2023, 11, 14, 22, 13, 20, tzinfo=datetime.timezone.utc)
    otp = WindowOTP(secret, MINUTE)
    assert otp.timecode(aware) == otp.timecode(moment)
    assert otp.at(aware) == expected["Minute"]


def test_naive_datetime_is_local_time(moment) -> None:
    naive = datetime.datetime.fromtimestamp(moment / 1000)
    assert WindowOTP("1", HOURLY).timecode(naive) == 472222


def test_valid_until(moment) -> None:
    otp = WindowOTP("1", MINUTE)
    assert otp.valid_until(moment) == moment + 40_000
    assert otp.valid_until(moment + 40_000) == moment + 100_000


@pytest.mark.parametrize("bad", [-1, 1.5, "now", None])
def test_bad_time(bad) -> None:
    with pytest.raises(ValidationError):
        WindowOTP("1").timecode(bad)


def test_unknown_granularity() -> None:
    with pytest.raises(ValidationError):
        WindowOTP("1", windowotp.Granularity("Fortnight-ish", 1000))


def test_now_reads_clock(monkeypatch, secret, moment, expected) -> None:
    monkeypatch.setattr(window, "now_millis", lambda: moment)
    assert WindowOTP(secret, MINUTE).now() == expected["Minute"]
    assert window.minute_otp(secret) == expected["Minute"]
    assert WindowOTP(secret, MINUTE).verify(expected["Minute"])


def test_verify(secret, moment) -> None:
    otp = WindowOTP(secret, HOURLY)
    assert otp.verify("898 703", for_time=moment)
    assert otp.verify("898703", for_time=moment + 60_000)
    assert not otp.verify("898704", for_time=moment)
    assert not otp.verify("898703", for_time=moment + 3_600_000)
    assert not otp.verify("\ud800", for_time=moment)


def test_shortcuts(secret, moment, expected) -> None:
    shortcuts = [
        windowotp.monthly_otp,
        windowotp.biweekly_otp,
        windowotp.weekly_otp,
        windowotp.daily_otp,
        windowotp.hourly_otp,
        windowotp.thirty_minute_otp,
        windowotp.minute_otp,
    ]
    assert [f(secret, moment) for f in shortcuts] == list(expected.values())
