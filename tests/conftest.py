import pytest


@pytest.fixture
def secret() -> str:
    return "deadbeef"


@pytest.fixture
def moment() -> int:
    # 2023-11-14T22:13:20Z, 20 seconds into its minute
    return 1_700_000_000_000


@pytest.fixture
def expected() -> dict:
    return {
        "Monthly": "453359",
        "Bi-Weekly": "447851",
        "Weekly": "885501",
        "Daily": "464131",
        "Hourly": "898703",
        "30-Minute": "218431",
        "Minute": "026924",
    }
