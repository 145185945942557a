import pytest

from shared.utils.retry import retry


def test_returns_first_success():
    calls = []
    sleeps = []

    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError("not yet")
        return "ok"

    assert retry(flaky, retries=5, jitter=0, sleep=sleeps.append) == "ok"
    assert len(calls) == 3
    assert sleeps == [0.5, 1.0]


def test_reraises_after_last_attempt():
    seen = []

    def always_fails():
        raise ConnectionError("down")

    with pytest.raises(ConnectionError):
        retry(
            always_fails,
            retries=3,
            sleep=lambda s: None,
            on_retry=lambda attempt, exc, s: seen.append(attempt),
        )
    assert seen == [1, 2]


def test_delay_is_capped():
    sleeps = []

    def always_fails():
        raise ConnectionError("down")

    with pytest.raises(ConnectionError):
        retry(always_fails, retries=5, base_delay=4, max_delay=5, jitter=0, sleep=sleeps.append)
    assert sleeps == [4, 5, 5, 5]


def test_unlisted_errors_are_not_retried():
    calls = []

    def bad():
        calls.append(1)
        raise KeyError("nope")

    with pytest.raises(KeyError):
        retry(bad, retry_on=(ConnectionError,), sleep=lambda s: None)
    assert len(calls) == 1


def test_retries_must_be_positive():
    with pytest.raises(ValueError):
        retry(lambda: 1, retries=0)
