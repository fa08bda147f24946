from unittest.mock import AsyncMock, patch

import pytest

from recovery.error import DatabaseError
from recovery.logger import NullLogger
from recovery.retry_politic import (
    DEFAULT_RETRY_POLICY,
    RetryManager,
    RetryPolicy,
    calculate_retry_delay,
    with_retry,
)
from tests.fixtures.interfaces import FactoryRetryPolicy
from tests.fixtures.logger import RecordingLogger

SLEEP_PATH = "recovery.retry_politic.retry_manager.sleep"


def failing_operation(
    error: Exception, failures: int, result: str = "ok"
) -> AsyncMock:
    side_effect: list[object] = [error] * failures + [result]
    return AsyncMock(side_effect=side_effect)


def test_default_policy() -> None:
    assert DEFAULT_RETRY_POLICY.max_attempts == 3
    assert DEFAULT_RETRY_POLICY.base_delay == 1.0
    assert DEFAULT_RETRY_POLICY.max_delay == 10.0
    assert DEFAULT_RETRY_POLICY.backoff_multiplier == 2.0
    assert DEFAULT_RETRY_POLICY.use_jitter is True


def test_with_overrides_keeps_other_fields() -> None:
    policy = DEFAULT_RETRY_POLICY.with_overrides(
        max_attempts=5, base_delay=None
    )

    assert policy.max_attempts == 5
    assert policy.base_delay == DEFAULT_RETRY_POLICY.base_delay
    assert policy.is_retryable is DEFAULT_RETRY_POLICY.is_retryable
    assert DEFAULT_RETRY_POLICY.max_attempts == 3


def test_with_overrides_validates() -> None:
    with pytest.raises(ValueError, match="max_attempts"):
        DEFAULT_RETRY_POLICY.with_overrides(max_attempts=0)


def test_calculate_retry_delay_without_jitter() -> None:
    policy = RetryPolicy(
        base_delay=1.0,
        max_delay=10.0,
        backoff_multiplier=2.0,
        use_jitter=False,
    )

    delays = [calculate_retry_delay(attempt, policy) for attempt in range(6)]

    assert delays == [1.0, 2.0, 4.0, 8.0, 10.0, 10.0]
    assert delays == sorted(delays)


def test_calculate_retry_delay_with_jitter_bounds() -> None:
    policy = RetryPolicy(base_delay=1.0, max_delay=10.0, use_jitter=True)

    for attempt in range(5):
        expected = min(1.0 * 2.0**attempt, 10.0)
        for _ in range(50):
            delay = calculate_retry_delay(attempt, policy)
            assert expected * 0.5 <= delay <= expected


async def test_with_retry_first_attempt_success() -> None:
    operation = AsyncMock(return_value="ok")

    with patch(SLEEP_PATH, new_callable=AsyncMock) as sleep_mock:
        result = await with_retry(operation, NullLogger())

    assert result == "ok"
    operation.assert_awaited_once()
    sleep_mock.assert_not_awaited()


@pytest.mark.parametrize("max_attempts", [1, 2, 3, 5])
async def test_with_retry_bounded_attempts(max_attempts: int) -> None:
    errors = [DatabaseError(f"attempt {i}", "unavailable") for i in range(10)]
    operation = AsyncMock(side_effect=errors)

    with (
        patch(SLEEP_PATH, new_callable=AsyncMock),
        pytest.raises(DatabaseError) as de,
    ):
        await with_retry(
            operation, NullLogger(), max_attempts=max_attempts
        )

    assert operation.await_count == max_attempts
    assert de.value is errors[max_attempts - 1]


async def test_with_retry_non_retryable_stops_immediately() -> None:
    error = DatabaseError("bad request", "invalid-argument")
    operation = AsyncMock(side_effect=error)

    with (
        patch(SLEEP_PATH, new_callable=AsyncMock) as sleep_mock,
        pytest.raises(DatabaseError) as de,
    ):
        await with_retry(operation, NullLogger(), max_attempts=5)

    assert de.value is error
    operation.assert_awaited_once()
    sleep_mock.assert_not_awaited()


async def test_with_retry_eventual_success() -> None:
    operation = failing_operation(DatabaseError("down", "unavailable"), 2)

    with patch(SLEEP_PATH, new_callable=AsyncMock):
        result = await with_retry(operation, NullLogger(), max_attempts=3)

    assert result == "ok"
    assert operation.await_count == 3


async def test_with_retry_backoff_delays() -> None:
    operation = failing_operation(DatabaseError("down", "unavailable"), 2)

    with patch(SLEEP_PATH, new_callable=AsyncMock) as sleep_mock:
        result = await with_retry(
            operation,
            NullLogger(),
            max_attempts=3,
            base_delay=0.01,
            backoff_multiplier=2,
            use_jitter=False,
        )

    assert result == "ok"
    assert operation.await_count == 3
    delays = [call.args[0] for call in sleep_mock.await_args_list]
    assert delays == pytest.approx([0.01, 0.02])


async def test_with_retry_real_sleep() -> None:
    operation = failing_operation(DatabaseError("down", "unavailable"), 1)

    result = await with_retry(
        operation, NullLogger(), base_delay=0.001, use_jitter=False
    )

    assert result == "ok"
    assert operation.await_count == 2


async def test_with_retry_custom_classifier() -> None:
    operation = failing_operation(ValueError("bad"), 1)

    with patch(SLEEP_PATH, new_callable=AsyncMock):
        result = await with_retry(
            operation, NullLogger(), is_retryable=lambda _: True
        )

    assert result == "ok"


async def test_with_retry_logs(recording_logger: RecordingLogger) -> None:
    operation = failing_operation(DatabaseError("down", "unavailable"), 1)

    with patch(SLEEP_PATH, new_callable=AsyncMock):
        await with_retry(operation, recording_logger, use_jitter=False)

    assert recording_logger.messages("warning") == [
        "Attempt 1 failed, retrying in 1.000s"
    ]
    assert recording_logger.messages("info") == [
        "Operation succeeded after 2 attempts"
    ]


async def test_with_retry_logs_exhaustion(
    recording_logger: RecordingLogger,
) -> None:
    operation = AsyncMock(side_effect=DatabaseError("down", "unavailable"))

    with (
        patch(SLEEP_PATH, new_callable=AsyncMock),
        pytest.raises(DatabaseError),
    ):
        await with_retry(operation, recording_logger, max_attempts=2)

    assert recording_logger.messages("error") == [
        "Operation failed after 2 attempts"
    ]


async def test_retry_manager_with_factory_policy(
    factory_retry_policy: FactoryRetryPolicy,
) -> None:
    policy = factory_retry_policy.build()
    operation = AsyncMock(side_effect=DatabaseError("down", "internal"))
    manager = RetryManager(policy, NullLogger())

    with pytest.raises(DatabaseError):
        await manager.execute_with_retry(operation)

    assert operation.await_count == policy.max_attempts
    assert manager.calculate_delay(0) == 0.0
