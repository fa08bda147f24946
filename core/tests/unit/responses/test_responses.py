from datetime import datetime

from recovery.constants import GRACEFUL_DEGRADATION_CODE
from recovery.enums import LogCategory
from recovery.error import DatabaseError
from recovery.logger import NullLogger
from recovery.responses import (
    create_error_response,
    create_graceful_degradation,
    create_success_response,
)
from tests.fixtures.logger import RecordingLogger


def test_create_error_response_shape() -> None:
    response = create_error_response(
        Exception("boom"), "loadUser", logger=NullLogger()
    )

    assert response.success is False
    assert response.data is None
    assert response.error is not None
    assert response.error.message == "boom"
    assert response.error.context == "loadUser"
    assert response.error.code == "UNKNOWN_ERROR"
    assert response.error.recovery_actions is None
    assert isinstance(response.timestamp, datetime)
    error_timestamp = datetime.fromisoformat(response.error.timestamp)
    assert error_timestamp == response.timestamp


def test_create_error_response_code_and_actions() -> None:
    response = create_error_response(
        DatabaseError("denied", "permission-denied"),
        "updateProgress",
        ["Refresh authentication token"],
        logger=NullLogger(),
    )

    assert response.error is not None
    assert response.error.code == "permission-denied"
    assert response.error.recovery_actions == ["Refresh authentication token"]


def test_create_error_response_without_message() -> None:
    response = create_error_response(object(), "op", logger=NullLogger())

    assert response.error is not None
    assert response.error.message == "Unknown error occurred"
    assert response.error.code == "UNKNOWN_ERROR"


def test_create_error_response_logs(
    recording_logger: RecordingLogger,
) -> None:
    create_error_response(
        RuntimeError("boom"), "loadUser", logger=recording_logger
    )

    (record,) = recording_logger.records
    assert record.level == "error"
    assert record.message == "Error in loadUser"
    assert record.category == LogCategory.ERROR_RECOVERY


def test_create_graceful_degradation(
    recording_logger: RecordingLogger,
) -> None:
    fallback = {"skills": []}

    response = create_graceful_degradation(
        fallback, "Using cached skills", logger=recording_logger
    )

    assert response.success is True
    assert response.data == fallback
    assert response.error is None
    assert response.warning is not None
    assert response.warning.code == GRACEFUL_DEGRADATION_CODE
    assert response.warning.message == "Using cached skills"
    assert response.is_degraded is True
    assert recording_logger.messages("warning") == [
        "Graceful degradation activated: Using cached skills"
    ]


def test_create_success_response() -> None:
    response = create_success_response([1, 2, 3])

    assert response.success is True
    assert response.data == [1, 2, 3]
    assert response.is_degraded is False
    assert response.to_dict()["data"] == [1, 2, 3]
    assert "error" not in response.to_dict()
