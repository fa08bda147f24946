from typing import Any, NamedTuple

import pytest


class LogRecord(NamedTuple):
    level: str
    message: str
    category: str
    detail: Any


class RecordingLogger:
    def __init__(self) -> None:
        self.records: list[LogRecord] = []

    def debug(self, message: str, category: str, detail: Any = None) -> None:
        self.records.append(LogRecord("debug", message, category, detail))

    def info(self, message: str, category: str, detail: Any = None) -> None:
        self.records.append(LogRecord("info", message, category, detail))

    def warning(
        self, message: str, category: str, detail: Any = None
    ) -> None:
        self.records.append(LogRecord("warning", message, category, detail))

    def error(self, message: str, category: str, detail: Any = None) -> None:
        self.records.append(LogRecord("error", message, category, detail))

    def messages(self, level: str | None = None) -> list[str]:
        return [
            record.message
            for record in self.records
            if level is None or record.level == level
        ]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
