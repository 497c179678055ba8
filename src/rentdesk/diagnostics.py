"""Diagnostic sinks receiving classified request failures."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .models import DiagnosticRecord
from .types import ErrorClass

_CLASS_MESSAGES = {
    ErrorClass.AUTHENTICATION: "Authentication error - user may need to re-login",
    ErrorClass.AUTHORIZATION: "Permission denied - user not authorized",
    ErrorClass.SERVER: "Server error - backend may be down",
}


class DiagnosticSink(ABC):
    """Receives one record per failed request."""

    @abstractmethod
    def emit(self, record: DiagnosticRecord) -> None:
        pass


class LoggingDiagnosticSink(DiagnosticSink):
    """Writes diagnostic records to the ``rentdesk.diagnostics`` logger."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("rentdesk.diagnostics")

    def emit(self, record: DiagnosticRecord) -> None:
        self.logger.error("API Error: %s", record.detail)
        message = _CLASS_MESSAGES.get(ErrorClass(record.error_class))
        if message:
            self.logger.error(message)


class RecordingDiagnosticSink(DiagnosticSink):
    """Keeps records in memory, in emission order."""

    def __init__(self):
        self.records: list[DiagnosticRecord] = []

    def emit(self, record: DiagnosticRecord) -> None:
        self.records.append(record)

    def clear(self) -> None:
        self.records.clear()
