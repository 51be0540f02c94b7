#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error taxonomy for ETABS calls.

Every failure that leaves this package is an `EtabsError`. The subclass tells the
failure kind; the attributes carry the context a caller needs to build its own
error payload (`to_dict`):

    kind       InvalidArgument | EngineRejected | MarshallingError | SessionUnavailable | Unexpected
    operation  engine operation name, e.g. "SetReleases"
    stage      CallStage in which the call failed
    code       engine return code, None when no code was produced
    cause      original exception, also available as __cause__
"""

from enum import Enum
from typing import Any, Dict, Optional


class CallStage(str, Enum):
    """Stages of one engine call. FAILED is terminal."""

    NOT_STARTED = "NotStarted"
    VALIDATING = "Validating"
    INVOKING = "Invoking"
    EXTRACTING = "Extracting"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class EtabsError(Exception):
    """Base class of all failures raised by etabs_client."""

    kind = "Unexpected"

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        code: Optional[int] = None,
        stage: Optional[CallStage] = None,
        cause: Optional[BaseException] = None,
    ):
        self.message = message
        self.operation = operation
        self.code = code
        self.stage = stage
        self.cause = cause
        super().__init__(self._format())
        if cause is not None:
            self.__cause__ = cause

    def _format(self) -> str:
        text = f"[{self.operation}] {self.message}" if self.operation else self.message
        if self.code is not None:
            text += f" (Return code: {self.code})"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Transport-neutral error shape: {"success": False, "error": {...}}."""
        cause = self.cause if self.cause is not None else self.__cause__
        return {
            "success": False,
            "error": {
                "kind": self.kind,
                "operation": self.operation,
                "stage": self.stage.value if self.stage is not None else None,
                "code": self.code,
                "message": self.message,
                "cause": f"{type(cause).__name__}: {cause}" if cause is not None else None,
            },
        }


class InvalidArgumentError(EtabsError):
    """Pre-call validation failed; the engine was not called."""

    kind = "InvalidArgument"

    def __init__(self, message: str, operation: Optional[str] = None, parameter: Optional[str] = None,
                 value: Any = None):
        self.parameter = parameter
        self.value = value
        if parameter:
            message = f"Invalid parameter '{parameter}': {message}"
        super().__init__(message, operation=operation, stage=CallStage.VALIDATING)


class EngineRejectedError(EtabsError):
    """The engine returned a non-success code."""

    kind = "EngineRejected"

    def __init__(self, message: str, operation: str, code: int):
        super().__init__(message, operation=operation, code=code, stage=CallStage.INVOKING)


class MarshallingError(EtabsError):
    """The engine reported success but its outputs could not be turned into typed values."""

    kind = "MarshallingError"

    def __init__(self, message: str, operation: Optional[str] = None,
                 cause: Optional[BaseException] = None):
        super().__init__(message, operation=operation, stage=CallStage.EXTRACTING, cause=cause)


class SessionUnavailableError(EtabsError):
    """No usable engine session."""

    kind = "SessionUnavailable"


class EngineNotAvailableError(SessionUnavailableError):
    """No connectable ETABS instance could be found or started."""

    def __init__(self, message: str = "No running ETABS instance found. Please start ETABS before connecting.",
                 operation: Optional[str] = "Connect", cause: Optional[BaseException] = None):
        super().__init__(message, operation=operation, stage=CallStage.NOT_STARTED, cause=cause)


class VersionUnsupportedError(SessionUnavailableError):
    """The attached engine reports a version older than the supported minimum."""

    def __init__(self, detected_version: str, required_version: str, operation: Optional[str] = "Connect"):
        self.detected_version = detected_version
        self.required_version = required_version
        super().__init__(
            f"ETABS version {detected_version} is not supported. Minimum required version: {required_version}",
            operation=operation,
            stage=CallStage.NOT_STARTED,
        )


class SessionClosedError(SessionUnavailableError):
    """A call was issued through a disposed session."""

    def __init__(self, operation: Optional[str] = None):
        super().__init__("The ETABS session has been disposed.", operation=operation,
                         stage=CallStage.NOT_STARTED)


class UnexpectedError(EtabsError):
    """Any other runtime exception caught in the call pipeline."""

    kind = "Unexpected"


# Codes the engine documents for specific conditions. ETABS itself only promises
# 0 = success, so the table is empty unless a caller registers entries.
KNOWN_CODES: Dict[int, str] = {}


def error_for_code(operation: str, code: int, message: Optional[str] = None) -> EngineRejectedError:
    """Build the failure for a non-success engine code."""
    detail = KNOWN_CODES.get(code)
    text = message or f"{operation} failed"
    if detail:
        text = f"{text}: {detail}"
    return EngineRejectedError(text, operation=operation, code=code)


def normalize(exc: BaseException, operation: Optional[str], stage: CallStage) -> EtabsError:
    """Return `exc` if it already is an EtabsError, otherwise wrap it as UnexpectedError."""
    if isinstance(exc, EtabsError):
        if exc.operation is None and operation is not None:
            exc.operation = operation
            exc.args = (exc._format(),)
        return exc
    return UnexpectedError(
        f"Unexpected error during {stage.value.lower()}: {exc}",
        operation=operation,
        stage=stage,
        cause=exc,
    )


__all__ = [
    "CallStage",
    "EtabsError",
    "InvalidArgumentError",
    "EngineRejectedError",
    "MarshallingError",
    "SessionUnavailableError",
    "EngineNotAvailableError",
    "VersionUnsupportedError",
    "SessionClosedError",
    "UnexpectedError",
    "KNOWN_CODES",
    "error_for_code",
    "normalize",
]
