#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Call adapter: the single path every ETABS API call goes through.

    validate -> invoke (under the session lock) -> check return code -> extract

Validators run first and stop the call before the engine is touched. Any nonzero
return code is authoritative: the call fails with `EngineRejectedError` and inputs
are not re-checked. Extraction problems become `MarshallingError`, anything else
raised along the way becomes `UnexpectedError`. Calls are never retried.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterable, Optional, Sequence, Type, TypeVar

from .exceptions import (
    CallStage,
    EtabsError,
    InvalidArgumentError,
    MarshallingError,
    SessionClosedError,
    UnexpectedError,
    error_for_code,
    normalize,
)
from .result_zipper import RowFilter, RowSet, RowTransform, zip_rows
from .utility_functions import SUCCESS, split_return
from .validators import Validator

log = logging.getLogger(__name__)

T = TypeVar("T")

Invoke = Callable[[Any], Any]
Extract = Callable[[tuple], Any]


@dataclass(frozen=True)
class OperationRequest:
    """Description of one engine call; built per call and discarded."""

    operation: str
    inputs: Dict[str, Any] = field(default_factory=dict)
    shape: str = "scalar"  # scalar | rows | value


@dataclass(frozen=True)
class OperationOutcome(Generic[T]):
    """Success carrying a value, or failure carrying an `EtabsError`."""

    value: Optional[T] = None
    error: Optional[EtabsError] = None

    @classmethod
    def success(cls, value: T) -> "OperationOutcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: EtabsError) -> "OperationOutcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> Optional[int]:
        return self.error.code if self.error is not None else None

    @property
    def operation(self) -> Optional[str]:
        return self.error.operation if self.error is not None else None

    @property
    def stage(self) -> CallStage:
        return CallStage.SUCCEEDED if self.ok else CallStage.FAILED

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


class CallAdapter:
    """Runs engine calls for one session."""

    def __init__(self, session, logger: Optional[logging.Logger] = None):
        self._session = session
        self._log = logger or log

    # ------------------------------------------------------------------ stages

    def _validate(self, request: OperationRequest, validators: Iterable[Validator]) -> None:
        self._log.debug("%s request: %s", request.operation, request)
        for check in validators:
            try:
                detail = check()
            except EtabsError:
                raise
            except Exception as exc:
                raise normalize(exc, request.operation, CallStage.VALIDATING) from exc
            if detail is not None:
                raise InvalidArgumentError(
                    detail,
                    operation=request.operation,
                    parameter=getattr(check, "parameter", None),
                    value=getattr(check, "value", None),
                )

    def _invoke(self, request: OperationRequest, invoke: Invoke) -> Any:
        try:
            sap_model = self._session.sap_model
        except SessionClosedError as exc:
            raise normalize(exc, request.operation, CallStage.NOT_STARTED)
        with self._session.call_lock:
            try:
                return invoke(sap_model)
            except EtabsError:
                raise
            except Exception as exc:
                raise UnexpectedError(
                    f"engine call raised {type(exc).__name__}: {exc}",
                    operation=request.operation,
                    stage=CallStage.INVOKING,
                    cause=exc,
                ) from exc

    def _check_code(self, request: OperationRequest, raw: Any) -> tuple:
        code, outputs = split_return(raw)
        try:
            code = int(code)
        except (TypeError, ValueError) as exc:
            raise MarshallingError(
                f"engine returned {raw!r} where a return code was expected",
                operation=request.operation,
                cause=exc,
            ) from exc
        if code != SUCCESS:
            self._log.warning("%s failed with return code %s", request.operation, code)
            raise error_for_code(request.operation, code)
        return outputs

    def _extract(self, request: OperationRequest, extract: Callable[[], Any]) -> Any:
        try:
            return extract()
        except EtabsError as exc:
            raise normalize(exc, request.operation, CallStage.EXTRACTING)
        except Exception as exc:
            raise MarshallingError(
                f"could not read outputs: {exc}", operation=request.operation, cause=exc
            ) from exc

    # ------------------------------------------------------------------ public

    def validate(self, operation: str, validators: Sequence[Validator],
                 inputs: Optional[Dict[str, Any]] = None) -> None:
        """Run only the validation stage, for callers that must check inputs before a multi-call sequence."""
        self._validate(OperationRequest(operation, dict(inputs or {})), validators)

    def call_scalar(
        self,
        operation: str,
        invoke: Invoke,
        validators: Sequence[Validator] = (),
        extract: Optional[Extract] = None,
        inputs: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Call an operation whose outputs are scalars; `extract` receives the outputs tuple."""
        request = OperationRequest(operation, dict(inputs or {}), "scalar")
        self._validate(request, validators)
        outputs = self._check_code(request, self._invoke(request, invoke))
        if extract is None:
            self._log.debug("%s succeeded", operation)
            return None
        value = self._extract(request, lambda: extract(outputs))
        self._log.debug("%s succeeded", operation)
        return value

    def call_rows(
        self,
        operation: str,
        invoke: Invoke,
        record_type: Type[T],
        fields: Sequence[Optional[str]],
        count_index: int = 0,
        optional: Sequence[str] = (),
        post_filter: Optional[RowFilter] = None,
        transform: Optional[RowTransform] = None,
        validators: Sequence[Validator] = (),
        inputs: Optional[Dict[str, Any]] = None,
    ) -> list:
        """Call an operation returning a row count plus parallel arrays; returns typed records."""
        request = OperationRequest(operation, dict(inputs or {}), "rows")
        self._validate(request, validators)
        outputs = self._check_code(request, self._invoke(request, invoke))
        rowset = RowSet.from_outputs(outputs, count_index, width=len(fields))
        records = self._extract(
            request,
            lambda: zip_rows(rowset, record_type, fields, optional=optional, post_filter=post_filter,
                             transform=transform, operation=operation),
        )
        self._log.debug("%s succeeded: %d rows", operation, len(records))
        return records

    def call_value(
        self,
        operation: str,
        invoke: Invoke,
        validators: Sequence[Validator] = (),
        convert: Optional[Callable[[Any], Any]] = None,
        inputs: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Call a method that returns its value directly (e.g. ``Count()``); no code check."""
        request = OperationRequest(operation, dict(inputs or {}), "value")
        self._validate(request, validators)
        raw = self._invoke(request, invoke)
        if convert is None:
            return raw
        return self._extract(request, lambda: convert(raw))

    @staticmethod
    def attempt(call: Callable[..., T], *args, **kwargs) -> OperationOutcome[T]:
        """Run any adapter or manager call and return an outcome instead of raising."""
        try:
            return OperationOutcome.success(call(*args, **kwargs))
        except EtabsError as exc:
            return OperationOutcome.failure(exc)


__all__ = ["OperationRequest", "OperationOutcome", "CallAdapter"]
