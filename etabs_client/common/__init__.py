#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Session, call adaptation and error handling shared by every manager.
"""

from .call_adapter import CallAdapter, OperationOutcome, OperationRequest
from .config import SETTINGS, ConnectionOptions
from .etabs_setup import CreationMode, EngineSession, SessionState
from .exceptions import (
    CallStage,
    EngineNotAvailableError,
    EngineRejectedError,
    EtabsError,
    InvalidArgumentError,
    MarshallingError,
    SessionClosedError,
    SessionUnavailableError,
    UnexpectedError,
    VersionUnsupportedError,
)
from .registry import ManagerRegistry, default_registry
from .result_zipper import RowSet, zip_rows

__all__ = [
    "CallAdapter",
    "OperationOutcome",
    "OperationRequest",
    "SETTINGS",
    "ConnectionOptions",
    "CreationMode",
    "EngineSession",
    "SessionState",
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
    "ManagerRegistry",
    "default_registry",
    "RowSet",
    "zip_rows",
]
