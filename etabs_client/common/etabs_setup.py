#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETABS session setup.
Attaches to or launches an ETABS instance, checks its version and owns the
SapModel handle until the session is disposed.
"""

import csv
import io
import logging
import os
import subprocess
import threading
import time
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Optional

from .config import ETABS_PROCESS_NAME, SETTINGS, ConnectionOptions
from .etabs_api_loader import EtabsApi, load_dotnet_etabs_api
from .exceptions import (
    EngineNotAvailableError,
    SessionClosedError,
    UnexpectedError,
    VersionUnsupportedError,
)
from .utility_functions import SUCCESS, split_return

log = logging.getLogger(__name__)
if not log.handlers:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


class SessionState(str, Enum):
    DISCONNECTED = "Disconnected"
    CONNECTED = "Connected"


class CreationMode(str, Enum):
    ATTACHED = "Attached"
    CREATED = "Created"


class RunningInstance(NamedTuple):
    pid: int
    image_name: str


def _resolve_api(options: ConnectionOptions, api: Optional[EtabsApi]) -> EtabsApi:
    if api is not None:
        return api
    return load_dotnet_etabs_api(options.dll_path, options.use_net_core)


def _com_exception_type(api: EtabsApi):
    return api.COMException if isinstance(api.COMException, type) else Exception


class EngineSession:
    """
    One live connection to an ETABS instance.

    Build it with `connect` or `create_new`. Every engine call made through the
    managers goes through `sap_model`, which raises `SessionClosedError` once the
    session is disposed. `call_lock` keeps one call in flight per session.
    """

    def __init__(
        self,
        etabs_object: Any,
        api: EtabsApi,
        mode: CreationMode,
        options: Optional[ConnectionOptions] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if etabs_object is None:
            raise EngineNotAvailableError("ETABS returned no application object.")
        sap_model = etabs_object.SapModel
        if sap_model is None:
            raise EngineNotAvailableError("ETABS application object has no SapModel.")

        self._etabs = etabs_object
        self._sap_model = sap_model
        self._api = api
        self._options = options or SETTINGS.connection
        self._log = logger or log
        self._state = SessionState.CONNECTED
        self._dispose_hooks: List[Callable[["EngineSession"], None]] = []
        self._state_lock = threading.Lock()

        self.mode = mode
        self.version = ""
        self.version_number = 0.0
        self.api_version = 0.0
        self.call_lock = threading.RLock()

    # ------------------------------------------------------------------ factories

    @classmethod
    def connect(cls, options: Optional[ConnectionOptions] = None, api: Optional[EtabsApi] = None,
                logger: Optional[logging.Logger] = None) -> "EngineSession":
        """Attach to a running ETABS instance."""
        options = options or SETTINGS.connection
        logger = logger or log
        api = _resolve_api(options, api)
        helper = api.ETABSv1.cHelper(api.ETABSv1.Helper())

        logger.info("Attaching to a running ETABS instance...")
        try:
            if options.remote:
                etabs_object = helper.GetObjectHost(options.remote_computer, options.progid)
            else:
                etabs_object = helper.GetObject(options.progid)
        except _com_exception_type(api) as exc:
            raise EngineNotAvailableError(
                f"Attaching to ETABS failed ({exc}). Please make sure ETABS is running.", cause=exc
            ) from exc
        except Exception as exc:
            raise EngineNotAvailableError(
                f"Unexpected error while attaching to ETABS: {exc}", cause=exc
            ) from exc
        if etabs_object is None:
            raise EngineNotAvailableError()

        session = cls(etabs_object, api, CreationMode.ATTACHED, options, logger)
        session._read_api_version(helper)
        session._check_version()
        logger.info("Attached to ETABS %s.", session.version)
        return session

    @classmethod
    def create_new(cls, options: Optional[ConnectionOptions] = None, api: Optional[EtabsApi] = None,
                   logger: Optional[logging.Logger] = None) -> "EngineSession":
        """Launch a new ETABS instance and start the application unless told otherwise."""
        options = options or SETTINGS.connection
        logger = logger or log
        api = _resolve_api(options, api)
        helper = api.ETABSv1.cHelper(api.ETABSv1.Helper())

        logger.info("Starting a new ETABS instance...")
        try:
            if options.program_path:
                etabs_object = (helper.CreateObjectHost(options.remote_computer, options.program_path)
                                if options.remote else helper.CreateObject(options.program_path))
            else:
                etabs_object = (helper.CreateObjectProgIDHost(options.remote_computer, options.progid)
                                if options.remote else helper.CreateObjectProgID(options.progid))
        except _com_exception_type(api) as exc:
            raise EngineNotAvailableError(
                f"Starting ETABS failed ({exc}). Check the program path or ProgID.",
                operation="CreateNew",
                cause=exc,
            ) from exc
        except Exception as exc:
            raise EngineNotAvailableError(
                f"Unexpected error while starting ETABS: {exc}", operation="CreateNew", cause=exc
            ) from exc
        if etabs_object is None:
            raise EngineNotAvailableError("ETABS could not be started.", operation="CreateNew")

        if options.start_application:
            code, _ = split_return(etabs_object.ApplicationStart())
            if code != SUCCESS:
                raise EngineNotAvailableError(
                    f"ApplicationStart returned code {code}", operation="ApplicationStart"
                )
            logger.info("ETABS application started.")
            if options.startup_wait_seconds > 0:
                logger.info("Waiting %.1f s for the ETABS user interface...", options.startup_wait_seconds)
                time.sleep(options.startup_wait_seconds)

        session = cls(etabs_object, api, CreationMode.CREATED, options, logger)
        session._read_api_version(helper)
        session._check_version()
        return session

    # ------------------------------------------------------------------ version

    def _read_api_version(self, helper) -> None:
        try:
            self.api_version = float(helper.GetOAPIVersionNumber())
        except Exception as exc:
            self._log.debug("GetOAPIVersionNumber unavailable: %s", exc)
            self.api_version = 0.0

    def _check_version(self) -> None:
        try:
            code, outputs = split_return(self._sap_model.GetVersion("", 0.0))
        except Exception as exc:
            self.dispose()
            raise EngineNotAvailableError(f"Could not read the ETABS version: {exc}",
                                          operation="GetVersion", cause=exc) from exc
        if code != SUCCESS or len(outputs) < 2:
            self.dispose()
            raise EngineNotAvailableError(f"GetVersion returned code {code}", operation="GetVersion")

        self.version = str(outputs[0])
        self.version_number = float(outputs[1] or 0.0)
        minimum = self._options.minimum_version
        try:
            major = int(self.version.split(".")[0])
        except ValueError:
            major = -1
        if major < minimum:
            self.dispose()
            raise VersionUnsupportedError(self.version, str(minimum))

    # ------------------------------------------------------------------ state

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is SessionState.CONNECTED

    @property
    def is_disposed(self) -> bool:
        return self._state is SessionState.DISCONNECTED

    @property
    def sap_model(self):
        sap_model = self._sap_model
        if self._state is not SessionState.CONNECTED or sap_model is None:
            raise SessionClosedError()
        return sap_model

    @property
    def etabs_object(self):
        if self._state is not SessionState.CONNECTED:
            raise SessionClosedError()
        return self._etabs

    @property
    def api(self) -> EtabsApi:
        return self._api

    def engine_enum(self, type_name: str, value: int):
        """Convert an integer (or IntEnum member) into the ETABSv1 enum `type_name`."""
        try:
            enum_type = getattr(self._api.ETABSv1, type_name)
            return enum_type(int(value))
        except Exception as exc:
            raise UnexpectedError(f"Cannot convert {value!r} to ETABSv1.{type_name}: {exc}",
                                  operation=type_name, cause=exc) from exc

    def is_alive(self) -> bool:
        """Check the engine responds; diagnostics only, never reconnects."""
        if self._state is not SessionState.CONNECTED:
            return False
        try:
            with self.call_lock:
                self._sap_model.GetModelFilename(True)
            return True
        except Exception as exc:
            self._log.debug("ETABS liveness check failed: %s", exc)
            return False

    def add_dispose_hook(self, hook: Callable[["EngineSession"], None]) -> None:
        with self._state_lock:
            if self._state is SessionState.DISCONNECTED:
                raise SessionClosedError(operation="add_dispose_hook")
            self._dispose_hooks.append(hook)

    # ------------------------------------------------------------------ dispose

    def dispose(self, close_application: Optional[bool] = None) -> None:
        """
        Release the engine handle. Safe to call more than once.

        The ETABS application is closed only for sessions that started it, unless
        `close_application` says otherwise.
        """
        with self._state_lock:
            if self._state is SessionState.DISCONNECTED:
                return
            self._state = SessionState.DISCONNECTED
            hooks, self._dispose_hooks = self._dispose_hooks, []

        close = self.mode is CreationMode.CREATED if close_application is None else close_application
        if close and self._etabs is not None:
            try:
                with self.call_lock:
                    self._etabs.ApplicationExit(False)
                self._log.info("ETABS application closed.")
            except Exception as exc:
                self._log.warning("ApplicationExit failed: %s", exc)

        try:
            for hook in hooks:
                try:
                    hook(self)
                except Exception as exc:
                    self._log.warning("Dispose hook %r failed: %s", hook, exc)
        finally:
            self._sap_model = None
            self._etabs = None
            self._log.info("ETABS session disposed.")

    def __enter__(self) -> "EngineSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return f"EngineSession(state={self._state.value}, mode={self.mode.value}, version={self.version!r})"

    # ------------------------------------------------------------------ processes

    @staticmethod
    def list_running_instances(process_name: str = ETABS_PROCESS_NAME) -> List[RunningInstance]:
        """ETABS processes on this machine (Windows only; empty elsewhere)."""
        if os.name != "nt":
            return []
        image = f"{process_name}.exe"
        try:
            out = subprocess.run(
                ["tasklist", "/FI", f"IMAGENAME eq {image}", "/FO", "CSV", "/NH"],
                capture_output=True, text=True, check=False,
            ).stdout
        except OSError as exc:
            log.debug("tasklist failed: %s", exc)
            return []
        instances = []
        for row in csv.reader(io.StringIO(out)):
            if len(row) >= 2 and row[0].lower() == image.lower() and row[1].isdigit():
                instances.append(RunningInstance(int(row[1]), row[0]))
        return instances

    @classmethod
    def is_running(cls, process_name: str = ETABS_PROCESS_NAME) -> bool:
        return bool(cls.list_running_instances(process_name))


__all__ = ["SessionState", "CreationMode", "RunningInstance", "EngineSession"]
