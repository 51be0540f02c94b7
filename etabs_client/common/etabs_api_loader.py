#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ETABS API loader.
Loads the .NET runtime through pythonnet and references ETABSv1.dll.
"""

import logging
import threading
from typing import Any, NamedTuple, Optional

from .config import ETABS_DLL_PATH, USE_NET_CORE
from .exceptions import EngineNotAvailableError

log = logging.getLogger(__name__)


class EtabsApi(NamedTuple):
    """Handles to the loaded API: the ETABSv1 namespace, System, and the COMException type."""

    ETABSv1: Any
    System: Any
    COMException: Any


_loaded: Optional[EtabsApi] = None
_load_lock = threading.Lock()


def load_dotnet_etabs_api(dll_path: str = ETABS_DLL_PATH, use_net_core: bool = USE_NET_CORE) -> EtabsApi:
    """Load the .NET runtime and the ETABS API once per process and return the handles."""
    global _loaded
    with _load_lock:
        if _loaded is not None:
            return _loaded

        runtime = "coreclr" if use_net_core else "netfx"
        log.info("Loading .NET runtime (%s)...", runtime)
        try:
            from pythonnet import load

            load(runtime)

            import clr
            import System
            from System.Runtime.InteropServices import COMException

            log.info("Loading ETABS API from %s", dll_path)
            clr.AddReference(dll_path)

            import ETABSv1
        except ImportError as exc:
            raise EngineNotAvailableError(
                f"pythonnet or the ETABS API could not be imported: {exc}",
                operation="LoadApi",
            ) from exc
        except FileNotFoundError as exc:
            raise EngineNotAvailableError(
                f"ETABSv1.dll not found at {dll_path}; check the ETABS installation and ETABS_DLL_PATH",
                operation="LoadApi",
            ) from exc
        except Exception as exc:
            raise EngineNotAvailableError(
                f"Unexpected error while loading the .NET runtime or ETABS API: {exc}",
                operation="LoadApi",
            ) from exc

        _loaded = EtabsApi(ETABSv1, System, COMException)
        log.info("ETABS API loaded.")
        return _loaded


def get_api_objects() -> Optional[EtabsApi]:
    """Return the loaded API handles, or None when `load_dotnet_etabs_api` has not run yet."""
    return _loaded


__all__ = ["EtabsApi", "load_dotnet_etabs_api", "get_api_objects"]
