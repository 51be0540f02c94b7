#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Connection configuration for ETABS sessions.
Module-level constants hold the defaults; `SETTINGS` and `ConnectionOptions` expose them as typed dataclasses.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

# ---------------------------- ETABS paths -----------------------------------

USE_NET_CORE = True
PROGRAM_PATH = r"C:\Program Files\Computers and Structures\ETABS 22\ETABS.exe"
ETABS_DLL_PATH = r"C:\Program Files\Computers and Structures\ETABS 22\ETABSv1.dll"

# ---------------------------- ETABS connection -------------------------------

ETABS_PROGID = "CSI.ETABS.API.ETABSObject"
ETABS_PROCESS_NAME = "ETABS"
ATTACH_TO_INSTANCE = True
SPECIFY_PATH = False
REMOTE = False
REMOTE_COMPUTER = "YourRemoteComputerName"
START_APPLICATION = True
# ETABS v22 is the first release shipping the .NET Standard ETABSv1.dll
MINIMUM_SUPPORTED_VERSION = 22
STARTUP_WAIT_SECONDS = 0.0

_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _env_flag(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_STRINGS


# ---------------------------- dataclasses ------------------------------------


@dataclass(frozen=True)
class PathsConfig:
    use_net_core: bool
    program_path: str
    dll_path: str


@dataclass(frozen=True)
class ConnectionOptions:
    """Options for attaching to or launching an ETABS instance."""

    progid: str = ETABS_PROGID
    program_path: Optional[str] = None
    remote: bool = REMOTE
    remote_computer: str = REMOTE_COMPUTER
    start_application: bool = START_APPLICATION
    minimum_version: int = MINIMUM_SUPPORTED_VERSION
    startup_wait_seconds: float = STARTUP_WAIT_SECONDS
    dll_path: str = ETABS_DLL_PATH
    use_net_core: bool = USE_NET_CORE

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ConnectionOptions":
        """
        Build options from `ETABS_*` environment variables, falling back to module defaults.

        Recognised keys: ETABS_PROGRAM_PATH, ETABS_DLL_PATH, ETABS_PROGID, ETABS_REMOTE,
        ETABS_REMOTE_COMPUTER, ETABS_START_APPLICATION, ETABS_MIN_VERSION,
        ETABS_STARTUP_WAIT, ETABS_USE_NET_CORE.
        """
        env = os.environ if env is None else env
        opts = cls()
        program_path = env.get("ETABS_PROGRAM_PATH") or (PROGRAM_PATH if SPECIFY_PATH else None)
        min_version = env.get("ETABS_MIN_VERSION")
        wait = env.get("ETABS_STARTUP_WAIT")
        return replace(
            opts,
            progid=env.get("ETABS_PROGID") or opts.progid,
            program_path=program_path,
            remote=_env_flag(env, "ETABS_REMOTE", opts.remote),
            remote_computer=env.get("ETABS_REMOTE_COMPUTER") or opts.remote_computer,
            start_application=_env_flag(env, "ETABS_START_APPLICATION", opts.start_application),
            minimum_version=int(min_version) if min_version else opts.minimum_version,
            startup_wait_seconds=float(wait) if wait else opts.startup_wait_seconds,
            dll_path=env.get("ETABS_DLL_PATH") or opts.dll_path,
            use_net_core=_env_flag(env, "ETABS_USE_NET_CORE", opts.use_net_core),
        )


@dataclass(frozen=True)
class Settings:
    paths: PathsConfig
    connection: ConnectionOptions
    attach_to_instance: bool


SETTINGS = Settings(
    paths=PathsConfig(
        use_net_core=USE_NET_CORE,
        program_path=PROGRAM_PATH,
        dll_path=ETABS_DLL_PATH,
    ),
    connection=ConnectionOptions(program_path=PROGRAM_PATH if SPECIFY_PATH else None),
    attach_to_instance=ATTACH_TO_INSTANCE,
)


__all__ = [
    "USE_NET_CORE",
    "PROGRAM_PATH",
    "ETABS_DLL_PATH",
    "ETABS_PROGID",
    "ETABS_PROCESS_NAME",
    "ATTACH_TO_INSTANCE",
    "SPECIFY_PATH",
    "REMOTE",
    "REMOTE_COMPUTER",
    "START_APPLICATION",
    "MINIMUM_SUPPORTED_VERSION",
    "STARTUP_WAIT_SECONDS",
    "PathsConfig",
    "ConnectionOptions",
    "Settings",
    "SETTINGS",
]
