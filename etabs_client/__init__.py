#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
etabs_client: a typed client for the ETABS API.

Open a session with `EtabsModel.connect()` (attach) or `EtabsModel.create_new()`
(launch), then work through the manager properties::

    with EtabsModel.connect() as model:
        name = model.points.add_point(0.0, 0.0, 3.0)
        print(model.points.get_point(name))

Every manager call returns a typed value or raises an `EtabsError` subclass.
"""

from .common.config import SETTINGS, ConnectionOptions
from .common.enums import (
    CaseStatus,
    CNameType,
    ComboType,
    ItemType,
    ItemTypeElm,
    LoadDirection,
    LoadPatternType,
    LoadType,
    MatType,
    ObjectType,
    ShellType,
    SlabType,
    Units,
    WallPropType,
    WeightOrMass,
)
from .common.etabs_setup import CreationMode, EngineSession, SessionState
from .common.exceptions import (
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
from .common.registry import ManagerRegistry, default_registry
from .model import EtabsModel

__version__ = "0.1.0"

__all__ = [
    "EtabsModel",
    "EngineSession",
    "SessionState",
    "CreationMode",
    "ConnectionOptions",
    "SETTINGS",
    "ManagerRegistry",
    "default_registry",
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
    "CaseStatus",
    "CNameType",
    "ComboType",
    "ItemType",
    "ItemTypeElm",
    "LoadDirection",
    "LoadPatternType",
    "LoadType",
    "MatType",
    "ObjectType",
    "ShellType",
    "SlabType",
    "Units",
    "WallPropType",
    "WeightOrMass",
]
