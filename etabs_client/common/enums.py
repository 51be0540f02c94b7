#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Python mirrors of the ETABSv1 enums used by the managers.

Values match the ETABS API. Members passed to typed .NET parameters are converted
with `EngineSession.engine_enum`, using the ETABSv1 type names in `ENGINE_TYPE_NAMES`.
"""

from enum import IntEnum


class Units(IntEnum):
    lb_in_F = 1
    lb_ft_F = 2
    kip_in_F = 3
    kip_ft_F = 4
    kN_mm_C = 5
    kN_m_C = 6
    kgf_mm_C = 7
    kgf_m_C = 8
    N_mm_C = 9
    N_m_C = 10
    Ton_mm_C = 11
    Ton_m_C = 12
    kN_cm_C = 13
    kgf_cm_C = 14
    N_cm_C = 15
    Ton_cm_C = 16


class ItemType(IntEnum):
    Objects = 0
    Group = 1
    SelectedObjects = 2


class ItemTypeElm(IntEnum):
    ObjectElm = 0
    Element = 1
    GroupElm = 2
    SelectionElm = 3


class LoadPatternType(IntEnum):
    Dead = 1
    SuperDead = 2
    Live = 3
    ReduceLive = 4
    Quake = 5
    Wind = 6
    Snow = 7
    Other = 8
    Temperature = 10
    Rooflive = 11
    Notional = 12


class MatType(IntEnum):
    Steel = 1
    Concrete = 2
    NoDesign = 3
    Aluminum = 4
    ColdFormed = 5
    Rebar = 6
    Tendon = 7
    Masonry = 8


class CNameType(IntEnum):
    LoadCase = 0
    LoadCombo = 1


class SlabType(IntEnum):
    Slab = 0
    Drop = 1
    Ribbed = 3
    Waffle = 4
    Mat = 5
    Footing = 6


class ShellType(IntEnum):
    ShellThin = 1
    ShellThick = 2
    Membrane = 3
    Layered = 6


class WallPropType(IntEnum):
    Specified = 1
    AutoSelectList = 2


# Plain-int parameters (no typed .NET enum on the API side).


class ComboType(IntEnum):
    LinearAdditive = 0
    Envelope = 1
    AbsoluteAdditive = 2
    SRSS = 3
    RangeAdditive = 4


class LoadType(IntEnum):
    Force = 1
    Moment = 2


class LoadDirection(IntEnum):
    Local1 = 1
    Local2 = 2
    Local3 = 3
    GlobalX = 4
    GlobalY = 5
    GlobalZ = 6
    ProjectedX = 7
    ProjectedY = 8
    ProjectedZ = 9
    Gravity = 10
    ProjectedGravity = 11


class CaseStatus(IntEnum):
    NotRun = 1
    CouldNotStart = 2
    NotFinished = 3
    Finished = 4


class WeightOrMass(IntEnum):
    Weight = 1
    Mass = 2


class ObjectType(IntEnum):
    """Object kinds in group assignments and selections."""

    Point = 1
    Frame = 2
    Cable = 3
    Tendon = 4
    Area = 5
    Solid = 6
    Link = 7


ENGINE_TYPE_NAMES = {
    Units: "eUnits",
    ItemType: "eItemType",
    ItemTypeElm: "eItemTypeElm",
    LoadPatternType: "eLoadPatternType",
    MatType: "eMatType",
    CNameType: "eCNameType",
    SlabType: "eSlabType",
    ShellType: "eShellType",
    WallPropType: "eWallPropType",
}


__all__ = [
    "Units",
    "ItemType",
    "ItemTypeElm",
    "LoadPatternType",
    "MatType",
    "CNameType",
    "SlabType",
    "ShellType",
    "WallPropType",
    "ComboType",
    "LoadType",
    "LoadDirection",
    "CaseStatus",
    "WeightOrMass",
    "ObjectType",
    "ENGINE_TYPE_NAMES",
]
