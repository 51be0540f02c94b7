#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Records for group definitions, group assignments and the selection.
"""

from dataclasses import astuple, dataclass
from typing import Any, Dict, List, Optional

from ..common.enums import ObjectType
from ..common.utility_functions import enum_int

# Object managers that accept SetGroupAssign / SetSelected, by object type.
OBJECT_COMPONENTS = {
    ObjectType.Point: "PointObj",
    ObjectType.Frame: "FrameObj",
    ObjectType.Area: "AreaObj",
}


def object_component(object_type) -> Optional[str]:
    """Name of the ETABS object interface for `object_type`, or None when the client has none."""
    try:
        return OBJECT_COMPONENTS.get(ObjectType(object_type))
    except (TypeError, ValueError):
        return None


def object_row(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Row transform for the parallel (object type, object name) arrays ETABS returns."""
    raw["object_type"] = ObjectType(enum_int(raw["object_type"]))
    raw["name"] = str(raw["name"])
    return raw


def unsupported_object_type(object_type) -> Optional[str]:
    if object_component(object_type) is None:
        supported = ", ".join(t.name for t in OBJECT_COMPONENTS)
        return f"{object_type!r} is not one of {supported}"
    return None


@dataclass(frozen=True)
class Group:
    """
    A group and what ETABS may use it for.

    Flags follow the SetGroup_1 argument order; the defaults are the ones ETABS
    applies to a new group.
    """

    name: str
    color: int = -1
    for_selection: bool = True
    for_section_cut: bool = True
    for_steel_design: bool = True
    for_concrete_design: bool = True
    for_aluminum_design: bool = True
    for_static_nonlinear_stage: bool = True
    for_auto_seismic_output: bool = False
    for_auto_wind_output: bool = False
    for_mass_and_weight: bool = True
    for_steel_joist_design: bool = True
    for_wall_design: bool = True
    for_base_plate_design: bool = True
    for_connection_design: bool = True

    @classmethod
    def simple(cls, name: str, color: int = -1, for_selection: bool = True, for_design: bool = True) -> "Group":
        """A group whose design flags all share one value."""
        return cls(
            name, color, for_selection, True, for_design, for_design, for_design, True,
            False, False, True, for_design, for_design, for_design, for_design,
        )

    def flags(self) -> List[bool]:
        return [bool(flag) for flag in astuple(self)[2:]]


@dataclass(frozen=True)
class ObjectRef:
    """One object named in a group assignment or in the selection."""

    object_type: ObjectType
    name: str

    @property
    def is_supported(self) -> bool:
        return object_component(self.object_type) is not None


__all__ = ["OBJECT_COMPONENTS", "Group", "ObjectRef", "object_component", "object_row",
           "unsupported_object_type"]
