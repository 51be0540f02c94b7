#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Point objects: creation, coordinates, restraints and nodal forces.
"""

from typing import List, Optional, Tuple

from ..common import validators as v
from ..common.enums import ItemType
from ..common.exceptions import EtabsError
from ..common.manager_base import BaseManager
from ..common.result_zipper import field_equals
from .models import Point, PointLoadForce, PointRestraint


class PointObjectManager(BaseManager):
    subsystem = "Points"

    # ---------------------------------------------------------------- creation

    def add_point(self, x: float, y: float, z: float, user_name: str = "",
                  coordinate_system: str = "Global") -> str:
        """Add a point at cartesian coordinates; returns the name ETABS assigned."""
        return self._adapter.call_scalar(
            "AddCartesian",
            lambda m: m.PointObj.AddCartesian(float(x), float(y), float(z), "", user_name or "",
                                              coordinate_system),
            validators=(v.finite("x", x), v.finite("y", y), v.finite("z", z),
                        v.not_blank("coordinate_system", coordinate_system)),
            extract=lambda out: str(out[0]),
            inputs={"x": x, "y": y, "z": z, "user_name": user_name},
        )

    def change_name(self, name: str, new_name: str) -> None:
        self._adapter.call_scalar(
            "ChangeName",
            lambda m: m.PointObj.ChangeName(name, new_name),
            validators=(v.not_blank("name", name), v.not_blank("new_name", new_name)),
        )

    def delete(self, name: str, item_type: ItemType = ItemType.Objects) -> None:
        """Delete a special (unconnected) point."""
        item_type = self._coerce(ItemType, item_type, "item_type", "DeleteSpecialPoint")
        self._adapter.call_scalar(
            "DeleteSpecialPoint",
            lambda m: m.PointObj.DeleteSpecialPoint(name, self._enum(item_type)),
            validators=(v.not_blank("name", name),),
        )

    # ---------------------------------------------------------------- queries

    def get_coordinates(self, name: str, coordinate_system: str = "Global") -> Tuple[float, float, float]:
        return self._adapter.call_scalar(
            "GetCoordCartesian",
            lambda m: m.PointObj.GetCoordCartesian(name, 0.0, 0.0, 0.0, coordinate_system),
            validators=(v.not_blank("name", name),),
            extract=lambda out: (float(out[0]), float(out[1]), float(out[2])),
        )

    def get_label(self, name: str) -> Tuple[str, str]:
        """(label, story) of a point."""
        return self._adapter.call_scalar(
            "GetLabelFromName",
            lambda m: m.PointObj.GetLabelFromName(name, "", ""),
            validators=(v.not_blank("name", name),),
            extract=lambda out: (str(out[0]), str(out[1])),
        )

    def get_point(self, name: str) -> Point:
        x, y, z = self.get_coordinates(name)
        label = story = None
        try:
            label, story = self.get_label(name)
        except EtabsError as exc:
            self._log.debug("Label lookup for point %s failed: %s", name, exc)
        return Point(name, x, y, z, label, story)

    def get_all_points(self, coordinate_system: str = "Global") -> List[Point]:
        return self._adapter.call_rows(
            "GetAllPoints",
            lambda m: m.PointObj.GetAllPoints(0, [], [], [], [], coordinate_system),
            Point,
            ("name", "x", "y", "z"),
        )

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.PointObj.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.PointObj.Count())

    # ---------------------------------------------------------------- restraints

    def set_restraint(self, name: str, restraint: PointRestraint,
                      item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "SetRestraint")
        self._adapter.call_scalar(
            "SetRestraint",
            lambda m: m.PointObj.SetRestraint(name, restraint.as_list(), self._enum(item_type)),
            validators=(v.not_blank("name", name), v.is_instance("restraint", restraint, PointRestraint)),
            inputs={"name": name, "restraint": restraint},
        )

    def get_restraint(self, name: str) -> PointRestraint:
        return self._adapter.call_scalar(
            "GetRestraint",
            lambda m: m.PointObj.GetRestraint(name, []),
            validators=(v.not_blank("name", name),),
            extract=lambda out: PointRestraint.from_values(out[0]),
        )

    # ---------------------------------------------------------------- loads

    def set_load_force(self, name: str, load: PointLoadForce, replace: bool = True,
                       item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "SetLoadForce")
        self._adapter.call_scalar(
            "SetLoadForce",
            lambda m: m.PointObj.SetLoadForce(name, load.load_pattern, load.as_list(), bool(replace),
                                              load.coordinate_system, self._enum(item_type)),
            validators=(
                v.not_blank("name", name),
                v.is_instance("load", load, PointLoadForce),
                v.not_blank("load_pattern", getattr(load, "load_pattern", None)),
            ),
            inputs={"name": name, "load": load},
        )

    def get_load_force(self, name: str, load_pattern: str = "") -> List[PointLoadForce]:
        """Nodal force rows of a point, optionally only those of `load_pattern`."""
        return self._adapter.call_rows(
            "GetLoadForce",
            lambda m: m.PointObj.GetLoadForce(name, 0, [], [], [], [], [], [], [], [], [], [],
                                              self._enum(ItemType.Objects)),
            PointLoadForce,
            ("point_name", "load_pattern", "step", "coordinate_system", "f1", "f2", "f3", "m1", "m2", "m3"),
            post_filter=field_equals("load_pattern", load_pattern),
            validators=(v.not_blank("name", name),),
        )

    def delete_load_force(self, name: str, load_pattern: str, item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "DeleteLoadForce")
        self._adapter.call_scalar(
            "DeleteLoadForce",
            lambda m: m.PointObj.DeleteLoadForce(name, load_pattern, self._enum(item_type)),
            validators=(v.not_blank("name", name), v.not_blank("load_pattern", load_pattern)),
        )


__all__ = ["PointObjectManager"]
