#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Area objects (slabs, walls): creation, properties, diaphragms and uniform loads.
"""

from typing import List, Sequence, Tuple

from ..common import validators as v
from ..common.enums import ItemType, LoadDirection
from ..common.manager_base import BaseManager, NameRow
from ..common.result_zipper import field_equals
from .models import Area, AreaUniformLoad


class AreaObjectManager(BaseManager):
    subsystem = "Areas"

    # ---------------------------------------------------------------- creation

    def add_area_by_points(self, points: Sequence[str], property_name: str = "Default", user_name: str = "") -> str:
        """Add an area through at least three existing points, in the given order."""
        return self._adapter.call_scalar(
            "AddByPoint",
            lambda m: m.AreaObj.AddByPoint(len(points), list(points), "", property_name, user_name or ""),
            validators=(
                v.min_length("points", points, 3),
                v.all_not_blank("points", points),
                v.not_blank("property_name", property_name),
            ),
            extract=lambda out: str(out[-1]),
            inputs={"points": list(points) if points is not None else None, "property_name": property_name},
        )

    def add_area_by_coordinates(self, xs: Sequence[float], ys: Sequence[float], zs: Sequence[float],
                                property_name: str = "Default", user_name: str = "",
                                coordinate_system: str = "Global") -> str:
        def _invoke(m):
            return m.AreaObj.AddByCoord(len(xs), [float(x) for x in xs], [float(y) for y in ys],
                                        [float(z) for z in zs], "", property_name, user_name or "",
                                        coordinate_system)

        return self._adapter.call_scalar(
            "AddByCoord",
            _invoke,
            validators=(
                v.min_length("xs", xs, 3),
                v.same_length("coordinates", xs, ys, zs),
                v.all_finite("xs", xs),
                v.all_finite("ys", ys),
                v.all_finite("zs", zs),
                v.not_blank("property_name", property_name),
            ),
            extract=lambda out: str(out[-1]),
        )

    def change_name(self, name: str, new_name: str) -> None:
        self._adapter.call_scalar(
            "ChangeName",
            lambda m: m.AreaObj.ChangeName(name, new_name),
            validators=(v.not_blank("name", name), v.not_blank("new_name", new_name)),
        )

    def delete(self, name: str, item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "Delete")
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.AreaObj.Delete(name, self._enum(item_type)),
            validators=(v.not_blank("name", name),),
        )

    # ---------------------------------------------------------------- queries

    def get_points(self, name: str) -> Tuple[str, ...]:
        """Corner points in the order ETABS stores them."""
        rows = self._adapter.call_rows(
            "GetPoints",
            lambda m: m.AreaObj.GetPoints(name, 0, []),
            NameRow,
            ("name",),
            validators=(v.not_blank("name", name),),
        )
        return tuple(row.name for row in rows)

    def get_property(self, name: str) -> str:
        return self._adapter.call_scalar(
            "GetProperty",
            lambda m: m.AreaObj.GetProperty(name, ""),
            validators=(v.not_blank("name", name),),
            extract=lambda out: str(out[0]),
        )

    def get_area(self, name: str) -> Area:
        return Area(name, self.get_points(name), self.get_property(name))

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.AreaObj.GetNameList(0, []))

    def get_all_areas(self) -> List[Area]:
        return [self.get_area(name) for name in self.get_name_list()]

    def count(self) -> int:
        return self._count("Count", lambda m: m.AreaObj.Count())

    # ---------------------------------------------------------------- assignments

    def set_property(self, name: str, property_name: str, item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "SetProperty")
        self._adapter.call_scalar(
            "SetProperty",
            lambda m: m.AreaObj.SetProperty(name, property_name, self._enum(item_type)),
            validators=(v.not_blank("name", name), v.not_blank("property_name", property_name)),
        )

    def set_diaphragm(self, name: str, diaphragm: str) -> None:
        self._adapter.call_scalar(
            "SetDiaphragm",
            lambda m: m.AreaObj.SetDiaphragm(name, diaphragm),
            validators=(v.not_blank("name", name), v.not_blank("diaphragm", diaphragm)),
        )

    # ---------------------------------------------------------------- loads

    def set_load_uniform(self, name: str, load_pattern: str, value: float,
                         direction: int = LoadDirection.Gravity, replace: bool = True,
                         coordinate_system: str = "Global", item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "SetLoadUniform")
        self._adapter.call_scalar(
            "SetLoadUniform",
            lambda m: m.AreaObj.SetLoadUniform(name, load_pattern, float(value), int(direction), bool(replace),
                                               coordinate_system, self._enum(item_type)),
            validators=(
                v.not_blank("name", name),
                v.not_blank("load_pattern", load_pattern),
                v.finite("value", value),
                v.in_range("direction", direction, 1, 11),
            ),
            inputs={"name": name, "load_pattern": load_pattern, "value": value},
        )

    def get_load_uniform(self, name: str, load_pattern: str = "") -> List[AreaUniformLoad]:
        return self._adapter.call_rows(
            "GetLoadUniform",
            lambda m: m.AreaObj.GetLoadUniform(name, 0, [], [], [], [], [], self._enum(ItemType.Objects)),
            AreaUniformLoad,
            ("area_name", "load_pattern", "coordinate_system", "direction", "value"),
            post_filter=field_equals("load_pattern", load_pattern),
            validators=(v.not_blank("name", name),),
        )

    def delete_load_uniform(self, name: str, load_pattern: str, item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "DeleteLoadUniform")
        self._adapter.call_scalar(
            "DeleteLoadUniform",
            lambda m: m.AreaObj.DeleteLoadUniform(name, load_pattern, self._enum(item_type)),
            validators=(v.not_blank("name", name), v.not_blank("load_pattern", load_pattern)),
        )


__all__ = ["AreaObjectManager"]
