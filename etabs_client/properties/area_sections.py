#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Slab and wall properties (PropArea).
"""

from typing import List

from ..common import validators as v
from ..common.enums import ShellType, SlabType, WallPropType
from ..common.manager_base import BaseManager


class AreaSectionManager(BaseManager):
    subsystem = "AreaSections"

    def set_slab(self, name: str, material: str, thickness: float, slab_type: SlabType = SlabType.Slab,
                 shell_type: ShellType = ShellType.ShellThin, color: int = -1, notes: str = "") -> None:
        slab_type = self._coerce(SlabType, slab_type, "slab_type", "SetSlab")
        shell_type = self._coerce(ShellType, shell_type, "shell_type", "SetSlab")
        self._adapter.call_scalar(
            "SetSlab",
            lambda m: m.PropArea.SetSlab(name, self._enum(slab_type), self._enum(shell_type), material,
                                         float(thickness), int(color), notes or "", ""),
            validators=(
                v.not_blank("name", name),
                v.not_blank("material", material),
                v.positive("thickness", thickness),
            ),
            inputs={"name": name, "material": material, "thickness": thickness},
        )

    def set_wall(self, name: str, material: str, thickness: float,
                 wall_type: WallPropType = WallPropType.Specified,
                 shell_type: ShellType = ShellType.ShellThin, color: int = -1, notes: str = "") -> None:
        wall_type = self._coerce(WallPropType, wall_type, "wall_type", "SetWall")
        shell_type = self._coerce(ShellType, shell_type, "shell_type", "SetWall")
        self._adapter.call_scalar(
            "SetWall",
            lambda m: m.PropArea.SetWall(name, self._enum(wall_type), self._enum(shell_type), material,
                                         float(thickness), int(color), notes or "", ""),
            validators=(
                v.not_blank("name", name),
                v.not_blank("material", material),
                v.positive("thickness", thickness),
            ),
            inputs={"name": name, "material": material, "thickness": thickness},
        )

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.PropArea.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.PropArea.Count())

    def delete(self, name: str) -> None:
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.PropArea.Delete(name),
            validators=(v.not_blank("name", name),),
        )


__all__ = ["AreaSectionManager"]
