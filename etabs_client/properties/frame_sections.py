#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Frame section properties (PropFrame).
"""

from typing import List

from ..common import validators as v
from ..common.manager_base import BaseManager
from .models import RectangleSection


class FrameSectionManager(BaseManager):
    subsystem = "FrameSections"

    def set_rectangle(self, name: str, material: str, depth: float, width: float, color: int = -1,
                      notes: str = "") -> None:
        """Rectangular section; `depth` is t3 and `width` is t2."""
        self._adapter.call_scalar(
            "SetRectangle",
            lambda m: m.PropFrame.SetRectangle(name, material, float(depth), float(width), int(color),
                                               notes or "", ""),
            validators=(
                v.not_blank("name", name),
                v.not_blank("material", material),
                v.positive("depth", depth),
                v.positive("width", width),
            ),
            inputs={"name": name, "material": material, "depth": depth, "width": width},
        )

    def get_rectangle(self, name: str) -> RectangleSection:
        # outputs: file name, material, t3, t2, color, notes, guid
        return self._adapter.call_scalar(
            "GetRectangle",
            lambda m: m.PropFrame.GetRectangle(name, "", "", 0.0, 0.0, 0, "", ""),
            validators=(v.not_blank("name", name),),
            extract=lambda out: RectangleSection(name, str(out[1]), float(out[2]), float(out[3]), int(out[4]),
                                                 str(out[5] or ""), str(out[6] or "")),
        )

    def set_circle(self, name: str, material: str, diameter: float, color: int = -1, notes: str = "") -> None:
        self._adapter.call_scalar(
            "SetCircle",
            lambda m: m.PropFrame.SetCircle(name, material, float(diameter), int(color), notes or "", ""),
            validators=(
                v.not_blank("name", name),
                v.not_blank("material", material),
                v.positive("diameter", diameter),
            ),
        )

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.PropFrame.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.PropFrame.Count())

    def delete(self, name: str) -> None:
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.PropFrame.Delete(name),
            validators=(v.not_blank("name", name),),
        )


__all__ = ["FrameSectionManager"]
