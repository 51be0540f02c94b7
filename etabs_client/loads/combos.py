#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load combinations (RespCombo).
"""

from typing import Any, Dict, List

from ..common import validators as v
from ..common.enums import CNameType, ComboType
from ..common.manager_base import BaseManager
from ..common.utility_functions import enum_int
from .models import ComboItem, LoadCombination


def _combo_row(raw: Dict[str, Any]) -> Dict[str, Any]:
    raw["item_type"] = CNameType(enum_int(raw["item_type"]))
    raw["scale_factor"] = float(raw["scale_factor"])
    return raw


class LoadComboManager(BaseManager):
    subsystem = "LoadCombos"

    def add(self, name: str, combo_type: ComboType = ComboType.LinearAdditive) -> None:
        combo_type = self._coerce(ComboType, combo_type, "combo_type", "Add")
        self._adapter.call_scalar(
            "Add",
            lambda m: m.RespCombo.Add(name, int(combo_type)),
            validators=(v.not_blank("name", name),),
            inputs={"name": name, "combo_type": combo_type.name},
        )

    def set_case_list(self, name: str, item_name: str, scale_factor: float,
                      item_type: CNameType = CNameType.LoadCase) -> None:
        """Add (or rescale) one case or combination inside combination `name`."""
        item_type = self._coerce(CNameType, item_type, "item_type", "SetCaseList")
        self._adapter.call_scalar(
            "SetCaseList",
            lambda m: m.RespCombo.SetCaseList(name, self._enum(item_type), item_name, float(scale_factor)),
            validators=(
                v.not_blank("name", name),
                v.not_blank("item_name", item_name),
                v.finite("scale_factor", scale_factor),
            ),
            inputs={"name": name, "item_name": item_name, "scale_factor": scale_factor},
        )

    def get_case_list(self, name: str) -> List[ComboItem]:
        return self._adapter.call_rows(
            "GetCaseList",
            lambda m: m.RespCombo.GetCaseList(name, 0, [], [], []),
            ComboItem,
            ("item_type", "name", "scale_factor"),
            transform=_combo_row,
            validators=(v.not_blank("name", name),),
        )

    def get_combination(self, name: str) -> LoadCombination:
        return LoadCombination(name, tuple(self.get_case_list(name)))

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.RespCombo.GetNameList(0, []))

    def delete(self, name: str) -> None:
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.RespCombo.Delete(name),
            validators=(v.not_blank("name", name),),
        )


__all__ = ["LoadComboManager"]
