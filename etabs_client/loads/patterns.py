#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load patterns (LoadPatterns).
"""

from typing import List

from ..common import validators as v
from ..common.enums import LoadPatternType
from ..common.manager_base import BaseManager
from ..common.utility_functions import enum_int
from .models import LoadPattern


class LoadPatternManager(BaseManager):
    subsystem = "LoadPatterns"

    def add(self, name: str, pattern_type: LoadPatternType, self_weight_multiplier: float = 0.0,
            add_analysis_case: bool = True) -> None:
        """Add a load pattern; ETABS also creates a matching linear static case unless told not to."""
        pattern_type = self._coerce(LoadPatternType, pattern_type, "pattern_type", "Add")
        self._adapter.call_scalar(
            "Add",
            lambda m: m.LoadPatterns.Add(name, self._enum(pattern_type), float(self_weight_multiplier),
                                         bool(add_analysis_case)),
            validators=(v.not_blank("name", name), v.non_negative("self_weight_multiplier", self_weight_multiplier)),
            inputs={"name": name, "pattern_type": pattern_type.name},
        )

    def delete(self, name: str) -> None:
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.LoadPatterns.Delete(name),
            validators=(v.not_blank("name", name),),
        )

    def change_name(self, name: str, new_name: str) -> None:
        self._adapter.call_scalar(
            "ChangeName",
            lambda m: m.LoadPatterns.ChangeName(name, new_name),
            validators=(v.not_blank("name", name), v.not_blank("new_name", new_name)),
        )

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.LoadPatterns.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.LoadPatterns.Count())

    def exists(self, name: str) -> bool:
        return bool(name) and name in self.get_name_list()

    def get_load_type(self, name: str) -> LoadPatternType:
        return self._adapter.call_scalar(
            "GetLoadType",
            lambda m: m.LoadPatterns.GetLoadType(name, self._enum(LoadPatternType.Dead)),
            validators=(v.not_blank("name", name),),
            extract=lambda out: LoadPatternType(enum_int(out[0])),
        )

    def set_load_type(self, name: str, pattern_type: LoadPatternType) -> None:
        pattern_type = self._coerce(LoadPatternType, pattern_type, "pattern_type", "SetLoadType")
        self._adapter.call_scalar(
            "SetLoadType",
            lambda m: m.LoadPatterns.SetLoadType(name, self._enum(pattern_type)),
            validators=(v.not_blank("name", name),),
        )

    def get_self_weight_multiplier(self, name: str) -> float:
        return self._adapter.call_scalar(
            "GetSelfWTMultiplier",
            lambda m: m.LoadPatterns.GetSelfWTMultiplier(name, 0.0),
            validators=(v.not_blank("name", name),),
            extract=lambda out: float(out[0]),
        )

    def set_self_weight_multiplier(self, name: str, multiplier: float) -> None:
        self._adapter.call_scalar(
            "SetSelfWTMultiplier",
            lambda m: m.LoadPatterns.SetSelfWTMultiplier(name, float(multiplier)),
            validators=(v.not_blank("name", name), v.non_negative("multiplier", multiplier)),
        )

    def get_all(self) -> List[LoadPattern]:
        return [
            LoadPattern(name, self.get_load_type(name), self.get_self_weight_multiplier(name))
            for name in self.get_name_list()
        ]


__all__ = ["LoadPatternManager"]
