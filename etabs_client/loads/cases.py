#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load cases (LoadCases).
"""

from typing import List, Optional, Sequence

from ..common import validators as v
from ..common.exceptions import EtabsError
from ..common.manager_base import BaseManager
from .models import CaseLoad


def _loads_problem(loads) -> Optional[str]:
    if loads is None or len(loads) == 0:
        return "at least one load is required"
    for load in loads:
        if not isinstance(load, CaseLoad) or not load.load_name:
            return "every load must be a CaseLoad with a load name"
    return None


class LoadCaseManager(BaseManager):
    subsystem = "LoadCases"

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.LoadCases.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.LoadCases.Count())

    def exists(self, name: str) -> bool:
        return bool(name) and name in self.get_name_list()

    def delete(self, name: str) -> None:
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.LoadCases.Delete(name),
            validators=(v.not_blank("name", name),),
        )

    def get_static_linear_loads(self, name: str) -> List[CaseLoad]:
        """Loads of a linear static case, in the order ETABS stores them."""
        return self._adapter.call_rows(
            "StaticLinear.GetLoads",
            lambda m: m.LoadCases.StaticLinear.GetLoads(name, 0, [], [], []),
            CaseLoad,
            ("load_type", "load_name", "scale_factor"),
            transform=lambda raw: {**raw, "load_type": str(raw["load_type"]),
                                   "scale_factor": float(raw["scale_factor"])},
            validators=(v.not_blank("name", name),),
        )

    def set_static_linear(self, name: str, loads: Sequence[CaseLoad]) -> None:
        """
        Define (or redefine) a linear static case and its scaled loads.

        SetCase resets an existing case, so a rejected SetLoads would leave it empty.
        When that happens a new case is deleted again and an existing one gets its
        previous loads back; the SetLoads error is raised either way.
        """
        self._adapter.validate(
            "StaticLinear.SetCase",
            (v.not_blank("name", name), v.satisfies("loads", loads, _loads_problem)),
            inputs={"name": name},
        )
        loads = list(loads)
        previous = self._loads_before_reset(name)
        self._adapter.call_scalar(
            "StaticLinear.SetCase",
            lambda m: m.LoadCases.StaticLinear.SetCase(name),
            inputs={"name": name},
        )
        try:
            self._set_loads(name, loads)
        except EtabsError:
            self._restore(name, previous)
            raise

    def _set_loads(self, name: str, loads: List[CaseLoad]) -> None:
        self._adapter.call_scalar(
            "StaticLinear.SetLoads",
            lambda m: m.LoadCases.StaticLinear.SetLoads(
                name, len(loads), [ld.load_type for ld in loads], [ld.load_name for ld in loads],
                [float(ld.scale_factor) for ld in loads],
            ),
            inputs={"name": name, "loads": len(loads)},
        )

    def _loads_before_reset(self, name: str) -> Optional[List[CaseLoad]]:
        """None for a case that does not exist yet."""
        if not self.exists(name):
            return None
        try:
            return self.get_static_linear_loads(name)
        except EtabsError as exc:
            self._log.warning("Could not read the loads of case '%s' before redefining it: %s", name, exc)
            return []

    def _restore(self, name: str, previous: Optional[List[CaseLoad]]) -> None:
        try:
            if previous is None:
                self.delete(name)
            elif previous:
                self._set_loads(name, previous)
        except EtabsError as exc:
            self._log.warning("Could not restore load case '%s' after a failed SetLoads: %s", name, exc)


__all__ = ["LoadCaseManager"]
