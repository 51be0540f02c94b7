#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Material properties (PropMaterial).
"""

from typing import List

from ..common import validators as v
from ..common.enums import MatType, WeightOrMass
from ..common.exceptions import EngineRejectedError
from ..common.manager_base import BaseManager
from ..common.utility_functions import enum_int
from .models import IsotropicProperties, Material


class MaterialManager(BaseManager):
    subsystem = "Materials"

    def set_material(self, name: str, material_type: MatType, color: int = -1, notes: str = "") -> None:
        """Create a material (or redefine an existing one) of the given type."""
        material_type = self._coerce(MatType, material_type, "material_type", "SetMaterial")
        self._adapter.call_scalar(
            "SetMaterial",
            lambda m: m.PropMaterial.SetMaterial(name, self._enum(material_type), int(color), notes or "", ""),
            validators=(v.not_blank("name", name),),
            inputs={"name": name, "material_type": material_type.name},
        )

    def get_material(self, name: str) -> Material:
        return self._adapter.call_scalar(
            "GetMaterial",
            lambda m: m.PropMaterial.GetMaterial(name, self._enum(MatType.Concrete), 0, "", ""),
            validators=(v.not_blank("name", name),),
            extract=lambda out: Material(name, MatType(enum_int(out[0])), int(out[1]), str(out[2] or ""),
                                         str(out[3] or "")),
        )

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.PropMaterial.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.PropMaterial.Count())

    def exists(self, name: str) -> bool:
        if not name:
            return False
        return name in self.get_name_list()

    def delete(self, name: str) -> None:
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.PropMaterial.Delete(name),
            validators=(v.not_blank("name", name),),
        )

    def change_name(self, name: str, new_name: str) -> None:
        self._adapter.call_scalar(
            "ChangeName",
            lambda m: m.PropMaterial.ChangeName(name, new_name),
            validators=(v.not_blank("name", name), v.not_blank("new_name", new_name)),
        )

    def set_isotropic(self, name: str, props: IsotropicProperties) -> None:
        self._adapter.call_scalar(
            "SetMPIsotropic",
            lambda m: m.PropMaterial.SetMPIsotropic(name, float(props.e), float(props.poisson),
                                                    float(props.thermal_coefficient), 0.0),
            validators=(
                v.not_blank("name", name),
                v.is_instance("props", props, IsotropicProperties),
                v.positive("e", getattr(props, "e", None)),
                v.in_range("poisson", getattr(props, "poisson", None), -1.0, 0.5),
                v.finite("thermal_coefficient", getattr(props, "thermal_coefficient", None)),
            ),
            inputs={"name": name, "props": props},
        )

    def get_isotropic(self, name: str) -> IsotropicProperties:
        return self._adapter.call_scalar(
            "GetMPIsotropic",
            lambda m: m.PropMaterial.GetMPIsotropic(name, 0.0, 0.0, 0.0, 0.0, 0.0),
            validators=(v.not_blank("name", name),),
            extract=lambda out: IsotropicProperties(float(out[0]), float(out[1]), float(out[2]), float(out[3])),
        )

    def set_weight_and_mass(self, name: str, option: WeightOrMass, value: float) -> None:
        """Unit weight (option Weight) or unit mass (option Mass) of a material."""
        option = self._coerce(WeightOrMass, option, "option", "SetWeightAndMass")
        self._adapter.call_scalar(
            "SetWeightAndMass",
            lambda m: m.PropMaterial.SetWeightAndMass(name, int(option), float(value), 0.0),
            validators=(v.not_blank("name", name), v.non_negative("value", value)),
        )

    def ensure_material(self, name: str, material_type: MatType) -> bool:
        """Create the material when it is missing; returns True if it was created."""
        if self.exists(name):
            return False
        try:
            self.set_material(name, material_type)
        except EngineRejectedError:
            if self.exists(name):
                self._log.info("Material %s already defined.", name)
                return False
            raise
        return True


__all__ = ["MaterialManager"]
