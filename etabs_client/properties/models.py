#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Records for material and section properties.
"""

from dataclasses import dataclass
from typing import Optional

from ..common.enums import MatType


@dataclass(frozen=True)
class Material:
    name: str
    material_type: MatType
    color: int = -1
    notes: str = ""
    guid: str = ""


@dataclass(frozen=True)
class IsotropicProperties:
    """Mechanical properties of an isotropic material."""

    e: float
    poisson: float
    thermal_coefficient: float
    g: Optional[float] = None

    @property
    def shear_modulus(self) -> float:
        if self.g is not None:
            return self.g
        return self.e / (2.0 * (1.0 + self.poisson))


@dataclass(frozen=True)
class RectangleSection:
    name: str
    material: str
    depth: float  # t3
    width: float  # t2
    color: int = -1
    notes: str = ""
    guid: str = ""

    @property
    def area(self) -> float:
        return self.depth * self.width


__all__ = ["Material", "IsotropicProperties", "RectangleSection"]
