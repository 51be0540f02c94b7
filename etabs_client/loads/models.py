#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Records for load patterns, load cases and combinations.
"""

from dataclasses import dataclass
from typing import Tuple

from ..common.enums import CNameType, LoadPatternType


@dataclass(frozen=True)
class LoadPattern:
    name: str
    pattern_type: LoadPatternType
    self_weight_multiplier: float = 0.0

    @property
    def includes_self_weight(self) -> bool:
        return self.self_weight_multiplier != 0.0


@dataclass(frozen=True)
class CaseLoad:
    """One load entry of a linear static case: a pattern (or acceleration) and its scale factor."""

    load_name: str
    scale_factor: float = 1.0
    load_type: str = "Load"


@dataclass(frozen=True)
class ComboItem:
    """One case or combination inside a load combination."""

    name: str
    scale_factor: float
    item_type: CNameType = CNameType.LoadCase


@dataclass(frozen=True)
class LoadCombination:
    name: str
    items: Tuple[ComboItem, ...]


__all__ = ["LoadPattern", "CaseLoad", "ComboItem", "LoadCombination"]
