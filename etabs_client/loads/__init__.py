#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Load pattern, load case and load combination managers.
"""

from .cases import LoadCaseManager
from .combos import LoadComboManager
from .models import CaseLoad, ComboItem, LoadCombination, LoadPattern
from .patterns import LoadPatternManager

__all__ = [
    "LoadCaseManager",
    "LoadComboManager",
    "LoadPatternManager",
    "CaseLoad",
    "ComboItem",
    "LoadCombination",
    "LoadPattern",
]
