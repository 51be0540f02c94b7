#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Material and section property managers.
"""

from .area_sections import AreaSectionManager
from .frame_sections import FrameSectionManager
from .materials import MaterialManager
from .models import IsotropicProperties, Material, RectangleSection

__all__ = [
    "AreaSectionManager",
    "FrameSectionManager",
    "MaterialManager",
    "IsotropicProperties",
    "Material",
    "RectangleSection",
]
