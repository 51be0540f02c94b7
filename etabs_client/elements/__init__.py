#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Object-level managers: points, frames, areas and stories.
"""

from .areas import AreaObjectManager
from .frames import FrameObjectManager
from .models import (
    Area,
    AreaUniformLoad,
    Frame,
    FrameDistributedLoad,
    FrameEndRelease,
    FramePointLoad,
    FrameReleases,
    Point,
    PointLoadForce,
    PointRestraint,
    StoryData,
    StoryInfo,
)
from .points import PointObjectManager
from .stories import StoryManager

__all__ = [
    "AreaObjectManager",
    "FrameObjectManager",
    "PointObjectManager",
    "StoryManager",
    "Area",
    "AreaUniformLoad",
    "Frame",
    "FrameDistributedLoad",
    "FrameEndRelease",
    "FramePointLoad",
    "FrameReleases",
    "Point",
    "PointLoadForce",
    "PointRestraint",
    "StoryData",
    "StoryInfo",
]
