#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Group definitions, group membership and the selection.
"""

from .group_definitions import GroupManager
from .models import OBJECT_COMPONENTS, Group, ObjectRef
from .selection import SelectionManager

__all__ = [
    "GroupManager",
    "SelectionManager",
    "OBJECT_COMPONENTS",
    "Group",
    "ObjectRef",
]
