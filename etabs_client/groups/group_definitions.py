#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Groups (GroupDef): definitions, and membership of points, frames and areas.
"""

from typing import List

from ..common import validators as v
from ..common.enums import ItemType, ObjectType
from ..common.manager_base import BaseManager
from .models import Group, ObjectRef, object_component, object_row, unsupported_object_type


class GroupManager(BaseManager):
    subsystem = "Groups"

    # ---------------------------------------------------------------- definitions

    def set_group(self, group: Group) -> None:
        """Create `group`, or update the color and flags of an existing one (its members are kept)."""
        self._adapter.call_scalar(
            "SetGroup_1",
            lambda m: m.GroupDef.SetGroup_1(group.name, int(group.color), *group.flags()),
            validators=(
                v.is_instance("group", group, Group),
                v.not_blank("name", getattr(group, "name", None)),
            ),
            inputs={"group": group},
        )

    def define(self, name: str, color: int = -1, for_selection: bool = True, for_design: bool = True) -> Group:
        group = Group.simple(name, color, for_selection, for_design)
        self.set_group(group)
        return group

    def get_group(self, name: str) -> Group:
        return self._adapter.call_scalar(
            "GetGroup_1",
            lambda m: m.GroupDef.GetGroup_1(name, 0, *([False] * 13)),
            validators=(v.not_blank("name", name),),
            extract=lambda out: Group(name, int(out[0]), *[bool(flag) for flag in out[1:14]]),
        )

    def delete(self, name: str) -> None:
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.GroupDef.Delete(name),
            validators=(v.not_blank("name", name),),
        )

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.GroupDef.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.GroupDef.Count())

    def exists(self, name: str) -> bool:
        return bool(name) and name in self.get_name_list()

    # ---------------------------------------------------------------- membership

    def get_assignments(self, name: str) -> List[ObjectRef]:
        """Every object in group `name`, of any type, in ETABS order."""
        return self._adapter.call_rows(
            "GetAssignments",
            lambda m: m.GroupDef.GetAssignments(name, 0, [], []),
            ObjectRef,
            ("object_type", "name"),
            transform=object_row,
            validators=(v.not_blank("name", name),),
        )

    def get_assigned_names(self, name: str, object_type: ObjectType) -> List[str]:
        object_type = self._coerce(ObjectType, object_type, "object_type", "GetAssignments")
        return [ref.name for ref in self.get_assignments(name) if ref.object_type is object_type]

    def assign(self, group: str, object_type: ObjectType, object_name: str, remove: bool = False,
               item_type: ItemType = ItemType.Objects) -> None:
        """
        Add an object to `group`, or take it out with `remove=True`.

        With `item_type` Group, `object_name` names another group whose objects of
        `object_type` are assigned; with SelectedObjects the selected ones are and
        `object_name` is ignored.
        """
        object_type = self._coerce(ObjectType, object_type, "object_type", "SetGroupAssign")
        item_type = self._coerce(ItemType, item_type, "item_type", "SetGroupAssign")
        component = object_component(object_type)

        self._adapter.call_scalar(
            "SetGroupAssign",
            lambda m: getattr(m, component).SetGroupAssign(object_name or "", group, bool(remove),
                                                           self._enum(item_type)),
            validators=(
                v.not_blank("group", group),
                v.satisfies("object_type", object_type, unsupported_object_type),
                v.satisfies("object_name", object_name,
                            lambda n: None if item_type is ItemType.SelectedObjects or n
                            else "cannot be null or empty"),
            ),
            inputs={"group": group, "object_type": object_type.name, "object_name": object_name},
        )

    def assign_many(self, group: str, objects: List[ObjectRef]) -> None:
        """Add several objects to `group`; stops at the first one ETABS rejects."""
        for ref in objects:
            self.assign(group, ref.object_type, ref.name)

    def groups_containing(self, object_type: ObjectType, object_name: str) -> List[str]:
        object_type = self._coerce(ObjectType, object_type, "object_type", "GetAssignments")
        target = ObjectRef(object_type, object_name)
        return [name for name in self.get_name_list() if target in self.get_assignments(name)]


__all__ = ["GroupManager"]
