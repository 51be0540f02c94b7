#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The ETABS selection (SelectObj), plus selecting single points, frames and areas.
"""

from typing import List

from ..common import validators as v
from ..common.enums import ItemType, ObjectType
from ..common.manager_base import BaseManager
from .models import ObjectRef, object_component, object_row, unsupported_object_type


class SelectionManager(BaseManager):
    subsystem = "Selection"

    def select_all(self, deselect: bool = False) -> None:
        self._adapter.call_scalar("All", lambda m: m.SelectObj.All(bool(deselect)))

    def clear_selection(self) -> None:
        self._adapter.call_scalar("ClearSelection", lambda m: m.SelectObj.ClearSelection())

    def invert_selection(self) -> None:
        self._adapter.call_scalar("InvertSelection", lambda m: m.SelectObj.InvertSelection())

    def previous_selection(self) -> None:
        """Bring back the selection as it was before the last change."""
        self._adapter.call_scalar("PreviousSelection", lambda m: m.SelectObj.PreviousSelection())

    def select_group(self, group: str, deselect: bool = False) -> None:
        self._adapter.call_scalar(
            "Group",
            lambda m: m.SelectObj.Group(group, bool(deselect)),
            validators=(v.not_blank("group", group),),
        )

    def set_selected(self, object_type: ObjectType, name: str, selected: bool = True,
                     item_type: ItemType = ItemType.Objects) -> None:
        object_type = self._coerce(ObjectType, object_type, "object_type", "SetSelected")
        item_type = self._coerce(ItemType, item_type, "item_type", "SetSelected")
        component = object_component(object_type)
        self._adapter.call_scalar(
            "SetSelected",
            lambda m: getattr(m, component).SetSelected(name, bool(selected), self._enum(item_type)),
            validators=(
                v.satisfies("object_type", object_type, unsupported_object_type),
                v.not_blank("name", name),
            ),
            inputs={"object_type": object_type.name, "name": name, "selected": selected},
        )

    def get_selected(self) -> List[ObjectRef]:
        return self._adapter.call_rows(
            "GetSelected",
            lambda m: m.SelectObj.GetSelected(0, [], []),
            ObjectRef,
            ("object_type", "name"),
            transform=object_row,
        )

    def selected_names(self, object_type: ObjectType) -> List[str]:
        object_type = self._coerce(ObjectType, object_type, "object_type", "GetSelected")
        return [ref.name for ref in self.get_selected() if ref.object_type is object_type]

    def count_selected(self) -> int:
        return len(self.get_selected())


__all__ = ["SelectionManager"]
