#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Story definitions.
"""

from typing import Any, Dict, List, Optional

from ..common import validators as v
from ..common.manager_base import BaseManager
from ..common.result_zipper import RowSet, zip_rows
from .models import StoryData, StoryInfo

_STORY_FIELDS = ("name", "elevation", "height", "is_master", "similar_to", "splice_above", "splice_height", "color")


def _story_row(raw: Dict[str, Any]) -> Dict[str, Any]:
    raw["is_master"] = bool(raw["is_master"])
    raw["splice_above"] = bool(raw["splice_above"])
    raw["similar_to"] = raw["similar_to"] or ""
    raw["splice_height"] = float(raw["splice_height"] or 0.0)
    raw["color"] = int(raw["color"] or 0)
    return raw


class StoryManager(BaseManager):
    subsystem = "Stories"

    def get_stories(self) -> StoryData:
        """Base elevation plus every story, bottom to top as ETABS lists them."""

        def _extract(out):
            # GetStories_2 puts the base elevation ahead of the row count
            rowset = RowSet.from_outputs(out, count_index=1, width=len(_STORY_FIELDS))
            stories = zip_rows(rowset, StoryInfo, _STORY_FIELDS, optional=("splice_height", "color"),
                               transform=_story_row, operation="GetStories_2")
            return StoryData(float(out[0]), tuple(stories))

        return self._adapter.call_scalar(
            "GetStories_2",
            lambda m: m.Story.GetStories_2(0.0, 0, [], [], [], [], [], [], [], []),
            extract=_extract,
        )

    def get_story(self, name: str) -> Optional[StoryInfo]:
        if not name:
            return None
        return next((s for s in self.get_stories().stories if s.name == name), None)

    def get_names(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.Story.GetNameList(0, []))

    def count(self) -> int:
        return len(self.get_names())

    def get_elevation(self, name: str) -> float:
        return self._adapter.call_scalar(
            "GetElevation",
            lambda m: m.Story.GetElevation(name, 0.0),
            validators=(v.not_blank("name", name),),
            extract=lambda out: float(out[0]),
        )

    def get_height(self, name: str) -> float:
        return self._adapter.call_scalar(
            "GetHeight",
            lambda m: m.Story.GetHeight(name, 0.0),
            validators=(v.not_blank("name", name),),
            extract=lambda out: float(out[0]),
        )

    def set_elevation(self, name: str, elevation: float) -> None:
        self._adapter.call_scalar(
            "SetElevation",
            lambda m: m.Story.SetElevation(name, float(elevation)),
            validators=(v.not_blank("name", name), v.finite("elevation", elevation)),
        )

    def set_height(self, name: str, height: float) -> None:
        self._adapter.call_scalar(
            "SetHeight",
            lambda m: m.Story.SetHeight(name, float(height)),
            validators=(v.not_blank("name", name), v.positive("height", height)),
        )


__all__ = ["StoryManager"]
