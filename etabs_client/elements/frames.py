#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Frame objects: creation, sections, end releases and member loads.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..common import validators as v
from ..common.enums import ItemType
from ..common.exceptions import EtabsError
from ..common.manager_base import BaseManager
from ..common.result_zipper import field_equals
from .models import (
    Frame,
    FrameDistributedLoad,
    FrameEndRelease,
    FramePointLoad,
    FrameReleases,
    distance,
)

_ALL_FRAMES_FIELDS = (
    "name", "section", "story", "point_i", "point_j",
    "xi", "yi", "zi", "xj", "yj", "zj",
    None, None, None, None, None, None, None, None,  # angle, offsets, cardinal point
)


def _frame_row(raw: Dict[str, Any]) -> Dict[str, Any]:
    start = (raw.pop("xi"), raw.pop("yi"), raw.pop("zi"))
    end = (raw.pop("xj"), raw.pop("yj"), raw.pop("zj"))
    raw["length"] = distance(start, end)
    return raw


def _releases_problem(releases: Any) -> Optional[str]:
    if not isinstance(releases, FrameReleases):
        return "must be a FrameReleases"
    return releases.instability()


def _coords_problem(point: Sequence[float]) -> Optional[str]:
    try:
        if len(point) != 3:
            return "must be an (x, y, z) triple"
        [float(c) for c in point]
    except (TypeError, ValueError):
        return "must be an (x, y, z) triple of numbers"
    return None


class FrameObjectManager(BaseManager):
    subsystem = "Frames"

    # ---------------------------------------------------------------- creation

    def add_frame(self, point_i: str, point_j: str, section: str = "Default", user_name: str = "") -> str:
        """Add a frame between two existing points; returns the name ETABS assigned."""
        return self._adapter.call_scalar(
            "AddByPoint",
            lambda m: m.FrameObj.AddByPoint(point_i, point_j, "", section, user_name or ""),
            validators=(
                v.not_blank("point_i", point_i),
                v.not_blank("point_j", point_j),
                v.satisfies("point_j", point_j,
                            lambda p: "end points must differ" if p == point_i else None),
                v.not_blank("section", section),
            ),
            extract=lambda out: str(out[0]),
            inputs={"point_i": point_i, "point_j": point_j, "section": section},
        )

    def add_frame_by_coordinates(self, start: Sequence[float], end: Sequence[float], section: str = "Default",
                                 user_name: str = "", coordinate_system: str = "Global") -> str:
        def _invoke(m):
            (xi, yi, zi), (xj, yj, zj) = [map(float, p) for p in (start, end)]
            return m.FrameObj.AddByCoord(xi, yi, zi, xj, yj, zj, "", section, user_name or "", coordinate_system)

        return self._adapter.call_scalar(
            "AddByCoord",
            _invoke,
            validators=(
                v.satisfies("start", start, _coords_problem),
                v.satisfies("end", end, _coords_problem),
                v.satisfies("end", end, lambda p: "frame has zero length"
                            if _coords_problem(start) is None and distance(start, p) == 0 else None),
                v.not_blank("section", section),
            ),
            extract=lambda out: str(out[0]),
            inputs={"start": start, "end": end, "section": section},
        )

    def change_name(self, name: str, new_name: str) -> None:
        self._adapter.call_scalar(
            "ChangeName",
            lambda m: m.FrameObj.ChangeName(name, new_name),
            validators=(v.not_blank("name", name), v.not_blank("new_name", new_name)),
        )

    def delete(self, name: str, item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "Delete")
        self._adapter.call_scalar(
            "Delete",
            lambda m: m.FrameObj.Delete(name, self._enum(item_type)),
            validators=(v.not_blank("name", name),),
        )

    # ---------------------------------------------------------------- queries

    def get_points(self, name: str):
        return self._adapter.call_scalar(
            "GetPoints",
            lambda m: m.FrameObj.GetPoints(name, "", ""),
            validators=(v.not_blank("name", name),),
            extract=lambda out: (str(out[0]), str(out[1])),
        )

    def get_frame(self, name: str) -> Frame:
        point_i, point_j = self.get_points(name)
        section = self.get_section(name)
        story = None
        try:
            story = self._adapter.call_scalar(
                "GetLabelFromName",
                lambda m: m.FrameObj.GetLabelFromName(name, "", ""),
                extract=lambda out: str(out[1]),
            )
        except EtabsError as exc:
            self._log.debug("Story lookup for frame %s failed: %s", name, exc)
        coords = [
            self._adapter.call_scalar(
                "GetCoordCartesian",
                lambda m, p=p: m.PointObj.GetCoordCartesian(p, 0.0, 0.0, 0.0, "Global"),
                extract=lambda out: (float(out[0]), float(out[1]), float(out[2])),
            )
            for p in (point_i, point_j)
        ]
        length = distance(coords[0], coords[1])
        return Frame(name, point_i, point_j, section, story, length)

    def get_all_frames(self) -> List[Frame]:
        return self._adapter.call_rows(
            "GetAllFrames",
            lambda m: m.FrameObj.GetAllFrames(0, *([[]] * 19), "Global"),
            Frame,
            _ALL_FRAMES_FIELDS,
            transform=_frame_row,
        )

    def get_name_list(self) -> List[str]:
        return self._name_list("GetNameList", lambda m: m.FrameObj.GetNameList(0, []))

    def count(self) -> int:
        return self._count("Count", lambda m: m.FrameObj.Count())

    # ---------------------------------------------------------------- sections

    def set_section(self, name: str, section: str, item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "SetSection")
        self._adapter.call_scalar(
            "SetSection",
            lambda m: m.FrameObj.SetSection(name, section, self._enum(item_type), 0.0, 0.0),
            validators=(v.not_blank("name", name), v.not_blank("section", section)),
            inputs={"name": name, "section": section},
        )

    def get_section(self, name: str) -> str:
        return self._adapter.call_scalar(
            "GetSection",
            lambda m: m.FrameObj.GetSection(name, "", ""),
            validators=(v.not_blank("name", name),),
            extract=lambda out: str(out[0]),
        )

    # ---------------------------------------------------------------- releases

    def set_releases(self, name: str, releases: FrameReleases, item_type: ItemType = ItemType.Objects) -> None:
        """Assign end releases; unstable combinations are refused before ETABS is called."""
        item_type = self._coerce(ItemType, item_type, "item_type", "SetReleases")

        def _invoke(m):
            return m.FrameObj.SetReleases(
                name,
                releases.i_end.flags(),
                releases.j_end.flags(),
                list(releases.i_end.fixity),
                list(releases.j_end.fixity),
                self._enum(item_type),
            )

        self._adapter.call_scalar(
            "SetReleases",
            _invoke,
            validators=(v.not_blank("name", name), v.satisfies("releases", releases, _releases_problem)),
            inputs={"name": name, "releases": str(releases)},
        )

    def get_releases(self, name: str) -> Optional[FrameReleases]:
        """End releases of a frame, or None when neither end is released."""

        def _extract(out):
            releases = FrameReleases(
                FrameEndRelease.from_values(out[0], out[2]),
                FrameEndRelease.from_values(out[1], out[3]),
            )
            return releases if releases.any_released else None

        return self._adapter.call_scalar(
            "GetReleases",
            lambda m: m.FrameObj.GetReleases(name, [], [], [], []),
            validators=(v.not_blank("name", name),),
            extract=_extract,
        )

    def delete_releases(self, name: str, item_type: ItemType = ItemType.Objects) -> None:
        """Make both ends fully fixed."""
        self.set_releases(name, FrameReleases(), item_type)

    # ---------------------------------------------------------------- loads

    def set_load_distributed(self, name: str, load: FrameDistributedLoad, replace: bool = True,
                             item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "SetLoadDistributed")

        def _invoke(m):
            return m.FrameObj.SetLoadDistributed(
                name, load.load_pattern, int(load.load_type), int(load.direction),
                float(load.start_distance), float(load.end_distance),
                float(load.start_load), float(load.end_load),
                load.coordinate_system, bool(load.is_relative_distance), bool(replace),
                self._enum(item_type),
            )

        self._adapter.call_scalar(
            "SetLoadDistributed",
            _invoke,
            validators=(
                v.not_blank("name", name),
                v.is_instance("load", load, FrameDistributedLoad),
                v.satisfies("load", load, lambda ld: ld.problems()),
            ),
            inputs={"name": name, "load": load},
        )

    def get_load_distributed(self, name: str, load_pattern: str = "") -> List[FrameDistributedLoad]:
        """
        Distributed loads on a frame, optionally only those of `load_pattern`.

        ETABS reports both relative and absolute distances per row but not which
        form the load was assigned in; rows carry the relative pair plus the absolute one.
        """
        return self._adapter.call_rows(
            "GetLoadDistributed",
            lambda m: m.FrameObj.GetLoadDistributed(name, 0, *([[]] * 11), self._enum(ItemType.Objects)),
            FrameDistributedLoad,
            ("frame_name", "load_pattern", "load_type", "coordinate_system", "direction",
             "start_distance", "end_distance", "absolute_start", "absolute_end", "start_load", "end_load"),
            post_filter=field_equals("load_pattern", load_pattern),
            validators=(v.not_blank("name", name),),
        )

    def delete_load_distributed(self, name: str, load_pattern: str, item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "DeleteLoadDistributed")
        self._adapter.call_scalar(
            "DeleteLoadDistributed",
            lambda m: m.FrameObj.DeleteLoadDistributed(name, load_pattern, self._enum(item_type)),
            validators=(v.not_blank("name", name), v.not_blank("load_pattern", load_pattern)),
        )

    def set_load_point(self, name: str, load: FramePointLoad, replace: bool = True,
                       item_type: ItemType = ItemType.Objects) -> None:
        item_type = self._coerce(ItemType, item_type, "item_type", "SetLoadPoint")

        def _invoke(m):
            return m.FrameObj.SetLoadPoint(
                name, load.load_pattern, int(load.load_type), int(load.direction),
                float(load.distance), float(load.value), load.coordinate_system,
                bool(load.is_relative_distance), bool(replace), self._enum(item_type),
            )

        self._adapter.call_scalar(
            "SetLoadPoint",
            _invoke,
            validators=(
                v.not_blank("name", name),
                v.is_instance("load", load, FramePointLoad),
                v.satisfies("load", load, lambda ld: ld.problems()),
            ),
            inputs={"name": name, "load": load},
        )

    def get_load_point(self, name: str, load_pattern: str = "") -> List[FramePointLoad]:
        return self._adapter.call_rows(
            "GetLoadPoint",
            lambda m: m.FrameObj.GetLoadPoint(name, 0, *([[]] * 8), self._enum(ItemType.Objects)),
            FramePointLoad,
            ("frame_name", "load_pattern", "load_type", "coordinate_system", "direction",
             "distance", "absolute_distance", "value"),
            post_filter=field_equals("load_pattern", load_pattern),
            validators=(v.not_blank("name", name),),
        )


__all__ = ["FrameObjectManager"]
