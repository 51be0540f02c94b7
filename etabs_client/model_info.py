#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Model-level operations: file handling, units, lock state and version.
"""

from typing import Tuple

from .common import validators as v
from .common.enums import Units
from .common.manager_base import BaseManager
from .common.utility_functions import enum_int


def _units(raw) -> Units:
    return Units(enum_int(raw))


class ModelInfoManager(BaseManager):
    subsystem = "ModelInfo"

    # ---------------------------------------------------------------- queries

    def get_model_filename(self, include_path: bool = True) -> str:
        return self._adapter.call_value(
            "GetModelFilename",
            lambda m: m.GetModelFilename(bool(include_path)),
            convert=lambda raw: str(raw or ""),
        )

    def get_version(self) -> Tuple[str, float]:
        """(version string, version number), e.g. ``("22.1.0", 22.1)``."""
        return self._adapter.call_scalar(
            "GetVersion",
            lambda m: m.GetVersion("", 0.0),
            extract=lambda out: (str(out[0]), float(out[1])),
        )

    def get_present_units(self) -> Units:
        return self._adapter.call_value("GetPresentUnits", lambda m: m.GetPresentUnits(), convert=_units)

    def set_present_units(self, units: Units) -> None:
        units = self._coerce(Units, units, "units", "SetPresentUnits")
        self._adapter.call_scalar(
            "SetPresentUnits",
            lambda m: m.SetPresentUnits(self._enum(units)),
            inputs={"units": units.name},
        )

    def get_model_is_locked(self) -> bool:
        return self._adapter.call_value("GetModelIsLocked", lambda m: m.GetModelIsLocked(), convert=bool)

    def set_model_is_locked(self, locked: bool) -> None:
        self._adapter.call_scalar("SetModelIsLocked", lambda m: m.SetModelIsLocked(bool(locked)))

    # ---------------------------------------------------------------- new model / files

    def initialize_new_model(self, units: Units = Units.kN_m_C) -> None:
        """Clear the current model and set its database units."""
        units = self._coerce(Units, units, "units", "InitializeNewModel")
        self._log.info("Initializing a new model (%s).", units.name)
        self._adapter.call_scalar(
            "InitializeNewModel",
            lambda m: m.InitializeNewModel(self._enum(units)),
            inputs={"units": units.name},
        )

    def new_blank(self) -> None:
        self._adapter.call_scalar("NewBlank", lambda m: m.File.NewBlank())

    def new_grid_only(self, num_stories: int, typical_story_height: float, bottom_story_height: float,
                      num_lines_x: int, num_lines_y: int, spacing_x: float, spacing_y: float) -> None:
        """Create a grid-only model: story count and heights, then X/Y grid lines and spacing."""
        self._adapter.call_scalar(
            "NewGridOnly",
            lambda m: m.File.NewGridOnly(int(num_stories), float(typical_story_height),
                                         float(bottom_story_height), int(num_lines_x), int(num_lines_y),
                                         float(spacing_x), float(spacing_y)),
            validators=(
                v.positive("num_stories", num_stories),
                v.positive("typical_story_height", typical_story_height),
                v.positive("bottom_story_height", bottom_story_height),
                v.positive("num_lines_x", num_lines_x),
                v.positive("num_lines_y", num_lines_y),
                v.positive("spacing_x", spacing_x),
                v.positive("spacing_y", spacing_y),
            ),
            inputs={"num_stories": num_stories, "num_lines_x": num_lines_x, "num_lines_y": num_lines_y},
        )
        self._log.info("Grid-only model created (%d stories, %d x %d grid lines).",
                       num_stories, num_lines_x, num_lines_y)

    def save(self, path: str = "") -> None:
        """Save the model; an empty path saves under the current file name."""
        self._adapter.call_scalar("Save", lambda m: m.File.Save(path or ""), inputs={"path": path})
        self._log.info("Model saved%s.", f" to {path}" if path else "")

    def open(self, path: str) -> None:
        self._adapter.call_scalar(
            "OpenFile",
            lambda m: m.File.OpenFile(path),
            validators=(v.not_blank("path", path),),
            inputs={"path": path},
        )
        self._log.info("Model opened: %s", path)


__all__ = ["ModelInfoManager"]
