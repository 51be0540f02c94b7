#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Analysis results (Results and Results.Setup).

Select the cases/combinations for output first; every getter then returns one
record per result row, optionally only the rows of one load case.
"""

from typing import List, Optional

from ..common import validators as v
from ..common.enums import ItemTypeElm
from ..common.manager_base import BaseManager
from ..common.result_zipper import field_equals
from .models import (
    BaseReactionResult,
    FrameForceResult,
    JointDisplacementResult,
    JointReactionResult,
    ModalMassRatioResult,
    ModalPeriodResult,
    StoryDriftResult,
)

_JOINT_HEAD = ("object_name", "element_name", "load_case", "step_type", "step_num")
_MODAL_HEAD = ("load_case", "step_type", "step_num")


class AnalysisResultsManager(BaseManager):
    subsystem = "AnalysisResults"

    # ---------------------------------------------------------------- output selection

    def deselect_all_cases_and_combos(self) -> None:
        self._adapter.call_scalar(
            "DeselectAllCasesAndCombosForOutput",
            lambda m: m.Results.Setup.DeselectAllCasesAndCombosForOutput(),
        )

    def set_case_selected(self, case_name: str, selected: bool = True) -> None:
        self._adapter.call_scalar(
            "SetCaseSelectedForOutput",
            lambda m: m.Results.Setup.SetCaseSelectedForOutput(case_name, bool(selected)),
            validators=(v.not_blank("case_name", case_name),),
        )

    def set_combo_selected(self, combo_name: str, selected: bool = True) -> None:
        self._adapter.call_scalar(
            "SetComboSelectedForOutput",
            lambda m: m.Results.Setup.SetComboSelectedForOutput(combo_name, bool(selected)),
            validators=(v.not_blank("combo_name", combo_name),),
        )

    def select_cases(self, case_names) -> None:
        """Deselect everything, then select `case_names` for output."""
        self.deselect_all_cases_and_combos()
        for case in case_names:
            self.set_case_selected(case)

    # ---------------------------------------------------------------- joint / frame results

    def get_joint_displacements(self, name: str = "All", item_type: ItemTypeElm = ItemTypeElm.ObjectElm,
                                load_case: Optional[str] = None) -> List[JointDisplacementResult]:
        item_type = self._coerce(ItemTypeElm, item_type, "item_type", "JointDispl")
        return self._adapter.call_rows(
            "JointDispl",
            lambda m: m.Results.JointDispl(name, self._enum(item_type), 0, *([[]] * 11)),
            JointDisplacementResult,
            _JOINT_HEAD + ("u1", "u2", "u3", "r1", "r2", "r3"),
            post_filter=field_equals("load_case", load_case),
            validators=(v.not_blank("name", name),),
            inputs={"name": name, "item_type": item_type.name},
        )

    def get_joint_reactions(self, name: str = "All", item_type: ItemTypeElm = ItemTypeElm.ObjectElm,
                            load_case: Optional[str] = None) -> List[JointReactionResult]:
        item_type = self._coerce(ItemTypeElm, item_type, "item_type", "JointReact")
        return self._adapter.call_rows(
            "JointReact",
            lambda m: m.Results.JointReact(name, self._enum(item_type), 0, *([[]] * 11)),
            JointReactionResult,
            _JOINT_HEAD + ("f1", "f2", "f3", "m1", "m2", "m3"),
            post_filter=field_equals("load_case", load_case),
            validators=(v.not_blank("name", name),),
        )

    def get_frame_forces(self, name: str, item_type: ItemTypeElm = ItemTypeElm.ObjectElm,
                         load_case: Optional[str] = None) -> List[FrameForceResult]:
        item_type = self._coerce(ItemTypeElm, item_type, "item_type", "FrameForce")
        return self._adapter.call_rows(
            "FrameForce",
            lambda m: m.Results.FrameForce(name, self._enum(item_type), 0, *([[]] * 13)),
            FrameForceResult,
            ("object_name", "object_station", "element_name", "element_station", "load_case", "step_type",
             "step_num", "p", "v2", "v3", "t", "m2", "m3"),
            post_filter=field_equals("load_case", load_case),
            validators=(v.not_blank("name", name),),
        )

    def get_base_reactions(self, load_case: Optional[str] = None) -> List[BaseReactionResult]:
        # trailing gx, gy, gz (reaction location) are not part of the rows
        return self._adapter.call_rows(
            "BaseReact",
            lambda m: m.Results.BaseReact(0, [], [], [], [], [], [], [], [], [], 0.0, 0.0, 0.0),
            BaseReactionResult,
            ("load_case", "step_type", "step_num", "fx", "fy", "fz", "mx", "my", "mz"),
            post_filter=field_equals("load_case", load_case),
        )

    # ---------------------------------------------------------------- story / modal results

    def get_story_drifts(self, load_case: Optional[str] = None) -> List[StoryDriftResult]:
        return self._adapter.call_rows(
            "StoryDrifts",
            lambda m: m.Results.StoryDrifts(0, *([[]] * 10)),
            StoryDriftResult,
            ("story", "load_case", "step_type", "step_num", "direction", "drift", "label", "x", "y", "z"),
            post_filter=field_equals("load_case", load_case),
        )

    def get_modal_periods(self, load_case: Optional[str] = None) -> List[ModalPeriodResult]:
        return self._adapter.call_rows(
            "ModalPeriod",
            lambda m: m.Results.ModalPeriod(0, *([[]] * 7)),
            ModalPeriodResult,
            _MODAL_HEAD + ("period", "frequency", "circular_frequency", "eigenvalue"),
            post_filter=field_equals("load_case", load_case),
        )

    def get_modal_participating_mass_ratios(self, load_case: Optional[str] = None) -> List[ModalMassRatioResult]:
        return self._adapter.call_rows(
            "ModalParticipatingMassRatios",
            lambda m: m.Results.ModalParticipatingMassRatios(0, *([[]] * 16)),
            ModalMassRatioResult,
            _MODAL_HEAD + ("period", "ux", "uy", "uz", "sum_ux", "sum_uy", "sum_uz",
                           "rx", "ry", "rz", "sum_rx", "sum_ry", "sum_rz"),
            post_filter=field_equals("load_case", load_case),
        )


__all__ = ["AnalysisResultsManager"]
