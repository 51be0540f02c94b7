#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Analysis control: run flags, running the analysis and case status.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..common import validators as v
from ..common.enums import CaseStatus
from ..common.manager_base import BaseManager
from ..common.utility_functions import enum_int


@dataclass(frozen=True)
class CaseRunFlag:
    case_name: str
    run: bool


@dataclass(frozen=True)
class CaseStatusRow:
    case_name: str
    status: CaseStatus

    @property
    def is_finished(self) -> bool:
        return self.status is CaseStatus.Finished


def _status_row(raw: Dict[str, Any]) -> Dict[str, Any]:
    raw["status"] = CaseStatus(enum_int(raw["status"]))
    return raw


class AnalyzeManager(BaseManager):
    subsystem = "Analyze"

    def create_analysis_model(self) -> None:
        self._adapter.call_scalar("CreateAnalysisModel", lambda m: m.Analyze.CreateAnalysisModel())

    def run_analysis(self) -> None:
        self._log.info("Running analysis...")
        self._adapter.call_scalar("RunAnalysis", lambda m: m.Analyze.RunAnalysis())
        self._log.info("Analysis finished.")

    def delete_results(self, case_name: str = "", all_cases: bool = True) -> None:
        self._adapter.call_scalar(
            "DeleteResults",
            lambda m: m.Analyze.DeleteResults(case_name or "", bool(all_cases)),
            validators=(
                v.satisfies("case_name", case_name,
                            lambda c: None if all_cases or c else "a case name is required unless all_cases"),
            ),
        )

    def set_run_case_flag(self, case_name: str, run: bool = True, all_cases: bool = False) -> None:
        self._adapter.call_scalar(
            "SetRunCaseFlag",
            lambda m: m.Analyze.SetRunCaseFlag(case_name or "", bool(run), bool(all_cases)),
            validators=(
                v.satisfies("case_name", case_name,
                            lambda c: None if all_cases or c else "a case name is required unless all_cases"),
            ),
            inputs={"case_name": case_name, "run": run},
        )

    def get_run_case_flags(self) -> List[CaseRunFlag]:
        return self._adapter.call_rows(
            "GetRunCaseFlag",
            lambda m: m.Analyze.GetRunCaseFlag(0, [], []),
            CaseRunFlag,
            ("case_name", "run"),
        )

    def get_case_status(self) -> List[CaseStatusRow]:
        return self._adapter.call_rows(
            "GetCaseStatus",
            lambda m: m.Analyze.GetCaseStatus(0, [], []),
            CaseStatusRow,
            ("case_name", "status"),
            transform=_status_row,
        )

    def are_all_cases_finished(self, case_names: Optional[Sequence[str]] = None) -> bool:
        """True when every case (or every case in `case_names`) has finished."""
        rows = self.get_case_status()
        if case_names:
            wanted = set(case_names)
            rows = [row for row in rows if row.case_name in wanted]
            if len(rows) < len(wanted):
                return False
        return all(row.is_finished for row in rows)

    def run_cases(self, case_names: Sequence[str], defined_cases: Optional[Sequence[str]] = None,
                  delete_old_results: bool = True) -> List[str]:
        """
        Run only `case_names`: switch every run flag off, flag the requested cases that
        exist, optionally clear old results, then run. Returns the cases flagged to run.
        """
        if not case_names:
            self._log.warning("No analysis cases requested.")
            return []
        defined = set(defined_cases) if defined_cases is not None else None

        self.set_run_case_flag("", False, all_cases=True)
        flagged = []
        for case in case_names:
            if defined is not None and case not in defined:
                self._log.warning("Analysis case '%s' is not defined; skipped.", case)
                continue
            self.set_run_case_flag(case, True)
            flagged.append(case)

        if delete_old_results:
            self.delete_results()
        self.run_analysis()
        return flagged


__all__ = ["CaseRunFlag", "CaseStatusRow", "AnalyzeManager"]
