#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Result export.

Turns result records into pandas DataFrames and writes the dynamic-analysis
summary workbook (modal periods, mass participation, story drifts and the drift
envelope) with the openpyxl engine.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, fields, is_dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..common.exceptions import EtabsError, MarshallingError
from .models import ModalMassRatioResult, ModalPeriodResult, StoryDriftResult

log = logging.getLogger(__name__)

SUMMARY_FILE_NAME = "analysis_dynamic_summary.xlsx"

_ENVELOPE_COLUMNS = ["story", "direction", "max_drift", "max_drift_permille", "load_case", "label"]


def records_to_frame(records: Iterable, record_type: Optional[type] = None) -> pd.DataFrame:
    """One row per record, one column per dataclass field (in declaration order)."""
    records = list(records)
    if not records:
        if record_type is not None and is_dataclass(record_type):
            return pd.DataFrame(columns=[f.name for f in fields(record_type)])
        return pd.DataFrame()
    first = records[0]
    if not is_dataclass(first):
        raise MarshallingError(f"cannot tabulate {type(first).__name__} records", operation="records_to_frame")
    columns = [f.name for f in fields(first)]
    return pd.DataFrame([asdict(r) for r in records], columns=columns)


def story_drift_envelope(drifts: Sequence[StoryDriftResult]) -> pd.DataFrame:
    """
    Largest absolute drift per (story, direction) over all cases and steps.

    Stories keep the order in which ETABS first reported them.
    """
    df = records_to_frame(drifts, StoryDriftResult)
    if df.empty:
        return pd.DataFrame(columns=_ENVELOPE_COLUMNS)

    df["abs_drift"] = np.abs(df["drift"].astype(float).to_numpy())
    story_order = {name: i for i, name in enumerate(pd.unique(df["story"]))}
    idx = df.groupby(["story", "direction"], sort=False)["abs_drift"].idxmax()
    env = df.loc[idx, ["story", "direction", "abs_drift", "load_case", "label"]].rename(
        columns={"abs_drift": "max_drift"}
    )
    env["max_drift_permille"] = env["max_drift"] * 1000.0
    env["_order"] = env["story"].map(story_order)
    env = env.sort_values(["_order", "direction"], kind="stable").drop(columns="_order")
    return env[_ENVELOPE_COLUMNS].reset_index(drop=True)


def write_dynamic_summary(results_manager, output_path: Union[str, Path],
                          modal_case: Optional[str] = None,
                          drift_cases: Optional[Sequence[str]] = None) -> Path:
    """
    Write the modal and drift results to an Excel workbook and return its path.

    `output_path` may be a directory (the workbook is then named
    ``analysis_dynamic_summary.xlsx``) or a .xlsx file path. Sheets: ModalPeriod,
    MPMR, StoryDrifts, DriftEnvelope. A result set ETABS rejects is logged and left
    empty; the other sheets are still written.
    """
    output_path = Path(output_path)
    summary_path = output_path if output_path.suffix.lower() == ".xlsx" else output_path / SUMMARY_FILE_NAME

    def _fetch(label, getter, **kwargs):
        try:
            return getter(**kwargs)
        except EtabsError as exc:
            log.warning("%s not available: %s", label, exc)
            return []

    periods = _fetch("Modal periods", results_manager.get_modal_periods, load_case=modal_case)
    ratios = _fetch("Modal mass ratios", results_manager.get_modal_participating_mass_ratios, load_case=modal_case)
    drifts = _fetch("Story drifts", results_manager.get_story_drifts)
    if drift_cases:
        wanted = set(drift_cases)
        drifts = [d for d in drifts if d.load_case in wanted]

    summary_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(summary_path, engine="openpyxl") as writer:
        records_to_frame(periods, ModalPeriodResult).to_excel(writer, index=False, sheet_name="ModalPeriod")
        records_to_frame(ratios, ModalMassRatioResult).to_excel(writer, index=False, sheet_name="MPMR")
        records_to_frame(drifts, StoryDriftResult).to_excel(writer, index=False, sheet_name="StoryDrifts")
        story_drift_envelope(drifts).to_excel(writer, index=False, sheet_name="DriftEnvelope")

    log.info("Dynamic summary written to %s (%d modes, %d drift rows)", summary_path, len(periods), len(drifts))
    return summary_path


__all__ = ["SUMMARY_FILE_NAME", "records_to_frame", "story_drift_envelope", "write_dynamic_summary"]
