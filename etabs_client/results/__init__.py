#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Analysis results: typed records, the results manager and Excel export.
"""

from .analysis_results import AnalysisResultsManager
from .export import SUMMARY_FILE_NAME, records_to_frame, story_drift_envelope, write_dynamic_summary
from .models import (
    BaseReactionResult,
    FrameForceResult,
    JointDisplacementResult,
    JointReactionResult,
    ModalMassRatioResult,
    ModalPeriodResult,
    StoryDriftResult,
)

__all__ = [
    "AnalysisResultsManager",
    "SUMMARY_FILE_NAME",
    "records_to_frame",
    "story_drift_envelope",
    "write_dynamic_summary",
    "BaseReactionResult",
    "FrameForceResult",
    "JointDisplacementResult",
    "JointReactionResult",
    "ModalMassRatioResult",
    "ModalPeriodResult",
    "StoryDriftResult",
]
