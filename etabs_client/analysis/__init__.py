#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Analysis stage: run flags, RunAnalysis and case status.
"""

from .runner import AnalyzeManager, CaseRunFlag, CaseStatusRow

__all__ = ["AnalyzeManager", "CaseRunFlag", "CaseStatusRow"]
