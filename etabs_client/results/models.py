#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Records for analysis results. One record per row of the corresponding Results call.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class JointDisplacementResult:
    object_name: str
    element_name: str
    load_case: str
    step_type: str
    step_num: float
    u1: float
    u2: float
    u3: float
    r1: float
    r2: float
    r3: float


@dataclass(frozen=True)
class JointReactionResult:
    object_name: str
    element_name: str
    load_case: str
    step_type: str
    step_num: float
    f1: float
    f2: float
    f3: float
    m1: float
    m2: float
    m3: float


@dataclass(frozen=True)
class FrameForceResult:
    object_name: str
    object_station: float
    element_name: str
    element_station: float
    load_case: str
    step_type: str
    step_num: float
    p: float
    v2: float
    v3: float
    t: float
    m2: float
    m3: float


@dataclass(frozen=True)
class BaseReactionResult:
    load_case: str
    step_type: str
    step_num: float
    fx: float
    fy: float
    fz: float
    mx: float
    my: float
    mz: float


@dataclass(frozen=True)
class StoryDriftResult:
    story: str
    load_case: str
    step_type: str
    step_num: float
    direction: str
    drift: float
    label: str
    x: float
    y: float
    z: float

    @property
    def drift_permille(self) -> float:
        return self.drift * 1000.0


@dataclass(frozen=True)
class ModalPeriodResult:
    load_case: str
    step_type: str
    step_num: float
    period: float
    frequency: float
    circular_frequency: float
    eigenvalue: float

    @property
    def mode(self) -> int:
        return int(self.step_num)


@dataclass(frozen=True)
class ModalMassRatioResult:
    load_case: str
    step_type: str
    step_num: float
    period: float
    ux: float
    uy: float
    uz: float
    sum_ux: float
    sum_uy: float
    sum_uz: float
    rx: float
    ry: float
    rz: float
    sum_rx: float
    sum_ry: float
    sum_rz: float

    @property
    def mode(self) -> int:
        return int(self.step_num)


__all__ = [
    "JointDisplacementResult",
    "JointReactionResult",
    "FrameForceResult",
    "BaseReactionResult",
    "StoryDriftResult",
    "ModalPeriodResult",
    "ModalMassRatioResult",
]
