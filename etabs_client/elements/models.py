#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Records for point, frame, area and story objects.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from ..common.enums import LoadDirection, LoadType
from ..common.utility_functions import finite_float

DOF_NAMES = ("U1", "U2", "U3", "R1", "R2", "R3")


@dataclass(frozen=True)
class Point:
    name: str
    x: float
    y: float
    z: float
    label: Optional[str] = None
    story: Optional[str] = None


@dataclass(frozen=True)
class PointRestraint:
    u1: bool = False
    u2: bool = False
    u3: bool = False
    r1: bool = False
    r2: bool = False
    r3: bool = False

    @classmethod
    def fixed(cls) -> "PointRestraint":
        return cls(True, True, True, True, True, True)

    @classmethod
    def pinned(cls) -> "PointRestraint":
        return cls(True, True, True, False, False, False)

    @classmethod
    def from_values(cls, values) -> "PointRestraint":
        flags = [bool(v) for v in values]
        if len(flags) != 6:
            raise ValueError(f"restraint needs 6 values, got {len(flags)}")
        return cls(*flags)

    def as_list(self) -> List[bool]:
        return [self.u1, self.u2, self.u3, self.r1, self.r2, self.r3]

    @property
    def is_free(self) -> bool:
        return not any(self.as_list())


@dataclass(frozen=True)
class PointLoadForce:
    point_name: str
    load_pattern: str
    f1: float = 0.0
    f2: float = 0.0
    f3: float = 0.0
    m1: float = 0.0
    m2: float = 0.0
    m3: float = 0.0
    coordinate_system: str = "Global"
    step: int = 0

    def as_list(self) -> List[float]:
        return [self.f1, self.f2, self.f3, self.m1, self.m2, self.m3]


@dataclass(frozen=True)
class Frame:
    name: str
    point_i: str
    point_j: str
    section: Optional[str] = None
    story: Optional[str] = None
    length: Optional[float] = None


def distance(a: Tuple[float, float, float], b: Tuple[float, float, float]) -> float:
    return math.sqrt(sum((float(q) - float(p)) ** 2 for p, q in zip(a, b)))


@dataclass(frozen=True)
class FrameEndRelease:
    """Release flags and partial fixity for one frame end, in P, V2, V3, T, M2, M3 order."""

    p: bool = False
    v2: bool = False
    v3: bool = False
    t: bool = False
    m2: bool = False
    m3: bool = False
    fixity: Tuple[float, ...] = (0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    @classmethod
    def fixed(cls) -> "FrameEndRelease":
        return cls()

    @classmethod
    def pinned(cls) -> "FrameEndRelease":
        return cls(m2=True, m3=True)

    @classmethod
    def from_values(cls, flags, fixity=None) -> "FrameEndRelease":
        flags = [bool(v) for v in flags]
        fixity = tuple(float(v) for v in fixity) if fixity is not None else (0.0,) * 6
        if len(flags) != 6 or len(fixity) != 6:
            raise ValueError("frame end release needs 6 flags and 6 fixity values")
        return cls(*flags, fixity=fixity)

    def flags(self) -> List[bool]:
        return [self.p, self.v2, self.v3, self.t, self.m2, self.m3]

    @property
    def any_released(self) -> bool:
        return any(self.flags())

    def __str__(self) -> str:
        names = [n for n, flag in zip(("P", "V2", "V3", "T", "M2", "M3"), self.flags()) if flag]
        return ", ".join(names) if names else "Fixed"


@dataclass(frozen=True)
class FrameReleases:
    i_end: FrameEndRelease = field(default_factory=FrameEndRelease)
    j_end: FrameEndRelease = field(default_factory=FrameEndRelease)

    @classmethod
    def pinned_pinned(cls) -> "FrameReleases":
        return cls(FrameEndRelease.pinned(), FrameEndRelease.pinned())

    @classmethod
    def fixed_pinned(cls) -> "FrameReleases":
        return cls(FrameEndRelease.fixed(), FrameEndRelease.pinned())

    @property
    def any_released(self) -> bool:
        return self.i_end.any_released or self.j_end.any_released

    def instability(self) -> Optional[str]:
        """Describe why this release combination makes the member unstable; None if it is stable."""
        i, j = self.i_end.flags(), self.j_end.flags()
        for idx in range(4):
            if i[idx] and j[idx]:
                return f"{DOF_NAMES[idx]} released at both ends makes the frame unstable"
        if i[4] and j[4] and (i[2] or j[2]):
            return "R2 released at both ends with U3 released makes the frame unstable"
        if i[5] and j[5] and (i[1] or j[1]):
            return "R3 released at both ends with U2 released makes the frame unstable"
        return None

    def __str__(self) -> str:
        return f"I-end: {self.i_end}, J-end: {self.j_end}"


def _numbers(**values) -> Union[Dict[str, float], str]:
    """The fields as floats, or a message naming the first one that is not a finite number."""
    numbers = {}
    for name, value in values.items():
        number = finite_float(value)
        if number is None:
            return f"{name} must be a finite number, got {value!r}"
        numbers[name] = number
    return numbers


def _type_and_direction_problem(load_type, direction) -> Optional[str]:
    if load_type not in (LoadType.Force, LoadType.Moment):
        return f"load type {load_type} must be 1 (force) or 2 (moment)"
    number = finite_float(direction)
    if number is None or number != int(number) or not 1 <= number <= 11:
        return f"direction {direction} must be between 1 and 11"
    return None


@dataclass(frozen=True)
class FrameDistributedLoad:
    """
    Distributed load on a frame.

    Rows read back from ETABS carry the relative distances in `start_distance` /
    `end_distance` (so `is_relative_distance` is True) and the absolute ones in
    `absolute_start` / `absolute_end`.
    """

    frame_name: str
    load_pattern: str
    start_load: float
    end_load: float
    load_type: int = LoadType.Force
    direction: int = LoadDirection.Gravity
    start_distance: float = 0.0
    end_distance: float = 1.0
    coordinate_system: str = "Global"
    is_relative_distance: bool = True
    absolute_start: Optional[float] = None
    absolute_end: Optional[float] = None

    @classmethod
    def uniform(cls, frame_name: str, load_pattern: str, value: float,
                direction: int = LoadDirection.Gravity, coordinate_system: str = "Global") -> "FrameDistributedLoad":
        return cls(frame_name, load_pattern, value, value, LoadType.Force, direction, 0.0, 1.0, coordinate_system)

    @property
    def is_uniform(self) -> bool:
        return math.isclose(self.start_load, self.end_load)

    def problems(self) -> Optional[str]:
        if not self.load_pattern:
            return "load pattern cannot be empty"
        common = _type_and_direction_problem(self.load_type, self.direction)
        if common:
            return common
        if not self.coordinate_system:
            return "coordinate system cannot be empty"
        numbers = _numbers(start_load=self.start_load, end_load=self.end_load,
                           start_distance=self.start_distance, end_distance=self.end_distance)
        if isinstance(numbers, str):
            return numbers
        start, end = numbers["start_distance"], numbers["end_distance"]
        if self.is_relative_distance and not (0.0 <= start <= 1.0 and 0.0 <= end <= 1.0):
            return "relative distances must be between 0 and 1"
        if start > end:
            return "start distance cannot exceed end distance"
        return None


@dataclass(frozen=True)
class FramePointLoad:
    frame_name: str
    load_pattern: str
    value: float
    load_type: int = LoadType.Force
    direction: int = LoadDirection.Gravity
    distance: float = 0.5
    coordinate_system: str = "Global"
    is_relative_distance: bool = True
    absolute_distance: Optional[float] = None

    def problems(self) -> Optional[str]:
        if not self.load_pattern:
            return "load pattern cannot be empty"
        common = _type_and_direction_problem(self.load_type, self.direction)
        if common:
            return common
        numbers = _numbers(value=self.value, distance=self.distance)
        if isinstance(numbers, str):
            return numbers
        distance = numbers["distance"]
        if self.is_relative_distance and not 0.0 <= distance <= 1.0:
            return "relative distance must be between 0 and 1"
        if distance < 0:
            return "distance cannot be negative"
        return None


@dataclass(frozen=True)
class Area:
    name: str
    points: Tuple[str, ...]
    property_name: Optional[str] = None

    @property
    def number_of_points(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class AreaUniformLoad:
    area_name: str
    load_pattern: str
    value: float
    direction: int = LoadDirection.Gravity
    coordinate_system: str = "Global"


@dataclass(frozen=True)
class StoryInfo:
    name: str
    elevation: float
    height: float
    is_master: bool = False
    similar_to: str = ""
    splice_above: bool = False
    splice_height: float = 0.0
    color: int = 0


@dataclass(frozen=True)
class StoryData:
    base_elevation: float
    stories: Tuple[StoryInfo, ...]

    @property
    def names(self) -> List[str]:
        return [s.name for s in self.stories]

    @property
    def total_height(self) -> float:
        if not self.stories:
            return 0.0
        return max(s.elevation for s in self.stories) - self.base_elevation


__all__ = [
    "DOF_NAMES",
    "Point",
    "PointRestraint",
    "PointLoadForce",
    "Frame",
    "FrameEndRelease",
    "FrameReleases",
    "FrameDistributedLoad",
    "FramePointLoad",
    "Area",
    "AreaUniformLoad",
    "StoryInfo",
    "StoryData",
    "distance",
]
