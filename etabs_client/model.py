#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
EtabsModel: one entry point per session.

Managers are built on first access and cached in a ManagerRegistry, so
``model.frames is model.frames`` holds for the lifetime of the session.
"""

import logging
from typing import Callable, Optional, Type, TypeVar

from .analysis.runner import AnalyzeManager
from .common.config import ConnectionOptions
from .common.etabs_api_loader import EtabsApi
from .common.etabs_setup import EngineSession
from .common.manager_base import BaseManager
from .common.registry import ManagerRegistry, default_registry
from .elements.areas import AreaObjectManager
from .elements.frames import FrameObjectManager
from .elements.points import PointObjectManager
from .elements.stories import StoryManager
from .groups.group_definitions import GroupManager
from .groups.selection import SelectionManager
from .loads.cases import LoadCaseManager
from .loads.combos import LoadComboManager
from .loads.patterns import LoadPatternManager
from .model_info import ModelInfoManager
from .properties.area_sections import AreaSectionManager
from .properties.frame_sections import FrameSectionManager
from .properties.materials import MaterialManager
from .results.analysis_results import AnalysisResultsManager

M = TypeVar("M", bound=BaseManager)


class EtabsModel:
    def __init__(self, session: EngineSession, registry: Optional[ManagerRegistry] = None,
                 logger: Optional[logging.Logger] = None):
        self._session = session
        self._registry = registry if registry is not None else default_registry
        self._logger = logger

    @classmethod
    def connect(cls, options: Optional[ConnectionOptions] = None, api: Optional[EtabsApi] = None,
                registry: Optional[ManagerRegistry] = None,
                logger: Optional[logging.Logger] = None) -> "EtabsModel":
        """Attach to a running ETABS instance."""
        return cls(EngineSession.connect(options, api, logger), registry, logger)

    @classmethod
    def create_new(cls, options: Optional[ConnectionOptions] = None, api: Optional[EtabsApi] = None,
                   registry: Optional[ManagerRegistry] = None,
                   logger: Optional[logging.Logger] = None) -> "EtabsModel":
        """Launch a new ETABS instance."""
        return cls(EngineSession.create_new(options, api, logger), registry, logger)

    @property
    def session(self) -> EngineSession:
        return self._session

    def _manager(self, key: str, manager_type: Type[M]) -> M:
        factory: Callable[[EngineSession], M] = lambda s: manager_type(s, self._logger)
        return self._registry.get(self._session, key, factory)

    # ---------------------------------------------------------------- objects

    @property
    def points(self) -> PointObjectManager:
        return self._manager("points", PointObjectManager)

    @property
    def frames(self) -> FrameObjectManager:
        return self._manager("frames", FrameObjectManager)

    @property
    def areas(self) -> AreaObjectManager:
        return self._manager("areas", AreaObjectManager)

    @property
    def stories(self) -> StoryManager:
        return self._manager("stories", StoryManager)

    @property
    def groups(self) -> GroupManager:
        return self._manager("groups", GroupManager)

    @property
    def selection(self) -> SelectionManager:
        return self._manager("selection", SelectionManager)

    # ---------------------------------------------------------------- properties

    @property
    def materials(self) -> MaterialManager:
        return self._manager("materials", MaterialManager)

    @property
    def frame_sections(self) -> FrameSectionManager:
        return self._manager("frame_sections", FrameSectionManager)

    @property
    def area_sections(self) -> AreaSectionManager:
        return self._manager("area_sections", AreaSectionManager)

    # ---------------------------------------------------------------- loads / analysis

    @property
    def load_patterns(self) -> LoadPatternManager:
        return self._manager("load_patterns", LoadPatternManager)

    @property
    def load_cases(self) -> LoadCaseManager:
        return self._manager("load_cases", LoadCaseManager)

    @property
    def load_combos(self) -> LoadComboManager:
        return self._manager("load_combos", LoadComboManager)

    @property
    def analyze(self) -> AnalyzeManager:
        return self._manager("analyze", AnalyzeManager)

    @property
    def results(self) -> AnalysisResultsManager:
        return self._manager("results", AnalysisResultsManager)

    @property
    def info(self) -> ModelInfoManager:
        return self._manager("info", ModelInfoManager)

    # ---------------------------------------------------------------- lifecycle

    def close(self, close_application: Optional[bool] = None) -> None:
        self._session.dispose(close_application)

    def __enter__(self) -> "EtabsModel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"EtabsModel({self._session!r})"


__all__ = ["EtabsModel"]
