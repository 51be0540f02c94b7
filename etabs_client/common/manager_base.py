#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared plumbing for the subsystem managers."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Type, TypeVar

from .call_adapter import CallAdapter
from .enums import ENGINE_TYPE_NAMES
from .exceptions import InvalidArgumentError

E = TypeVar("E", bound=IntEnum)


@dataclass(frozen=True)
class NameRow:
    name: str


class BaseManager:
    """A manager is bound to one session and talks to ETABS only through its CallAdapter."""

    subsystem = "Base"

    def __init__(self, session, logger: Optional[logging.Logger] = None):
        self._session = session
        self._log = logger or logging.getLogger(f"etabs_client.{self.subsystem}")
        self._adapter = CallAdapter(session, self._log)

    @property
    def session(self):
        return self._session

    @staticmethod
    def _coerce(enum_type: Type[E], value, parameter: str, operation: str) -> E:
        """Turn an int or member into `enum_type`, rejecting unknown values before any call."""
        try:
            return enum_type(value)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"{value!r} is not a valid {enum_type.__name__}", operation=operation,
                parameter=parameter, value=value,
            ) from exc

    def _enum(self, member: IntEnum):
        """ETABSv1 enum value for a Python mirror member."""
        return self._session.engine_enum(ENGINE_TYPE_NAMES[type(member)], member)

    def _name_list(self, operation: str, invoke, validators=(), inputs=None) -> List[str]:
        """Run a ``GetNameList``-style call: ``(ret, count, names)``."""
        rows = self._adapter.call_rows(operation, invoke, NameRow, ("name",), validators=validators,
                                       inputs=inputs)
        return [row.name for row in rows]

    def _count(self, operation: str, invoke) -> int:
        return self._adapter.call_value(operation, invoke, convert=int)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._session!r})"


__all__ = ["NameRow", "BaseManager"]
