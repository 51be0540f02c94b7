#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Per-session manager cache.

One manager per (session, subsystem key). Factories run outside the lock; when two
threads race on a first access, the instance stored first is returned to both and
the other one is dropped unused. A factory that raises leaves nothing behind.
"""

import logging
import threading
import weakref
from typing import Any, Callable, Dict, List, TypeVar

from .exceptions import SessionClosedError

log = logging.getLogger(__name__)

M = TypeVar("M")


class ManagerRegistry:
    def __init__(self):
        self._entries: "weakref.WeakKeyDictionary[Any, Dict[str, Any]]" = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def get(self, session, key: str, factory: Callable[[Any], M]) -> M:
        if getattr(session, "is_disposed", False):
            raise SessionClosedError(operation=f"get manager '{key}'")

        with self._lock:
            existing = self._entries.get(session, {}).get(key)
        if existing is not None:
            return existing

        instance = factory(session)

        with self._lock:
            # the session may have been disposed while the factory ran
            if getattr(session, "is_disposed", False):
                raise SessionClosedError(operation=f"get manager '{key}'")
            bucket = self._entries.get(session)
            if bucket is None:
                add_hook = getattr(session, "add_dispose_hook", None)
                if add_hook is not None:
                    add_hook(self.discard)
                bucket = self._entries[session] = {}
            winner = bucket.setdefault(key, instance)

        if winner is not instance:
            log.debug("Manager '%s' was built concurrently; keeping the first instance.", key)
        else:
            log.debug("Manager '%s' created for session %s", key, session)
        return winner

    def discard(self, session) -> None:
        """Drop every manager cached for `session`."""
        with self._lock:
            self._entries.pop(session, None)

    def keys(self, session) -> List[str]:
        with self._lock:
            return sorted(self._entries.get(session, {}))


default_registry = ManagerRegistry()


__all__ = ["ManagerRegistry", "default_registry"]
