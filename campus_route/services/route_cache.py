# path: campus-route/campus_route/services/route_cache.py

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Hashable, Optional

from campus_route.models.route_models import Route


logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 256


class RouteCache:
    """
    Bounded LRU map from a rounded (start, end) key to a computed Route.

    Owned by a RouteCalculator and passed in at construction, so one cache can
    be shared or reset from outside. Every operation holds the lock.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive: {max_entries}")
        self.max_entries = max_entries
        self._entries: "OrderedDict[Hashable, Route]" = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> Optional[Route]:
        with self._lock:
            route = self._entries.get(key)
            if route is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return route

    def put(self, key: Hashable, route: Route) -> None:
        with self._lock:
            self._entries[key] = route
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted route %s (cache full at %d)", evicted, self.max_entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries
