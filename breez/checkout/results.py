from __future__ import annotations

import logging
import os
import threading
from collections import OrderedDict

from ..recommendations.models import LineItem

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = int(os.getenv("BREEZ_MAX_SESSIONS", "1000"))


class ResultStore:
    """Last search results per browser session, kept in memory.

    Sessions are held least-recently-used first; once more than
    ``max_sessions`` are stored the oldest one is dropped.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._max_sessions = max_sessions
        self._results: OrderedDict[str, list[LineItem]] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def save(self, session_id: str, items: list[LineItem]) -> None:
        with self._lock:
            self._results[session_id] = list(items)
            self._results.move_to_end(session_id)
            while len(self._results) > self._max_sessions:
                evicted, _ = self._results.popitem(last=False)
                logger.debug("Evicted results of session %s", evicted)

    def get(self, session_id: str) -> list[LineItem]:
        with self._lock:
            items = self._results.get(session_id)
            if items is None:
                return []
            self._results.move_to_end(session_id)
            return list(items)

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._results.pop(session_id, None)

    def clear_all(self) -> None:
        with self._lock:
            self._results.clear()


_result_store = ResultStore()


def get_result_store() -> ResultStore:
    return _result_store
