"""
Search Service Module

Runs search operations against backends, raising events around each call.
"""

import logging
from typing import Any, Mapping, Optional

from ..exceptions import BackendError
from .backend import RecordCollection, SearchBackend
from .events import ERROR, POST, PRE, RESOLVE, EventManager

logger = logging.getLogger(__name__)


class SearchService:
    """
    Entry point for all backend operations.

    Backends are located through the ``resolve`` event; ``pre``, ``post``
    and ``error`` events are raised around every operation so listeners can
    adjust parameters or inspect results.
    """

    def __init__(self, events: EventManager) -> None:
        self.events = events

    def resolve(self, backend: str) -> SearchBackend:
        for candidate in self.events.trigger(RESOLVE, self, backend=backend):
            if isinstance(candidate, SearchBackend):
                return candidate
        raise BackendError(f"Unable to resolve backend: {backend}")

    def _invoke(self, backend_id: str, operation: str, *args: Any,
                params: Optional[Mapping[str, Any]] = None) -> RecordCollection:
        backend = self.resolve(backend_id)
        params = dict(params or {})
        self.events.trigger(PRE, backend, context=operation, params=params)
        try:
            response = getattr(backend, operation)(*args, params=params)
        except Exception as e:
            logger.error(f"{operation} on backend {backend_id} failed: {e}")
            self.events.trigger(ERROR, backend, context=operation, params=params, error=e)
            raise
        self.events.trigger(POST, response, context=operation, params=params)
        return response

    def search(self, backend: str, query: Mapping[str, Any], offset: int = 0,
               limit: int = 20, params: Optional[Mapping[str, Any]] = None) -> RecordCollection:
        return self._invoke(backend, "search", query, offset, limit, params=params)

    def retrieve(self, backend: str, record_id: str,
                 params: Optional[Mapping[str, Any]] = None) -> RecordCollection:
        return self._invoke(backend, "retrieve", record_id, params=params)

    def random(self, backend: str, query: Mapping[str, Any], limit: int = 20,
               params: Optional[Mapping[str, Any]] = None) -> RecordCollection:
        return self._invoke(backend, "random", query, limit, params=params)
