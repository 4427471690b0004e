"""
Search Backend Module

Backend contract, the backend manager that answers ``resolve`` events, and
an in-memory backend for local setups and tests.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..services.plugin_manager import PluginManager
from .events import RESOLVE, SharedEventManager

logger = logging.getLogger(__name__)


@dataclass
class RecordCollection:
    """Records returned by a backend for one request."""
    total: int = 0
    records: List[Dict[str, Any]] = field(default_factory=list)
    facets: Dict[str, Dict[str, int]] = field(default_factory=dict)
    offset: int = 0
    extra: Dict[str, Any] = field(default_factory=dict)


class SearchBackend:
    """Base class for search backends."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier

    def search(self, query: Mapping[str, Any], offset: int, limit: int,
               params: Optional[Mapping[str, Any]] = None) -> RecordCollection:
        raise NotImplementedError

    def retrieve(self, record_id: str, params: Optional[Mapping[str, Any]] = None) -> RecordCollection:
        raise NotImplementedError

    def random(self, query: Mapping[str, Any], limit: int,
               params: Optional[Mapping[str, Any]] = None) -> RecordCollection:
        raise NotImplementedError


class MemoryBackend(SearchBackend):
    """
    Backend over a list of record dictionaries.

    Queries match case-insensitive substrings of any field (or of the field
    named by the query ``type``). Filters are ``field:"value"`` strings.
    ``extra`` is returned with every collection, which lets callers model
    backend-specific details such as best bets.
    """

    def __init__(self, identifier: str, records: Optional[List[Dict[str, Any]]] = None,
                 extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(identifier)
        self.records = list(records or [])
        self.extra = dict(extra or {})

    @staticmethod
    def _values(record: Mapping[str, Any], field_name: Optional[str] = None) -> List[str]:
        items = [record.get(field_name)] if field_name else list(record.values())
        values: List[str] = []
        for item in items:
            if isinstance(item, (list, tuple)):
                values.extend(str(v) for v in item)
            elif item is not None:
                values.append(str(item))
        return values

    def _matches(self, record: Mapping[str, Any], query: Mapping[str, Any]) -> bool:
        lookfor = str(query.get("lookfor", "")).strip().lower()
        if not lookfor:
            return True
        field_name = query.get("type")
        if field_name in (None, "", "AllFields"):
            field_name = None
        return any(lookfor in value.lower() for value in self._values(record, field_name))

    def _apply_filters(self, records, filters) -> List[Dict[str, Any]]:
        for item in filters or []:
            field_name, _, value = item.partition(":")
            value = value.strip('"')
            records = [r for r in records if value in self._values(r, field_name)]
        return records

    def _facets(self, records, fields) -> Dict[str, Dict[str, int]]:
        facets = {}
        for field_name in fields or []:
            counts = Counter(v for r in records for v in self._values(r, field_name))
            facets[field_name] = dict(counts.most_common())
        return facets

    def search(self, query, offset, limit, params=None):
        params = params or {}
        matched = [r for r in self.records if self._matches(r, query)]
        matched = self._apply_filters(matched, params.get("filters"))
        return RecordCollection(
            total=len(matched),
            records=matched[offset:offset + limit],
            facets=self._facets(matched, params.get("facets")),
            offset=offset,
            extra=dict(self.extra),
        )

    def retrieve(self, record_id, params=None):
        found = [r for r in self.records if str(r.get("id")) == str(record_id)]
        return RecordCollection(total=len(found), records=found)

    def random(self, query, limit, params=None):
        matched = [r for r in self.records if self._matches(r, query)]
        matched = self._apply_filters(matched, (params or {}).get("filters"))
        picked = random.sample(matched, min(limit, len(matched)))
        return RecordCollection(total=len(matched), records=picked)


class BackendManager(PluginManager):
    """Search backends by identifier (Solr, Summon, ...)."""

    instance_of = SearchBackend

    def _canonical_name(self, service_name: str) -> str:
        # Backend identifiers are case-sensitive
        return service_name

    def attach_shared_listeners(self, events: SharedEventManager, identifier: str = "search") -> None:
        """Answer ``resolve`` events raised by search services."""
        events.attach(identifier, RESOLVE, self.on_resolve)

    def on_resolve(self, sender: Any, backend: str = "", **params: Any) -> Optional[SearchBackend]:
        if self.has(backend):
            return self.get(backend)
        logger.debug(f"No search backend registered for '{backend}'")
        return None
