"""An in-memory object cache with field indexes for release resources."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable

IndexFunc = Callable[[dict[str, Any]], list[str]]


class IndexedCache:
    """Stores objects by kind and looks them up through registered field indexes."""

    def __init__(self) -> None:
        self._indexers: dict[str, dict[str, IndexFunc]] = defaultdict(dict)
        self._objects: dict[str, list[dict[str, Any]]] = defaultdict(list)

    def index_field(self, kind: str, field: str, func: IndexFunc) -> None:
        """Register an index named field for objects of the given kind."""
        if field in self._indexers[kind]:
            raise ValueError(f"indexer conflict: {kind} already has an index on {field!r}")
        self._indexers[kind][field] = func

    def add(self, kind: str, obj: dict[str, Any]) -> None:
        """Store an object of the given kind."""
        self._objects[kind].append(obj)

    def list(self, kind: str, field: str, value: str) -> list[dict[str, Any]]:
        """Return the objects of a kind whose indexed field holds value."""
        try:
            func = self._indexers[kind][field]
        except KeyError:
            raise KeyError(f"index with name field:{field} does not exist for {kind}") from None
        return [obj for obj in self._objects[kind] if value in func(obj)]


def _spec_field(name: str) -> IndexFunc:
    def index(obj: dict[str, Any]) -> list[str]:
        return [(obj.get("spec") or {}).get(name, "")]

    return index


def setup_component_cache(cache: IndexedCache) -> None:
    """Index Components by application."""
    cache.index_field("Component", "spec.application", _spec_field("application"))


def setup_release_cache(cache: IndexedCache) -> None:
    """Index Releases by ReleasePlan name."""
    cache.index_field("Release", "spec.releasePlan", _spec_field("releasePlan"))


def setup_release_plan_cache(cache: IndexedCache) -> None:
    """Index ReleasePlans by target."""
    cache.index_field("ReleasePlan", "spec.target", _spec_field("target"))


def setup_release_plan_admission_cache(cache: IndexedCache) -> None:
    """Index ReleasePlanAdmissions by origin."""
    cache.index_field("ReleasePlanAdmission", "spec.origin", _spec_field("origin"))