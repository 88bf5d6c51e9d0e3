"""Eager loading of model relationships.

A model object carries two attributes:

* ``R`` holds the loaded relationships, one attribute per relationship name.
  It may be ``None`` until something has been loaded.
* ``L`` is a loader whose ``Load<Relationship>(executor, singular, obj)``
  methods fill in ``R`` on ``obj``. ``obj`` is a single model object when
  ``singular`` is true and a list of model objects otherwise.
"""

from __future__ import annotations

import enum
from typing import Any, Iterable

LOAD_METHOD_PREFIX = "Load"
RELATIONSHIP_ATTR = "R"
LOADER_ATTR = "L"

_MISSING = object()


class BindKind(enum.Enum):
    """What kind of object is being bound or loaded into."""

    STRUCT = 0
    SLICE_STRUCT = 1
    PTR_SLICE_STRUCT = 2


class EagerLoadError(Exception):
    """Raised when relationships cannot be eager loaded."""


def _find_relationship(obj: Any) -> Any:
    relationship = getattr(obj, RELATIONSHIP_ATTR, _MISSING)
    if relationship is _MISSING:
        raise EagerLoadError("relationship struct was invalid")
    if relationship is None:
        raise EagerLoadError("relationship struct was nil")
    return relationship


def _loaded_value(relationship: Any, key: str) -> Any:
    value = getattr(relationship, key, _MISSING)
    if value is _MISSING:
        raise EagerLoadError(f"relationship {key} was not found")
    return value


class _LoadState:
    def __init__(self, executor: Any) -> None:
        self.executor = executor
        self.loaded: set[str] = set()
        self.to_load: list[str] = []

    def _key(self, depth: int) -> str:
        return ".".join(self.to_load[: depth + 1])

    def load_relationships(self, depth: int, obj: Any, kind: BindKind) -> None:
        """Load one level of the relationship path, then descend to the next.

        At each level everything to be loaded into is gathered up, loaded in
        a single call, and the loaded objects become the next level.
        """
        if obj is None:
            return

        if self._key(depth) not in self.loaded:
            self._call_load_function(depth, obj, kind)

        if depth + 1 >= len(self.to_load):
            return

        if kind is BindKind.STRUCT:
            self._recurse(depth, obj)
            return

        if not obj:
            return

        collected = self._collect_loaded(self.to_load[depth], obj)
        if not collected:
            return

        self.load_relationships(depth + 1, collected, BindKind.PTR_SLICE_STRUCT)

    def _call_load_function(self, depth: int, obj: Any, kind: BindKind) -> None:
        current = self.to_load[depth]

        if kind is BindKind.STRUCT:
            representative = obj
        else:
            if not obj:
                return
            representative = obj[0]
            if representative is None:
                return

        loader = getattr(representative, LOADER_ATTR, _MISSING)
        if loader is _MISSING:
            raise EagerLoadError(
                f"attempted to load {current} but no L struct was found"
            )

        method = getattr(loader, LOAD_METHOD_PREFIX + current, None)
        if not callable(method):
            raise EagerLoadError(
                f"could not find {LOAD_METHOD_PREFIX}{current} method for eager loading"
            )

        try:
            method(self.executor, kind is BindKind.STRUCT, obj)
        except EagerLoadError:
            raise
        except Exception as exc:
            raise EagerLoadError(f"failed to eager load {current}: {exc}") from exc

        self.loaded.add(self._key(depth))

    def _recurse(self, depth: int, obj: Any) -> None:
        """Continue loading from ``obj.R.<relationship>`` of a single object."""
        key = self.to_load[depth]
        try:
            relationship = _find_relationship(obj)
            loaded = _loaded_value(relationship, key)
        except EagerLoadError as exc:
            raise EagerLoadError(f"failed to append loaded {key}: {exc}") from exc

        if loaded is None:
            return

        kind = BindKind.PTR_SLICE_STRUCT if isinstance(loaded, list) else BindKind.STRUCT
        self.load_relationships(depth + 1, loaded, kind)

    @staticmethod
    def _collect_loaded(key: str, loading_from: Iterable[Any]) -> list[Any]:
        """Gather every object loaded under ``key`` across the parents."""
        collection: list[Any] = []
        for parent in loading_from:
            try:
                relationship = _find_relationship(parent)
                loaded = _loaded_value(relationship, key)
            except EagerLoadError as exc:
                raise EagerLoadError(f"failed to collect loaded {key}: {exc}") from exc

            if isinstance(loaded, list):
                collection.extend(loaded)
            elif loaded is not None:
                collection.append(loaded)
        return collection


def eager_load(executor: Any, to_load, obj: Any, kind: BindKind) -> None:
    """Load the relationships named in to_load into obj.

    to_load holds dotted paths such as ``"Relationship"`` or
    ``"Relationship.NestedRelationship"``. obj is a single model object when
    kind is ``BindKind.STRUCT`` and a list of model objects otherwise.
    Each distinct path prefix is loaded only once.
    """
    state = _LoadState(executor)
    for path in to_load:
        state.to_load = path.split(".")
        state.load_relationships(0, obj, kind)