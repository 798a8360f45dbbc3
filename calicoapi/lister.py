"""Read-only access to cached resources, looked up by name or by labels."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

GROUP_NAME = "projectcalico.org"

Labels = Mapping[str, str]
Selector = Union[None, Labels, Callable[[Labels], bool]]


class NotFoundError(LookupError):
    """Raised when a named resource is not in the cache."""

    def __init__(self, resource: str, name: str, group: str = GROUP_NAME) -> None:
        self.resource = resource
        self.name = name
        self.group = group
        qualified = f"{resource}.{group}" if group else resource
        super().__init__(f'{qualified} "{name}" not found')


def _selector_matches(selector: Selector, labels: Labels) -> bool:
    """Tell whether a set of labels satisfies a selector.

    ``None`` matches everything, a mapping matches when every one of its
    pairs is present, and a callable is asked directly.
    """
    if selector is None:
        return True
    if callable(selector):
        return bool(selector(labels))
    return all(labels.get(key) == value for key, value in selector.items())


class Indexer:
    """A thread-safe store of objects and their labels, keyed by name.

    Objects of a namespace are stored under ``"<namespace>/<name>"``.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._entries: dict[str, tuple[Any, dict[str, str]]] = {}

    def add(self, key: str, obj: Any, labels: Optional[Labels] = None) -> None:
        """Store an object, replacing any held under the same key."""
        with self._lock:
            self._entries[key] = (obj, dict(labels or {}))

    def delete(self, key: str) -> None:
        """Remove the object under a key; a missing key is ignored."""
        with self._lock:
            self._entries.pop(key, None)

    def get_by_key(self, key: str) -> Any:
        """Return the object stored under a key, or raise KeyError."""
        with self._lock:
            obj, _ = self._entries[key]
            return obj

    def items(self) -> Iterator[tuple[str, Any, dict[str, str]]]:
        """Yield ``(key, object, labels)`` for each entry, in insertion order."""
        with self._lock:
            snapshot = [(key, obj, dict(labels)) for key, (obj, labels) in self._entries.items()]
        yield from snapshot

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


@dataclass(frozen=True)
class Lister:
    """Lists and gets cluster-wide resources of one kind from an indexer.

    Returned objects are shared with the cache and must be treated as
    read-only.
    """

    resource: str
    indexer: Indexer

    def list(self, selector: Selector = None) -> list[Any]:
        """Return every object whose labels match the selector."""
        return [obj for _, obj, labels in self.indexer.items() if _selector_matches(selector, labels)]

    def get(self, name: str) -> Any:
        """Return the object with the given name, or raise NotFoundError."""
        try:
            return self.indexer.get_by_key(name)
        except KeyError:
            raise NotFoundError(self.resource, name) from None