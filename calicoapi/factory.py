"""A factory that shares one informer per resource type."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from typing import Any, Optional, Protocol

NAMESPACE_ALL = ""

_SYNC_POLL_INTERVAL = 0.1


class SharedIndexInformer(Protocol):
    """What the factory needs from an informer."""

    def run(self, stop_event: threading.Event) -> None: ...

    def has_synced(self) -> bool: ...


NewInformerFunc = Callable[[Any, float], SharedIndexInformer]
TweakListOptionsFunc = Callable[[Any], None]


def _type_key(obj: Any) -> type:
    return obj if isinstance(obj, type) else type(obj)


class SharedInformerFactory:
    """Provides shared informers for resources, one per resource type."""

    def __init__(
        self,
        client: Any,
        default_resync: float,
        namespace: str = NAMESPACE_ALL,
        tweak_list_options: Optional[TweakListOptionsFunc] = None,
    ) -> None:
        self.client = client
        self.namespace = namespace
        self.tweak_list_options = tweak_list_options
        self.default_resync = default_resync
        self.custom_resync: dict[type, float] = {}
        self._lock = threading.Lock()
        self._informers: dict[type, SharedIndexInformer] = {}
        self._started: set[type] = set()

    def start(self, stop_event: threading.Event) -> None:
        """Run every informer not yet started, each in its own thread.

        Calling this again only starts informers added since.
        """
        with self._lock:
            for informer_type, informer in self._informers.items():
                if informer_type in self._started:
                    continue
                threading.Thread(target=informer.run, args=(stop_event,), daemon=True).start()
                self._started.add(informer_type)

    def wait_for_cache_sync(self, stop_event: threading.Event) -> dict[type, bool]:
        """Wait for the started informers to sync; map each type to success."""
        with self._lock:
            started = {t: i for t, i in self._informers.items() if t in self._started}
        return {t: _wait_for_sync(stop_event, i.has_synced) for t, i in started.items()}

    def informer_for(self, obj_type: Any, new_func: NewInformerFunc) -> SharedIndexInformer:
        """Return the shared informer for a type, creating it on first use."""
        key = _type_key(obj_type)
        with self._lock:
            informer = self._informers.get(key)
            if informer is not None:
                return informer
            resync = self.custom_resync.get(key, self.default_resync)
            informer = new_func(self.client, resync)
            self._informers[key] = informer
            return informer


SharedInformerOption = Callable[[SharedInformerFactory], SharedInformerFactory]


def _wait_for_sync(stop_event: threading.Event, has_synced: Callable[[], bool]) -> bool:
    while not has_synced():
        if stop_event.wait(_SYNC_POLL_INTERVAL):
            return has_synced()
    return True


def with_custom_resync_config(resync_config: Mapping[Any, float]) -> SharedInformerOption:
    """Set resync periods for particular resource types."""

    def apply(factory: SharedInformerFactory) -> SharedInformerFactory:
        for obj, period in resync_config.items():
            factory.custom_resync[_type_key(obj)] = period
        return factory

    return apply


def with_tweak_list_options(tweak_list_options: Optional[TweakListOptionsFunc]) -> SharedInformerOption:
    """Apply a filter to the list options of every informer."""

    def apply(factory: SharedInformerFactory) -> SharedInformerFactory:
        factory.tweak_list_options = tweak_list_options
        return factory

    return apply


def with_namespace(namespace: str) -> SharedInformerOption:
    """Limit the factory to one namespace."""

    def apply(factory: SharedInformerFactory) -> SharedInformerFactory:
        factory.namespace = namespace
        return factory

    return apply


def new_shared_informer_factory(client: Any, default_resync: float) -> SharedInformerFactory:
    """Create a factory for all namespaces."""
    return new_shared_informer_factory_with_options(client, default_resync)


def new_filtered_shared_informer_factory(
    client: Any,
    default_resync: float,
    namespace: str,
    tweak_list_options: Optional[TweakListOptionsFunc],
) -> SharedInformerFactory:
    """Create a factory limited to a namespace and list filter."""
    return new_shared_informer_factory_with_options(
        client,
        default_resync,
        with_namespace(namespace),
        with_tweak_list_options(tweak_list_options),
    )


def new_shared_informer_factory_with_options(
    client: Any, default_resync: float, *args: SharedInformerOption
) -> SharedInformerFactory:
    """Create a factory and apply each option in turn."""
    factory = SharedInformerFactory(client, default_resync)
    for option in args:
        factory = option(factory)
    return factory