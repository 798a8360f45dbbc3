"""The resource kinds of the API group and listers that honour namespaces."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Union

from .factory import NAMESPACE_ALL
from .lister import Indexer, Lister, NotFoundError, Selector, _selector_matches


class Resource(enum.Enum):
    """A resource kind, with its singular and plural names and its scope."""

    BGP_CONFIGURATION = ("bgpconfiguration", "bgpconfigurations", False)
    BGP_PEER = ("bgppeer", "bgppeers", False)
    CLUSTER_INFORMATION = ("clusterinformation", "clusterinformations", False)
    FELIX_CONFIGURATION = ("felixconfiguration", "felixconfigurations", False)
    GLOBAL_NETWORK_POLICY = ("globalnetworkpolicy", "globalnetworkpolicies", False)
    GLOBAL_NETWORK_SET = ("globalnetworkset", "globalnetworksets", False)
    HOST_ENDPOINT = ("hostendpoint", "hostendpoints", False)
    IP_POOL = ("ippool", "ippools", False)
    KUBE_CONTROLLERS_CONFIGURATION = (
        "kubecontrollersconfiguration",
        "kubecontrollersconfigurations",
        False,
    )
    NETWORK_POLICY = ("networkpolicy", "networkpolicies", True)
    NETWORK_SET = ("networkset", "networksets", True)
    PROFILE = ("profile", "profiles", False)

    def __init__(self, singular: str, plural: str, namespaced: bool) -> None:
        self.singular = singular
        self.plural = plural
        self.namespaced = namespaced


@dataclass(frozen=True)
class NamespaceLister:
    """Lists and gets resources of one kind within a single namespace.

    Returned objects are shared with the cache and must be treated as
    read-only.
    """

    resource: str
    indexer: Indexer
    namespace_name: str

    def list(self, selector: Selector = None) -> list[Any]:
        """Return the objects of this namespace whose labels match the selector.

        The empty namespace stands for all namespaces.
        """
        prefix = f"{self.namespace_name}/"
        return [
            obj
            for key, obj, labels in self.indexer.items()
            if (self.namespace_name == NAMESPACE_ALL or key.startswith(prefix))
            and _selector_matches(selector, labels)
        ]

    def get(self, name: str) -> Any:
        """Return the named object of this namespace, or raise NotFoundError."""
        try:
            return self.indexer.get_by_key(f"{self.namespace_name}/{name}")
        except KeyError:
            raise NotFoundError(self.resource, name) from None


@dataclass(frozen=True)
class NamespacedLister:
    """Lists resources of a namespaced kind across every namespace."""

    resource: str
    indexer: Indexer

    def list(self, selector: Selector = None) -> list[Any]:
        """Return every object whose labels match the selector."""
        return [obj for _, obj, labels in self.indexer.items() if _selector_matches(selector, labels)]

    def namespace(self, namespace: str) -> NamespaceLister:
        """Return a lister confined to one namespace."""
        return NamespaceLister(self.resource, self.indexer, namespace)


def new_lister(resource: Resource, indexer: Indexer) -> Union[Lister, NamespacedLister]:
    """Return the lister suited to a resource kind's scope."""
    if resource.namespaced:
        return NamespacedLister(resource.singular, indexer)
    return Lister(resource.singular, indexer)