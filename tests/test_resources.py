import pytest

from calicoapi.lister import Indexer, Lister, NotFoundError
from calicoapi.resources import NamespacedLister, NamespaceLister, Resource, new_lister


@pytest.fixture
def policies():
    indexer = Indexer()
    indexer.add("ns1/allow", {"name": "allow", "ns": "ns1"}, {"tier": "web"})
    indexer.add("ns1/deny", {"name": "deny", "ns": "ns1"}, {"tier": "db"})
    indexer.add("ns2/allow", {"name": "allow", "ns": "ns2"}, {"tier": "web"})
    return indexer


def test_namespaced_resources_are_the_policy_and_set_kinds():
    namespaced = {
        r for r in Resource if isinstance(new_lister(r, Indexer()), NamespacedLister)
    }
    assert namespaced == {Resource.NETWORK_POLICY, Resource.NETWORK_SET}
    assert namespaced == {r for r in Resource if r.namespaced}


@pytest.mark.parametrize(
    "resource, singular",
    [
        (Resource.HOST_ENDPOINT, "hostendpoint"),
        (Resource.IP_POOL, "ippool"),
        (Resource.PROFILE, "profile"),
    ],
)
def test_resource_names_follow_source(resource, singular):
    lister = new_lister(resource, Indexer())
    with pytest.raises(NotFoundError) as info:
        lister.get("absent")
    assert info.value.resource == singular
    assert resource.singular == singular


def test_namespaced_resource_name_in_error():
    ns_lister = new_lister(Resource.NETWORK_POLICY, Indexer()).namespace("ns")
    with pytest.raises(NotFoundError) as info:
        ns_lister.get("absent")
    assert info.value.resource == "networkpolicy"
    assert Resource.NETWORK_POLICY.plural == "networkpolicies"
    assert Resource.IP_POOL.plural == "ippools"


def test_new_lister_cluster_scoped_gets_by_name():
    indexer = Indexer()
    pool = {"cidr": "10.0.0.0/16"}
    indexer.add("default-pool", pool)
    lister = new_lister(Resource.IP_POOL, indexer)
    assert isinstance(lister, Lister)
    assert lister.get("default-pool") is pool
    assert lister.list() == [pool]


def test_cluster_scoped_missing_raises_not_found():
    lister = new_lister(Resource.PROFILE, Indexer())
    with pytest.raises(NotFoundError) as info:
        lister.get("missing")
    assert info.value.resource == "profile"
    assert info.value.name == "missing"


def test_new_lister_namespaced_lists_everything(policies):
    lister = new_lister(Resource.NETWORK_POLICY, policies)
    assert isinstance(lister, NamespacedLister)
    assert len(lister.list()) == 3


def test_namespaced_list_with_selector(policies):
    lister = new_lister(Resource.NETWORK_POLICY, policies)
    result = lister.list({"tier": "web"})
    assert sorted(o["ns"] for o in result) == ["ns1", "ns2"]


def test_namespace_lister_confines_to_namespace(policies):
    ns_lister = new_lister(Resource.NETWORK_POLICY, policies).namespace("ns1")
    assert isinstance(ns_lister, NamespaceLister)
    assert sorted(o["name"] for o in ns_lister.list()) == ["allow", "deny"]
    assert all(o["ns"] == "ns1" for o in ns_lister.list())


def test_namespace_lister_selector_callable(policies):
    ns_lister = new_lister(Resource.NETWORK_POLICY, policies).namespace("ns1")
    result = ns_lister.list(lambda labels: labels.get("tier") == "db")
    assert [o["name"] for o in result] == ["deny"]


def test_namespace_lister_empty_namespace_lists_all(policies):
    ns_lister = new_lister(Resource.NETWORK_POLICY, policies).namespace("")
    assert len(ns_lister.list()) == 3


def test_namespace_prefix_does_not_match_longer_namespace():
    indexer = Indexer()
    indexer.add("ns/a", "a")
    indexer.add("ns-other/b", "b")
    ns_lister = new_lister(Resource.NETWORK_SET, indexer).namespace("ns")
    assert ns_lister.list() == ["a"]


def test_namespace_lister_get(policies):
    ns_lister = new_lister(Resource.NETWORK_POLICY, policies).namespace("ns2")
    assert ns_lister.get("allow") == {"name": "allow", "ns": "ns2"}


def test_namespace_lister_get_missing_raises(policies):
    ns_lister = new_lister(Resource.NETWORK_POLICY, policies).namespace("ns2")
    with pytest.raises(NotFoundError) as info:
        ns_lister.get("deny")
    assert info.value.resource == "networkpolicy"
    assert info.value.name == "deny"
    assert str(info.value) == 'networkpolicy.projectcalico.org "deny" not found'


def test_namespace_lister_sees_later_additions():
    indexer = Indexer()
    ns_lister = new_lister(Resource.NETWORK_SET, indexer).namespace("prod")
    assert ns_lister.list() == []
    indexer.add("prod/set1", "set1")
    assert ns_lister.get("set1") == "set1"
    indexer.delete("prod/set1")
    with pytest.raises(NotFoundError):
        ns_lister.get("set1")