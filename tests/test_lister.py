import pytest

from calicoapi.lister import GROUP_NAME, Indexer, Lister, NotFoundError


@pytest.fixture
def indexer():
    idx = Indexer()
    idx.add("default", {"name": "default"}, {"role": "main"})
    idx.add("peer-a", {"name": "peer-a"}, {"role": "edge", "zone": "east"})
    idx.add("peer-b", {"name": "peer-b"}, {"role": "edge", "zone": "west"})
    return idx


def test_get_returns_stored_object(indexer):
    lister = Lister("bgpconfiguration", indexer)
    assert lister.get("peer-a") == {"name": "peer-a"}


def test_get_missing_raises_not_found(indexer):
    lister = Lister("bgpconfiguration", indexer)
    with pytest.raises(NotFoundError) as info:
        lister.get("missing")
    assert info.value.resource == "bgpconfiguration"
    assert info.value.name == "missing"
    assert info.value.group == GROUP_NAME
    assert str(info.value) == 'bgpconfiguration.projectcalico.org "missing" not found'


def test_not_found_is_lookup_error(indexer):
    with pytest.raises(LookupError):
        Lister("bgppeer", indexer).get("nope")


def test_list_without_selector_returns_all_in_order(indexer):
    lister = Lister("bgppeer", indexer)
    names = [obj["name"] for obj in lister.list()]
    assert names == ["default", "peer-a", "peer-b"]


def test_list_with_mapping_selector(indexer):
    lister = Lister("bgppeer", indexer)
    assert [o["name"] for o in lister.list({"role": "edge"})] == ["peer-a", "peer-b"]
    assert [o["name"] for o in lister.list({"role": "edge", "zone": "west"})] == ["peer-b"]
    assert lister.list({"role": "none"}) == []


def test_list_with_empty_mapping_matches_everything(indexer):
    lister = Lister("bgppeer", indexer)
    assert len(lister.list({})) == len(indexer)


def test_list_with_callable_selector(indexer):
    lister = Lister("globalnetworkset", indexer)
    result = lister.list(lambda labels: "zone" not in labels)
    assert result == [{"name": "default"}]


def test_add_replaces_existing(indexer):
    indexer.add("peer-a", {"name": "peer-a", "v": 2}, {"role": "core"})
    lister = Lister("bgppeer", indexer)
    assert lister.get("peer-a") == {"name": "peer-a", "v": 2}
    assert lister.list({"role": "core"}) == [{"name": "peer-a", "v": 2}]
    assert len(indexer) == 3


def test_delete_removes_and_ignores_missing(indexer):
    indexer.delete("peer-a")
    indexer.delete("never-there")
    assert "peer-a" not in indexer
    with pytest.raises(NotFoundError):
        Lister("bgppeer", indexer).get("peer-a")
    assert len(indexer) == 2


def test_get_by_key_missing_raises_key_error():
    with pytest.raises(KeyError):
        Indexer().get_by_key("absent")


def test_labels_are_copied_on_add():
    idx = Indexer()
    labels = {"tier": "front"}
    idx.add("x", "obj", labels)
    labels["tier"] = "back"
    assert [entry[2] for entry in idx.items()] == [{"tier": "front"}]


def test_items_yields_key_object_labels(indexer):
    keys = [key for key, _, _ in indexer.items()]
    assert keys == ["default", "peer-a", "peer-b"]
    for key, obj, _ in indexer.items():
        assert obj["name"] == key


def test_add_without_labels_matches_only_open_selectors():
    idx = Indexer()
    idx.add("felix", "cfg")
    lister = Lister("felixconfiguration", idx)
    assert lister.list() == ["cfg"]
    assert lister.list({"a": "b"}) == []


def test_empty_indexer_lists_nothing():
    assert Lister("clusterinformation", Indexer()).list() == []