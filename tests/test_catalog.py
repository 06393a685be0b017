"""
Tests for Catalog and CatalogCollection.
"""

import threading

import pytest

from rms_zone import (
    Catalog,
    CatalogCollection,
    CatalogNotFoundError,
    InvalidCatalogError,
)


def test_catalog_preserves_display_order():
    catalog = Catalog(["sector3", "sector1", "sector2"], name="sectors")

    assert catalog.zones() == ("sector3", "sector1", "sector2")
    assert list(catalog) == ["sector3", "sector1", "sector2"]
    assert catalog.size() == 3
    assert len(catalog) == 3
    assert catalog.name == "sectors"


def test_catalog_contains():
    catalog = Catalog(["분당", "수지"])

    assert catalog.contains("분당")
    assert "수지" in catalog
    assert not catalog.contains("종로")
    # Exact string identity
    assert not catalog.contains("분당 ")


def test_catalog_rejects_empty_input_by_default():
    with pytest.raises(InvalidCatalogError):
        Catalog([])


def test_catalog_allows_empty_when_not_required():
    catalog = Catalog([], require_non_empty=False)

    assert catalog.size() == 0
    assert catalog.zones() == ()


def test_catalog_rejects_duplicates():
    with pytest.raises(InvalidCatalogError, match="duplicate"):
        Catalog(["A", "B", "A"])


@pytest.mark.parametrize("bad", [[""], ["A", None], ["A", 3]])
def test_catalog_rejects_invalid_entries(bad):
    with pytest.raises(InvalidCatalogError):
        Catalog(bad)


def test_catalog_rejects_bare_string():
    with pytest.raises(InvalidCatalogError):
        Catalog("ABC")


def test_invalid_catalog_error_is_value_error():
    assert issubclass(InvalidCatalogError, ValueError)


def test_catalog_is_read_only():
    source = ["A", "B"]
    catalog = Catalog(source)
    source.append("C")

    assert catalog.zones() == ("A", "B")
    assert not hasattr(catalog, "add")
    with pytest.raises(AttributeError):
        catalog.extra = 1


def test_collection_set_and_get():
    collection = CatalogCollection()
    sectors = Catalog(["sector1", "sector2"], name="sectors")
    collection.set_catalog("sectors", sectors)

    assert collection.get_catalog("sectors") is sectors
    assert "sectors" in collection
    assert len(collection) == 1


def test_collection_set_replaces_existing():
    collection = CatalogCollection()
    collection.set_catalog("sectors", Catalog(["sector1"], name="sectors"))
    collection.set_catalog("sectors", Catalog(["sector9"], name="sectors"))

    assert collection.get_catalog("sectors").zones() == ("sector9",)
    assert collection.list_catalogs() == ["sectors"]


def test_collection_unknown_catalog_lists_available():
    collection = CatalogCollection.from_mapping({"sectors": ["A"], "zones_kr": ["분당"]})

    with pytest.raises(CatalogNotFoundError) as excinfo:
        collection.get_catalog("missing")

    message = str(excinfo.value)
    assert "missing" in message
    assert "sectors" in message and "zones_kr" in message
    assert isinstance(excinfo.value, KeyError)


def test_collection_from_mapping_keeps_order_and_names():
    collection = CatalogCollection.from_mapping({"b": ["1"], "a": ["2"]})

    assert collection.list_catalogs() == ["b", "a"]
    assert collection.get_catalog("a").name == "a"


def test_collection_from_mapping_validates_catalogs():
    with pytest.raises(InvalidCatalogError):
        CatalogCollection.from_mapping({"broken": []})


def test_collection_remove():
    collection = CatalogCollection.from_mapping({"a": ["1"]})
    collection.remove_catalog("a")

    assert len(collection) == 0
    with pytest.raises(CatalogNotFoundError):
        collection.remove_catalog("a")


def test_collection_concurrent_writes():
    collection = CatalogCollection()

    def writer(offset):
        for i in range(100):
            name = f"c{offset}_{i}"
            collection.set_catalog(name, Catalog([name], name=name))

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(collection) == 400
