import json

import pytest

from farmstand.core.errors import CatalogError
from farmstand.domain.repositories.catalog_repo import CatalogStore


def _record(**overrides):
    record = {
        "name": "Fresh Avocados",
        "image": "avocado.svg",
        "price": 6.5,
        "category": "Spain",
        "description": "Ripe.",
        "rating": 4.6,
        "reviews": 128,
    }
    record.update(overrides)
    return record


def _write(tmp_path, payload):
    path = tmp_path / "data.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_load_bundled_catalog(settings, products):
    store = CatalogStore.load(settings.site_path(settings.catalog_file))
    assert len(store) == len(products)
    assert [p.id for p in store] == list(range(len(products)))
    assert store.get(0).name == products[0]["name"]


def test_missing_ids_are_assigned_from_position(tmp_path):
    store = CatalogStore.load(_write(tmp_path, {"products": [_record(), _record(name="Kale")]}))
    assert [p.id for p in store.all()] == [0, 1]
    assert store.get(1).name == "Kale"


def test_bare_array_document_is_accepted(tmp_path):
    store = CatalogStore.load(_write(tmp_path, [_record(id=0)]))
    assert len(store) == 1


def test_get_outside_range_returns_none(tmp_path):
    store = CatalogStore.load(_write(tmp_path, {"products": [_record()]}))
    assert store.get(1) is None
    assert store.get(-1) is None


def test_as_json_keeps_order_and_fields(tmp_path):
    store = CatalogStore.load(_write(tmp_path, {"products": [_record(), _record(name="Kale")]}))
    assert store.as_json() == [
        {**_record(), "id": 0},
        {**_record(name="Kale"), "id": 1},
    ]


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        {"items": []},
        {"products": {"0": {}}},
        {"products": ["avocado"]},
        {"products": [_record(id=5)]},
        {"products": [_record(price=None)]},
        {"products": [{"name": "incomplete"}]},
    ],
)
def test_malformed_documents_are_fatal(tmp_path, payload):
    with pytest.raises(CatalogError):
        CatalogStore.load(_write(tmp_path, payload))


def test_missing_document_is_fatal(tmp_path):
    with pytest.raises(CatalogError):
        CatalogStore.load(tmp_path / "nope.json")


def test_prices_keep_their_written_form(tmp_path):
    store = CatalogStore.load(
        _write(tmp_path, {"products": [_record(price=5), _record(price=6.5), _record(price="6.50")]})
    )
    assert [p.price for p in store] == [5, 6.5, "6.50"]
    assert type(store.get(0).price) is int
    assert [r["price"] for r in store.as_json()] == [5, 6.5, "6.50"]
