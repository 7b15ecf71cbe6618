import json

import pytest

from states_api.services.record_store import StateRecordStore


def test_upsert_creates_record():
    store = StateRecordStore()

    record = store.find_one_and_update("OH", {"funfacts": ["A"]})

    assert record.to_document() == {"stateCode": "OH", "funfacts": ["A"]}
    assert store.find_one("OH").funfacts == ["A"]


def test_update_without_upsert_leaves_missing_record_missing():
    store = StateRecordStore()

    assert store.find_one_and_update("OH", {"funfacts": ["A"]}, upsert=False) is None
    assert store.find_one("OH") is None


def test_returned_records_are_copies():
    store = StateRecordStore()
    store.find_one_and_update("OH", {"funfacts": ["A"]})

    store.find_one("OH").funfacts.append("B")
    store.find_all()[0].funfacts.append("C")

    assert store.find_one("OH").funfacts == ["A"]


def test_unset_field_keeps_document():
    store = StateRecordStore()
    store.find_one_and_update("OH", {"funfacts": ["A"]})

    record = store.unset_field("OH", "funfacts")

    assert record.to_document() == {"stateCode": "OH"}
    assert store.find_one("OH") is not None
    assert store.unset_field("TX", "funfacts") is None


def test_unknown_fields_are_rejected():
    store = StateRecordStore()

    with pytest.raises(ValueError):
        store.find_one_and_update("OH", {"stateCode": "TX"})
    with pytest.raises(ValueError):
        store.unset_field("OH", "stateCode")


def test_file_backed_store_round_trip(tmp_path):
    path = tmp_path / "records.json"
    store = StateRecordStore(path=path)
    store.find_one_and_update("OH", {"funfacts": ["A", "B"]})
    store.find_one_and_update("TX", {"funfacts": ["C"]})
    store.unset_field("TX", "funfacts")

    assert json.loads(path.read_text()) == [
        {"stateCode": "OH", "funfacts": ["A", "B"]},
        {"stateCode": "TX"},
    ]

    reloaded = StateRecordStore()
    reloaded.load(path)
    assert reloaded.find_one("OH").funfacts == ["A", "B"]
    assert reloaded.find_one("TX").funfacts is None


def test_reset_clears_records():
    store = StateRecordStore()
    store.find_one_and_update("OH", {"funfacts": ["A"]})

    store.reset()

    assert store.find_all() == []
