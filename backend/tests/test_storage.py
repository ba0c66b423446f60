"""Tests for the namespaced key-value store."""

import json

from services.storage import KeyValueStore


def test_get_returns_fallback_when_missing(store):
    assert store.get("missing", []) == []
    assert store.get("missing") is None


def test_set_and_get_use_namespaced_keys(store):
    assert store.set("versionHistory", [{"id": "1"}])

    assert store.get("versionHistory") == [{"id": "1"}]
    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert list(raw) == ["apb:versionHistory"]


def test_custom_namespace(tmp_path):
    store = KeyValueStore(tmp_path / "data.json", namespace="test:")
    store.set("key", "value")
    assert store.key("key") == "test:key"
    assert json.loads((tmp_path / "data.json").read_text(encoding="utf-8")) == {"test:key": "value"}


def test_corrupt_file_returns_fallback_and_is_overwritten(store):
    store.path.write_text("{not json", encoding="utf-8")

    assert store.get("anything", "fallback") == "fallback"
    assert store.set("anything", 1)
    assert store.get("anything") == 1


def test_set_reports_unserializable_values(store):
    assert store.set("bad", object()) is False
    assert store.get("bad", "fallback") == "fallback"


def test_set_reports_write_failure(tmp_path):
    store = KeyValueStore(tmp_path)
    assert store.set("key", "value") is False


def test_remove(store):
    store.set("a", 1)
    store.set("b", 2)

    assert store.remove("a")
    assert store.get("a") is None
    assert store.get("b") == 2
    assert store.remove("never-set")
