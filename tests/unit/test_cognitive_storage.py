import json

from regima.cognitive import KNOWLEDGE_KEY, LocalStorage
from regima.cognitive.storage import resolve_storage_path


def test_set_get_and_persist(tmp_path):
    path = tmp_path / "nested" / "store.json"
    store = LocalStorage(path)
    assert store.get_item("missing") is None

    store.set_item("greeting", "hello")
    assert store.get_item("greeting") == "hello"
    assert json.loads(path.read_text(encoding="utf-8")) == {"greeting": "hello"}
    assert LocalStorage(path).get_item("greeting") == "hello"


def test_remove_clear_keys_len(storage):
    storage.set_item("a", "1")
    storage.set_item("b", "2")
    assert storage.keys() == ["a", "b"]
    assert len(storage) == 2

    storage.remove_item("a")
    storage.remove_item("never-set")
    assert storage.keys() == ["b"]

    storage.clear()
    assert len(storage) == 0
    assert LocalStorage(storage.path).keys() == []


def test_json_list_helpers(storage):
    assert storage.read_json_list(KNOWLEDGE_KEY) == []
    storage.write_json(KNOWLEDGE_KEY, [{"name": "Page__"}])
    assert storage.read_json_list(KNOWLEDGE_KEY) == [{"name": "Page__"}]


def test_corrupt_values_read_as_empty(storage):
    storage.set_item(KNOWLEDGE_KEY, "{not json")
    assert storage.read_json_list(KNOWLEDGE_KEY) == []
    storage.set_item(KNOWLEDGE_KEY, '{"a": 1}')
    assert storage.read_json_list(KNOWLEDGE_KEY) == []


def test_corrupt_file_starts_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("garbage", encoding="utf-8")
    assert len(LocalStorage(path)) == 0

    path.write_text("[1, 2]", encoding="utf-8")
    assert len(LocalStorage(path)) == 0


def test_storage_path_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("COGNITIVE_STORAGE_PATH", str(tmp_path / "env.json"))
    assert resolve_storage_path() == tmp_path / "env.json"
    assert LocalStorage().path == tmp_path / "env.json"
