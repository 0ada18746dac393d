"""
Tests for token storage and navigation.
"""
import json

from stagedoor.session import FileTokenStore, MemoryTokenStore, Navigator


def test_memory_store_round_trip():
    store = MemoryTokenStore()
    assert store.get() is None

    store.set("abc")
    assert store.get() == "abc"

    store.clear()
    assert store.get() is None


def test_file_store_missing_file_means_no_token(tmp_path):
    store = FileTokenStore(tmp_path / "nested" / "session.json")

    assert store.get() is None


def test_file_store_persists_under_fixed_key(tmp_path):
    path = tmp_path / "nested" / "session.json"
    FileTokenStore(path).set("abc")

    assert json.loads(path.read_text(encoding="utf-8")) == {"accessToken": "abc"}
    # A fresh instance (another process) sees the same token
    assert FileTokenStore(path).get() == "abc"


def test_file_store_clear_keeps_other_keys(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"accessToken": "abc", "theme": "dark"}), encoding="utf-8")

    FileTokenStore(path).clear()

    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}


def test_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    store = FileTokenStore(path)

    assert store.get() is None
    store.set("abc")
    assert store.get() == "abc"


def test_file_store_custom_key(tmp_path):
    path = tmp_path / "session.json"
    FileTokenStore(path, key="adminToken").set("xyz")

    assert FileTokenStore(path).get() is None
    assert FileTokenStore(path, key="adminToken").get() == "xyz"


def test_navigator_redirect_updates_path_and_notifies():
    seen = []
    navigator = Navigator(current_path="/admin/faq", on_redirect=seen.append)

    navigator.redirect("/admin/login")

    assert navigator.current_path == "/admin/login"
    assert seen == ["/admin/login"]


def test_navigator_without_callback():
    navigator = Navigator()

    navigator.redirect("/admin/login")

    assert navigator.current_path == "/admin/login"
