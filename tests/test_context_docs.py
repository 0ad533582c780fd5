import pytest

from localassist.context_docs import ContextFile, ContextStore, sanitize_title


@pytest.fixture
def store(tmp_path):
    return ContextStore(tmp_path / "context")


def test_sanitize_title_replaces_unsafe_characters():
    assert sanitize_title("my notes/v1.0") == "my_notes_v1_0"


def test_sanitize_title_keeps_safe_characters():
    title = "Notes-2024_draft"
    assert sanitize_title(title) == title


def test_list_creates_missing_directory(store):
    assert store.list_files() == []
    assert store.directory.is_dir()


def test_add_then_get_round_trip(store):
    path = store.add_document("Project Plan", "line one\nline two")
    assert path.name == sanitize_title("Project Plan") + ".md"
    assert store.get_document(path.name) == "line one\nline two"


def test_list_reports_size_and_short_preview(store):
    path = store.add_document("short", "hello")
    assert store.list_files() == [ContextFile(name=path.name, size=5, preview="hello")]


def test_long_preview_is_truncated(store):
    content = "a" * 150
    path = store.add_document("long", content)
    (entry,) = store.list_files()
    assert entry.name == path.name
    assert entry.size == 150
    assert entry.preview == "a" * 100 + "..."


def test_preview_ellipsis_follows_byte_length(store):
    content = "é" * 60
    store.add_document("accents", content)
    (entry,) = store.list_files()
    assert entry.size == len(content.encode("utf-8"))
    assert entry.preview == content + "..."


def test_list_skips_other_files_and_sorts(store):
    store.directory.mkdir(parents=True)
    (store.directory / "b.txt").write_text("b")
    (store.directory / "a.json").write_text("{}")
    (store.directory / "image.png").write_bytes(b"\x89PNG")
    (store.directory / "sub.md").mkdir()
    assert [f.name for f in store.list_files()] == ["a.json", "b.txt"]


def test_delete_removes_document(store):
    path = store.add_document("gone", "x")
    store.delete_document(path.name)
    assert not path.exists()
    assert store.list_files() == []


def test_delete_missing_raises(store):
    store.directory.mkdir(parents=True)
    with pytest.raises(FileNotFoundError):
        store.delete_document("absent.md")


def test_get_missing_raises(store):
    store.directory.mkdir(parents=True)
    with pytest.raises(FileNotFoundError):
        store.get_document("absent.md")


@pytest.mark.parametrize("name", ["../secret.md", "sub/file.md", ".."])
def test_path_like_names_rejected(store, name):
    with pytest.raises(ValueError, match="Invalid filename"):
        store.get_document(name)
    with pytest.raises(ValueError, match="Invalid filename"):
        store.delete_document(name)