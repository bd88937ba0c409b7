# tests/core/manifest/test_store.py
"""
Testes do `FileSystemStore` (ponto de commit em disco).

Os testes asseguram que:
- o commit grava exatamente o texto serializado e devolve seu sha256
- quebras de linha CRLF sobrevivem ao round-trip read → commit
- falhas de I/O viram `ManifestIOError` com a operação identificada
"""

import hashlib

import pytest

try:
    from depprune.core.manifest.document import parse
    from depprune.core.manifest.store import FileSystemStore, ManifestStore
    from depprune.core.exceptions import ManifestIOError
except Exception as e:  # noqa: BLE001
    parse = None
    FileSystemStore = None
    ManifestStore = None
    ManifestIOError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing manifest store module. Implement:\n"
            "- src/depprune/core/manifest/store.py (FileSystemStore)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_store_conforms_to_protocol():
    _require_imports()

    assert isinstance(FileSystemStore(), ManifestStore)


def test_commit_writes_serialized_document(tmp_path, cargo_manifest_text, write_manifest):
    _require_imports()

    path = write_manifest(tmp_path, cargo_manifest_text)
    store = FileSystemStore()
    doc = parse(store.read(path))
    doc.remove_dependency("c")

    committed = store.commit(path, doc)

    on_disk = path.read_bytes().decode("utf-8")
    assert on_disk == doc.to_text()
    assert committed.text == on_disk
    assert committed.sha256 == hashlib.sha256(on_disk.encode("utf-8")).hexdigest()
    assert committed.path == path


def test_crlf_round_trip(tmp_path, write_manifest):
    _require_imports()

    text = '[package]\r\nname = "x"\r\n\r\n[dependencies]\r\na = "1"\r\n'
    path = write_manifest(tmp_path, text)
    store = FileSystemStore()

    assert store.read(path) == text

    store.commit(path, parse(store.read(path)))

    assert path.read_bytes() == text.encode("utf-8")


def test_read_missing_file_raises(tmp_path):
    _require_imports()

    with pytest.raises(ManifestIOError) as excinfo:
        FileSystemStore().read(tmp_path / "Cargo.toml")

    assert excinfo.value.details["operation"] == "read"


def test_read_non_utf8_raises(tmp_path):
    _require_imports()

    path = tmp_path / "Cargo.toml"
    path.write_bytes(b"[dependencies]\na = \"\xff\"\n")

    with pytest.raises(ManifestIOError):
        FileSystemStore().read(path)


def test_commit_failure_raises(tmp_path):
    _require_imports()

    target = tmp_path / "Cargo.toml"
    target.mkdir()

    with pytest.raises(ManifestIOError) as excinfo:
        FileSystemStore().commit(target, parse("[dependencies]\n"))

    assert excinfo.value.details["operation"] == "write"
