import pytest

from cosmkit.errors import StdError
from cosmkit.paths import ArtifactsDir, WasmPath


def test_wasm_path_requires_existing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        WasmPath(tmp_path / "missing.wasm")


def test_wasm_path_requires_wasm_extension(tmp_path):
    other = tmp_path / "contract.txt"
    other.write_bytes(b"x")
    with pytest.raises(StdError) as info:
        WasmPath(other)
    assert info.value.message == "File must be a wasm file"


def test_wasm_path_keeps_path(tmp_path):
    wasm = tmp_path / "contract.wasm"
    wasm.write_bytes(b"")
    assert WasmPath(str(wasm)).path == wasm
    assert WasmPath(wasm) == WasmPath(str(wasm))


def test_checksum_of_empty_file(tmp_path):
    wasm = tmp_path / "empty.wasm"
    wasm.write_bytes(b"")
    assert (
        WasmPath(wasm).checksum()
        == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_checksum_of_known_content(tmp_path):
    wasm = tmp_path / "abc.wasm"
    wasm.write_bytes(b"abc")
    assert (
        WasmPath(wasm).checksum()
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_checksum_changes_with_content(tmp_path):
    wasm = tmp_path / "c.wasm"
    wasm.write_bytes(b"one")
    first = WasmPath(wasm).checksum()
    wasm.write_bytes(b"two")
    second = WasmPath(wasm).checksum()
    assert first != second
    assert len(first) == 64


def test_artifacts_dir_requires_existing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        ArtifactsDir(tmp_path / "nope")


def test_find_wasm_path(tmp_path):
    (tmp_path / "my_contract.wasm").write_bytes(b"a")
    (tmp_path / "other.wasm").write_bytes(b"b")
    (tmp_path / "my_contract.txt").write_bytes(b"c")
    found = ArtifactsDir(tmp_path).find_wasm_path("my_contract")
    assert found.path == tmp_path / "my_contract.wasm"


def test_find_wasm_path_ignores_directories(tmp_path):
    (tmp_path / "my_contract.wasm").mkdir()
    with pytest.raises(StdError) as info:
        ArtifactsDir(tmp_path).find_wasm_path("my_contract")
    assert info.value.message == (
        "Could not find wasm file with name my_contract in artifacts dir"
    )


def test_find_wasm_path_missing(tmp_path):
    (tmp_path / "other.wasm").write_bytes(b"b")
    with pytest.raises(StdError):
        ArtifactsDir(tmp_path).find_wasm_path("counter")


def test_env_uses_variable(tmp_path, monkeypatch):
    monkeypatch.setenv("ARTIFACTS_DIR", str(tmp_path))
    assert ArtifactsDir.env().path == tmp_path


def test_env_unset(monkeypatch):
    monkeypatch.delenv("ARTIFACTS_DIR", raising=False)
    with pytest.raises(StdError):
        ArtifactsDir.env()