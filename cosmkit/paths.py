"""Locating compiled ``.wasm`` contract files."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

from .errors import StdError

_CHUNK = 1 << 16


class WasmPath:
    """Path to an existing ``.wasm`` file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"provided path {path} does not exist")
        if path.suffix != ".wasm":
            raise StdError("File must be a wasm file")
        self.path = path

    def __repr__(self) -> str:
        return f"WasmPath({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WasmPath):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def checksum(self) -> str:
        """Return the lowercase hex SHA-256 digest of the file."""
        digest = hashlib.sha256()
        with self.path.open("rb") as handle:
            for chunk in iter(lambda: handle.read(_CHUNK), b""):
                digest.update(chunk)
        return digest.hexdigest()


class ArtifactsDir:
    """Directory holding compiled ``.wasm`` files."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"provided path {path} does not exist")
        self.path = path

    def __repr__(self) -> str:
        return f"ArtifactsDir({str(self.path)!r})"

    @classmethod
    def env(cls) -> ArtifactsDir:
        """Use the directory named by the ``ARTIFACTS_DIR`` environment variable."""
        directory = os.environ.get("ARTIFACTS_DIR")
        if directory is None:
            raise StdError("ARTIFACTS_DIR env variable not set")
        return cls(directory)

    def find_wasm_path(self, name: str) -> WasmPath:
        """Return the first ``.wasm`` file whose name contains ``name``."""
        for entry in sorted(self.path.iterdir()):
            if entry.is_file() and entry.suffix == ".wasm" and name in entry.name:
                return WasmPath(entry)
        raise StdError(f"Could not find wasm file with name {name} in artifacts dir")