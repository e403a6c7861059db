"""Minimal key-value stores backing device-local persistence."""

from __future__ import annotations

import json
import os
from pathlib import Path
import tempfile
from threading import Lock
from typing import Protocol

from numclass_app.constants.game_constants import (
    DEFAULT_STORAGE_DIRNAME,
    DEFAULT_STORAGE_FILENAME,
    STORAGE_PATH_ENV_VAR,
)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    """Dict-backed store used for tests and ephemeral runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileKeyValueStore:
    """Stores string values under keys of a single JSON object on disk.

    Each ``set`` rewrites the whole file through a temporary sibling and
    ``os.replace`` so a reader never observes a half-written document. An
    unreadable file is never overwritten; ``get`` and ``set`` raise instead.
    """

    def __init__(self, file_path: Path) -> None:
        self._path = Path(file_path)
        self._lock = Lock()

    @classmethod
    def from_environment(cls) -> "JsonFileKeyValueStore":
        override = os.environ.get(STORAGE_PATH_ENV_VAR)
        if override:
            return cls(Path(override).expanduser())
        return cls(Path.home() / DEFAULT_STORAGE_DIRNAME / DEFAULT_STORAGE_FILENAME)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        with self._lock:
            document = self._read_document()
        value = document.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"Stored value for '{key}' is not a string.")
        return value

    def set(self, key: str, value: str) -> None:
        with self._lock:
            document = self._read_document()
            document[key] = value
            self._write_document(document)

    def _read_document(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        document = json.loads(text)
        if not isinstance(document, dict):
            raise ValueError(f"Storage file {self._path} does not hold a JSON object.")
        return document

    def _write_document(self, document: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(document, handle, ensure_ascii=False, indent=2)
            os.replace(temp_name, self._path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
