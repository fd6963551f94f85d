"""Key -> bytes object storage used for the master resume."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ObjectStore(ABC):
    """Storage contract: whole-object get/put, no versioning."""

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None when the key does not exist."""

    @abstractmethod
    def put(self, key: str, data: bytes, content_type: str = "application/octet-stream") -> None:
        """Store `data` under `key`, replacing any previous object."""


class LocalObjectStore(ObjectStore):
    """Local-disk backend: one file per key under `root_dir`."""

    def __init__(self, root_dir: Path | str) -> None:
        self.root_dir = Path(root_dir).resolve()

    def get(self, key: str) -> bytes | None:
        target = self._resolve(key)
        if not target.is_file():
            return None
        return target.read_bytes()

    def put(self, key: str, data: bytes, content_type: str = "application/octet-stream") -> None:
        target = self._resolve(key)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp = target.with_name(f".{target.name}.tmp")
        tmp.write_bytes(data)
        tmp.replace(target)

    def _resolve(self, key: str) -> Path:
        target = (self.root_dir / key).resolve()
        if target == self.root_dir or self.root_dir not in target.parents:
            raise ValueError(f"Invalid object key: {key!r}")
        return target


class MemoryObjectStore(ObjectStore):
    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}

    def get(self, key: str) -> bytes | None:
        item = self.objects.get(key)
        return item[0] if item else None

    def put(self, key: str, data: bytes, content_type: str = "application/octet-stream") -> None:
        self.objects[key] = (data, content_type)
