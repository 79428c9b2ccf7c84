"""File-system port used for tag index side effects: local disk and in-memory implementations"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


class FileSystem(ABC):
    @abstractmethod
    def exists(self, path: Path) -> bool:
        raise NotImplementedError

    @abstractmethod
    def mkdir(self, path: Path) -> None:
        """Create a directory (and parents); an existing directory is success."""
        raise NotImplementedError

    @abstractmethod
    def write_text(self, path: Path, text: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def read_text(self, path: Path) -> str:
        raise NotImplementedError


class LocalFileSystem(FileSystem):
    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def mkdir(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, text: str) -> None:
        Path(path).write_text(text, encoding="utf-8")

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")


@dataclass
class MemoryFileSystem(FileSystem):
    dirs:  set[Path] = field(default_factory=set)
    files: dict[Path, str] = field(default_factory=dict)

    def exists(self, path: Path) -> bool:
        path = Path(path)
        return path in self.dirs or path in self.files

    def mkdir(self, path: Path) -> None:
        path = Path(path)
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def write_text(self, path: Path, text: str) -> None:
        path = Path(path)
        if path.parent not in self.dirs:
            raise FileNotFoundError(f"No such directory: {path.parent}")
        self.files[path] = text

    def read_text(self, path: Path) -> str:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(f"No such file: {path}") from None
