"""Intermediate data models for the chunk and front-matter pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class ChunkKind(str, Enum):
    """Restrict source chunks to the three kinds a host source file can hold"""
    doc = "doc"                 # documentation comment (prose + front-matter keywords)
    host = "host"               # host-language code
    embedded = "embedded"       # embedded snippet block


class Chunk(BaseModel):
    """A contiguous, non-blank run of source lines of a single kind."""
    kind: ChunkKind
    lines: list[str]


@dataclass
class FrontMatter:
    """Front-matter interior lines plus a single-pass field -> raw value map."""
    lines:  list[str]
    fields: dict[str, str] = field(default_factory=dict)

    def has(self, name: str) -> bool:
        return name in self.fields

    def get(self, name: str) -> str | None:
        return self.fields.get(name)


@dataclass
class ConvertedDoc:
    """Result of converting one article; the text is ready to be written out."""
    path:        Path
    text:        str
    frontmatter: dict[str, str]
    tags:        list[str]
