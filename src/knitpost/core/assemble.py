"""Assemble classified source chunks into a single markup document"""

from knitpost.core.chunks import BLANK_RE, classify_chunks
from knitpost.core.doccomment import doc_chunk_to_markup
from knitpost.core.models import Chunk, ChunkKind


def strip_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing whitespace-only lines."""
    start, end = 0, len(lines)
    while start < end and BLANK_RE.match(lines[start]):
        start += 1
    while end > start and BLANK_RE.match(lines[end - 1]):
        end -= 1
    return lines[start:end]


def fence(lines: list[str], language: str) -> list[str]:
    return [f"```{language}", *strip_blank_lines(lines), "```"]


def assemble(
    chunks: list[Chunk],
    host_language: str = "cpp",
    embedded_language: str = "r",
    ) -> list[str]:
    """Concatenate chunk output in order; only the first doc chunk may carry front matter."""
    languages = {ChunkKind.host: host_language, ChunkKind.embedded: embedded_language}
    out: list[str] = []
    front_matter = True

    for chunk in chunks:
        if chunk.kind == ChunkKind.doc:
            out.extend(doc_chunk_to_markup(chunk.lines, front_matter))
            front_matter = False
        else:
            out.extend(fence(chunk.lines, languages[chunk.kind]))
    return out


def source_to_markup(
    lines: list[str],
    host_language: str = "cpp",
    embedded_language: str = "r",
    ) -> list[str]:
    """Classify host-language source lines and assemble them into markup lines."""
    return assemble(classify_chunks(lines), host_language, embedded_language)
