"""Split host-language source lines into doc, embedded, and host chunks"""

import re
from enum import Enum

from knitpost.core.errors import NestedBlockError
from knitpost.core.models import Chunk, ChunkKind


EMBEDDED_OPEN_RE = re.compile(r'^\s*/\*{3,}\s*[Rr]\s*$')
DOC_OPEN_RE = re.compile(r'^/\*[*!].*$')
CLOSE_RE = re.compile(r'^.*\*/.*$')
BLANK_RE = re.compile(r'^\s*$')


class State(Enum):
    normal = "normal"
    in_doc = "in_doc"
    in_embedded = "in_embedded"


# Kind of chunk flushed when a block of the given state is closed.
CLOSE_KIND = {
    State.in_doc: ChunkKind.doc,
    State.in_embedded: ChunkKind.embedded,
}


def is_blank(lines: list[str]) -> bool:
    return all(BLANK_RE.match(line) for line in lines)


def classify_chunks(lines: list[str]) -> list[Chunk]:
    """Partition source lines into ordered chunks; blank-only chunks are dropped.

    Open and close marker lines are consumed. A close marker outside any block is
    ordinary host content. An open marker inside an open block raises NestedBlockError.
    """
    chunks: list[Chunk] = []
    current: list[str] = []
    state = State.normal

    def flush(kind: ChunkKind) -> None:
        nonlocal current
        if not is_blank(current):
            chunks.append(Chunk(kind=kind, lines=current))
        current = []

    for line_no, line in enumerate(lines, start=1):
        if EMBEDDED_OPEN_RE.match(line):
            opened = State.in_embedded
        elif DOC_OPEN_RE.match(line):
            opened = State.in_doc
        else:
            opened = None

        if opened is not None:
            if state is not State.normal:
                raise NestedBlockError(line_no, line)
            flush(ChunkKind.host)
            state = opened
        elif CLOSE_RE.match(line) and state is not State.normal:
            flush(CLOSE_KIND[state])
            state = State.normal
        else:
            current.append(line)

    # trailing lines are host code
    flush(ChunkKind.host)
    return chunks
