"""Tag parsing and lazy creation of per-tag index pages"""

import logging
from pathlib import Path

from knitpost.store.fs import FileSystem


logger = logging.getLogger(__name__)

TAG_INDEX = "index.html"


def parse_tags(value: str) -> list[str]:
    """Split a space-separated tags field into non-empty tokens."""
    return [t for t in value.split() if t]


def tag_index_page(tag: str) -> str:
    """Return the generated index page stub for a tag."""
    return (
        "---\n"
        "layout: tag\n"
        f"title: {tag}\n"
        "---\n\n"
        "{% include tag_page.html %}\n"
    )


def ensure_tag_dirs(fs: FileSystem, tags_dir: Path, tags: list[str]) -> list[str]:
    """Ensure tags_dir/<tag>/index.html exists for every tag. Returns tags whose page was created.

    Existing directories and index pages are left untouched, so repeated runs are no-ops.
    """
    tags_dir = Path(tags_dir)
    if not fs.exists(tags_dir):
        fs.mkdir(tags_dir)

    created = []
    for tag in dict.fromkeys(tags):
        tag_dir = tags_dir / tag
        if not fs.exists(tag_dir):
            fs.mkdir(tag_dir)
        index = tag_dir / TAG_INDEX
        if not fs.exists(index):
            fs.write_text(index, tag_index_page(tag))
            logger.info("Created tag page %s", index)
            created.append(tag)
    return created
