"""Front-matter location, validation, and normalization"""

import logging
import re
from pathlib import Path

from knitpost.core.errors import (
    EmptyFrontMatterError,
    LicenseError,
    MissingFieldError,
    MissingFrontMatterError,
    TagFormatError,
)
from knitpost.core.models import FrontMatter
from knitpost.core.tags import ensure_tag_dirs, parse_tags
from knitpost.store.fs import FileSystem


logger = logging.getLogger(__name__)

DELIMITER_RE = re.compile(r'^\s*---\s*$')
FIELD_RE = re.compile(r'^([A-Za-z_][\w-]*):(.*)$')
REQUIRED_FIELDS = ("title", "author", "summary", "license")
LICENSE = "MIT"


def find_delimiters(lines: list[str]) -> tuple[int, int]:
    """Return indexes of the first two delimiter lines."""
    found = [i for i, line in enumerate(lines) if DELIMITER_RE.match(line)][:2]
    if len(found) < 2:
        raise MissingFrontMatterError()
    start, end = found
    if end - start <= 1:
        raise EmptyFrontMatterError()
    return start, end


def parse_front_matter(lines: list[str]) -> FrontMatter:
    """Build the field map in one pass; the first occurrence of a field wins."""
    fields: dict[str, str] = {}
    for line in lines:
        m = FIELD_RE.match(line)
        if m:
            fields.setdefault(m.group(1), m.group(2))
    return FrontMatter(lines=list(lines), fields=fields)


def validate_front_matter(fm: FrontMatter) -> list[str]:
    """Check required fields, license and tags format. Returns the parsed tags."""
    for name in REQUIRED_FIELDS:
        if not fm.has(name):
            raise MissingFieldError(name)

    license_ = fm.get("license").strip()
    if license_ != LICENSE:
        raise LicenseError(license_)

    tags_field = fm.get("tags")
    if tags_field is None:
        return []
    if "," in tags_field:
        raise TagFormatError(tags_field)
    return parse_tags(tags_field)


def extract_front_matter(
    lines: list[str],
    src_name: str,
    tags_dir: Path | None = None,
    fs: FileSystem | None = None,
    default_layout: str = "post",
    ) -> list[str]:
    """Validate the front matter of a document and return its normalized lines.

    Appends a default layout when none is given and always appends the source
    file name as `src`. When both tags_dir and fs are given, an index page is
    ensured for every tag.
    """
    start, end = find_delimiters(lines)
    fm = parse_front_matter(lines[start + 1:end])
    tags = validate_front_matter(fm)

    if not fm.has("tags"):
        logger.warning("No tags specified for article: %s", src_name)
    elif tags and tags_dir is not None and fs is not None:
        ensure_tag_dirs(fs, tags_dir, tags)

    amended = list(fm.lines)
    if not fm.has("layout"):
        amended.append(f"layout: {default_layout}")
    amended.append(f"src: {src_name}")

    return lines[:start + 1] + amended + lines[end:]
