"""Pipeline step functions: discovery, single-file conversion, and directory builds"""

import logging
from pathlib import Path

from knitpost.config import Settings
from knitpost.core.assemble import source_to_markup
from knitpost.core.frontmatter import extract_front_matter, find_delimiters, parse_front_matter
from knitpost.core.models import ConvertedDoc
from knitpost.core.render import liquid_highlight
from knitpost.core.tags import parse_tags
from knitpost.store.fs import FileSystem, LocalFileSystem


logger = logging.getLogger(__name__)


def discover_files(path: Path, extensions: set[str]) -> list[Path]:
    """Return sorted article files directly in path, or [path] if a single matching file."""
    if path.is_file():
        return [path] if path.suffix in extensions else []
    return sorted(p for p in path.glob('*') if p.is_file() and p.suffix in extensions)


def default_tags_dir(path: Path) -> Path:
    """Tags live at the site root, one level above the article's source directory."""
    return path.resolve().parent.parent / "tags"


def convert_text(
    text: str,
    path: Path,
    settings: Settings,
    fs: FileSystem,
    ) -> ConvertedDoc:
    """Convert article text; path decides the input kind and supplies the src name."""
    lines = text.splitlines()
    if path.suffix in settings.host_extensions:
        lines = source_to_markup(lines, settings.host_language, settings.embedded_language)

    tags_dir = Path(settings.tags_dir) if settings.tags_dir else default_tags_dir(path)
    lines = extract_front_matter(lines, path.name, tags_dir, fs, settings.default_layout)

    if settings.fence_style == "liquid":
        lines = liquid_highlight(lines, settings.parser_config)

    start, end = find_delimiters(lines)
    fm = parse_front_matter(lines[start + 1:end])
    return ConvertedDoc(
        path=path,
        text="\n".join(lines) + "\n",
        frontmatter={k: v.strip() for k, v in fm.fields.items()},
        tags=parse_tags(fm.get("tags") or ""),
    )


def convert_file(path: Path, settings: Settings, fs: FileSystem = None) -> ConvertedDoc:
    """Read and convert a single article."""
    fs = fs or LocalFileSystem()
    return convert_text(fs.read_text(path), Path(path), settings, fs)


def run_convert(
    path: Path,
    output: Path,
    settings: Settings,
    fs: FileSystem = None,
    ) -> ConvertedDoc:
    """Convert path and write the result to output."""
    fs = fs or LocalFileSystem()
    doc = convert_file(path, settings, fs)
    output = Path(output)
    if not fs.exists(output.parent):
        fs.mkdir(output.parent)
    fs.write_text(output, doc.text)
    logger.info("Converted %s -> %s", path, output)
    return doc


def run_build(
    src: Path,
    out_dir: Path,
    settings: Settings,
    fs: FileSystem = None,
    ) -> list[tuple[Path, Path]]:
    """Convert every article in src into out_dir/<stem>.md. Returns (source, output) pairs.

    Tags default to the site root above src. Two articles sharing an output name,
    or the first failing article, abort the build with a RuntimeError naming them.
    """
    src = Path(src)
    if settings.tags_dir is None and src.is_dir():
        settings = settings.model_copy(update={"tags_dir": str(src.resolve().parent / "tags")})

    outputs: dict[Path, Path] = {}
    for p in discover_files(src, settings.extensions):
        out_file = Path(out_dir) / f"{p.stem}.md"
        if out_file in outputs:
            raise RuntimeError(f"{outputs[out_file]} and {p} both convert to {out_file}")
        outputs[out_file] = p

    results = []
    for out_file, p in outputs.items():
        try:
            run_convert(p, out_file, settings, fs)
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
        results.append((p, out_file))
    if not results:
        logger.warning("No articles found under %s", src)
    return results
