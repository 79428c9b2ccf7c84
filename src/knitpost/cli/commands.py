"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from knitpost.config import Settings, load_config
from knitpost.core.errors import ConversionError
from knitpost.core.pipeline import convert_text, discover_files, run_build, run_convert
from knitpost.store.fs import MemoryFileSystem


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling; --verbose forces DEBUG logging."""
    overrides = dict(overrides or {})
    if ctx.obj and ctx.obj.get("verbose"):
        overrides["log_level"] = "DEBUG"
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.getLogger().setLevel(settings.log_level)
    return settings


def main_callback(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
    """Convert annotated sources and markup articles into gallery posts."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"verbose": verbose}


def convert_cmd(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Article to convert")],
    output: Annotated[Path, typer.Argument(help="Output file")],
    tags: Annotated[Optional[str], typer.Option("--tags-dir", help="Tag index root directory")] = None,
    fence_style: Annotated[Optional[str], typer.Option("--fence-style", help="fence or liquid")] = None,
    ):
    """Convert a single article and write it to OUTPUT."""
    settings = _settings(ctx, overrides={"tags_dir": tags, "fence_style": fence_style})
    if not path.is_file():
        _fail(f"No such file: {path}")
    try:
        run_convert(path, output, settings)
    except (ConversionError, OSError, UnicodeDecodeError) as e:
        _fail(f"Failed to convert {path}", e)
    typer.echo(f"  {path} -> {output}")


def build_cmd(
    ctx: typer.Context,
    src: Annotated[Path, typer.Argument(help="Source file or directory")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    tags: Annotated[Optional[str], typer.Option("--tags-dir", help="Tag index root directory")] = None,
    fence_style: Annotated[Optional[str], typer.Option("--fence-style", help="fence or liquid")] = None,
    ):
    """Convert every article under SRC into the output directory."""
    settings = _settings(ctx, overrides={"output_dir": out, "tags_dir": tags, "fence_style": fence_style})
    output_dir = Path(settings.output_dir)
    try:
        results = run_build(src, output_dir, settings)
    except RuntimeError as e:
        _fail(str(e))
    for source, out_file in results:
        typer.echo(f"  {source} -> {out_file}")
    typer.echo(f"Converted {len(results)} article(s) to {output_dir}/")


def check_cmd(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Articles or directories to validate")],
    ):
    """Validate articles without writing output or tag pages."""
    settings = _settings(ctx)
    files = [f for p in paths for f in discover_files(p, settings.extensions)]
    if not files:
        _fail("No articles found.")

    failed = 0
    for f in files:
        try:
            doc = convert_text(f.read_text(encoding="utf-8"), f, settings, MemoryFileSystem())
        except (ConversionError, OSError, UnicodeDecodeError) as e:
            typer.echo(f"  failed: {f}: {e}", err=True)
            failed += 1
        else:
            tags = " ".join(doc.tags) or "-"
            typer.echo(f"  ok: {f}: {doc.frontmatter['title']} [tags: {tags}]")
    if failed:
        _fail(f"{failed} of {len(files)} article(s) failed validation")
