"""Unit tests for core/pipeline.py"""

from pathlib import Path

import pytest

from knitpost.config import Settings
from knitpost.core.errors import LicenseError
from knitpost.core.pipeline import convert_text, default_tags_dir, discover_files, run_build, run_convert


SOURCE_PATH = Path("src/2013-01-01-reversing.cpp")


def test_convert_host_source(sample_source, settings, memory_fs, tags_dir):
    """Host sources go through the chunk classifier and get layout/src fields."""
    doc = convert_text(sample_source, SOURCE_PATH, settings, memory_fs)
    lines = doc.text.splitlines()
    assert lines[:7] == [
        "---",
        "title: Reversing a vector",
        "author: Jane Doe",
        "license: MIT",
        "tags: basics stl",
        "summary: Demonstrates reversing",
        "  a vector in place.",
    ]
    assert lines[7:10] == ["layout: post", "src: 2013-01-01-reversing.cpp", "---"]
    assert "```cpp" in lines
    assert "```r" in lines
    assert doc.text.endswith("```\n")
    assert doc.frontmatter["src"] == "2013-01-01-reversing.cpp"
    assert doc.tags == ["basics", "stl"]
    assert memory_fs.exists(tags_dir / "stl" / "index.html")


def test_convert_markup_passthrough(sample_markup, settings, memory_fs):
    """Markup input keeps its body untouched; only front matter is amended."""
    doc = convert_text(sample_markup, Path("post.Rmd"), settings, memory_fs)
    assert doc.text == sample_markup.replace(
        "license: MIT\n", "license: MIT\nlayout: post\nsrc: post.Rmd\n"
    )
    assert doc.tags == []


def test_convert_liquid_style(sample_source, memory_fs):
    settings = Settings(tags_dir="site/tags", fence_style="liquid")
    doc = convert_text(sample_source, SOURCE_PATH, settings, memory_fs)
    assert "{% highlight cpp %}" in doc.text
    assert "{% highlight r %}" in doc.text
    assert "```" not in doc.text


def test_convert_custom_host_extension(sample_source, memory_fs):
    """Only suffixes listed in host_extensions go through the classifier."""
    settings = Settings(tags_dir="site/tags", host_extensions=[".cc"])
    doc = convert_text(sample_source, Path("a.cc"), settings, memory_fs)
    assert doc.frontmatter["title"] == "Reversing a vector"


def test_convert_propagates_validation_errors(sample_source, settings, memory_fs):
    bad = sample_source.replace("@license MIT", "@license GPL")
    with pytest.raises(LicenseError):
        convert_text(bad, SOURCE_PATH, settings, memory_fs)


def test_default_tags_dir(tmp_path):
    article = tmp_path / "site" / "src" / "a.cpp"
    assert default_tags_dir(article) == (tmp_path / "site" / "tags").resolve()


def test_discover_files(tmp_path):
    """Only articles directly in the directory are found; subdirectories are not scanned."""
    (tmp_path / "a.cpp").write_text("x")
    (tmp_path / "b.Rmd").write_text("x")
    (tmp_path / "notes.txt").write_text("x")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "c.md").write_text("x")
    files = discover_files(tmp_path, Settings().extensions)
    assert [f.name for f in files] == ["a.cpp", "b.Rmd"]
    assert discover_files(tmp_path / "notes.txt", Settings().extensions) == []


def test_run_convert_writes_output(sample_source, settings, memory_fs):
    memory_fs.mkdir(Path("src"))
    memory_fs.write_text(SOURCE_PATH, sample_source)
    out = Path("_posts/reversing.md")
    doc = run_convert(SOURCE_PATH, out, settings, memory_fs)
    assert memory_fs.read_text(out) == doc.text


def test_run_build_wraps_failures(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "bad.Rmd").write_text("no front matter\n")
    settings = Settings(tags_dir=str(tmp_path / "tags"))
    with pytest.raises(RuntimeError, match="bad.Rmd") as exc:
        run_build(src, tmp_path / "_posts", settings)
    assert "No front-matter" in str(exc.value)
