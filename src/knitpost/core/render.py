"""Rewrite fenced code blocks into Liquid highlight tags for the site generator"""

import re

from markdown_it import MarkdownIt

from knitpost.core.frontmatter import find_delimiters


ENGINE_RE = re.compile(r"engine\s*=\s*['\"]?(\w+)")


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def fence_language(info: str) -> str:
    """Return the lower-cased language of a fence info string ('{r engine='Rcpp'}' -> 'rcpp')."""
    m = ENGINE_RE.search(info)
    if m:
        return m.group(1).lower()
    words = re.split(r'[\s,]+', info.strip().strip('{}').strip())
    return words[0].lower() if words and words[0] else "text"


def highlight_block(language: str, content: str) -> list[str]:
    return [f"{{% highlight {language} %}}", *content.splitlines(), "{% endhighlight %}"]


def liquid_highlight(lines: list[str], preset: str = "gfm-like") -> list[str]:
    """Replace top-level fenced code blocks after the front matter with Liquid highlight blocks."""
    _, end = find_delimiters(lines)
    head, body = lines[:end + 1], lines[end + 1:]

    tokens = _make_parser(preset).parse("\n".join(body) + "\n")
    fences = [t for t in tokens if t.type == "fence" and t.level == 0 and t.map]

    for tok in reversed(fences):
        start, stop = tok.map
        body[start:stop] = highlight_block(fence_language(tok.info), tok.content)
    return head + body
