"""Documentation comment chunk to markup lines, including the front-matter header"""

import re


DELIMITER = "---"
KEYWORD_RE = re.compile(r'^\s\*\s+@(\w+):?\s+(.+)$')
CONTENT_RE = re.compile(r'^\s\*(\s+)(.+)$')


def doc_chunk_to_markup(lines: list[str], front_matter: bool) -> list[str]:
    """Convert doc-comment lines to markup, opening and closing front matter when asked.

    While front matter is open, `@word rest` lines become `word: rest` fields and
    deeper-indented lines continue the previous field. The first shallow content
    line or empty line closes the front matter.
    """
    out = [DELIMITER if front_matter else ""]

    for line in lines:
        kw = KEYWORD_RE.match(line)
        content = CONTENT_RE.match(line) if kw is None else None

        if kw:
            out.append(f"{kw.group(1)}: {kw.group(2)}")
        elif content:
            indent, text = content.groups()
            if not front_matter:
                out.append(text)
            elif len(indent) > 1:
                out.append(f"  {text}")
            else:
                out.extend([DELIMITER, text])
                front_matter = False
        elif front_matter:
            out.append(DELIMITER)
            front_matter = False
        else:
            out.append("")

    if front_matter:
        out.append(DELIMITER)
    return out
