"""Conversion error taxonomy; every error is fatal for the document being converted"""


class ConversionError(ValueError):
    """Base for all article conversion failures."""


class MissingFrontMatterError(ConversionError):
    def __init__(self):
        super().__init__("No front-matter section found in post")


class EmptyFrontMatterError(ConversionError):
    def __init__(self):
        super().__init__("Empty front-matter section in post")


class MissingFieldError(ConversionError):
    """A required front-matter field is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"No {field} field specified in front-matter")


class LicenseError(ConversionError):
    def __init__(self, found: str | None = None):
        self.found = found
        super().__init__("You must include a license field specifying the MIT license")


class TagFormatError(ConversionError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"tags must be separated by spaces rather than commas: {value.strip()!r}")


class NestedBlockError(ConversionError):
    """An open marker appeared while a doc comment or embedded block was still open."""

    def __init__(self, line_no: int, line: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f"Nested comment block at line {line_no}: {line.strip()!r}")
