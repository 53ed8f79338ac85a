from __future__ import annotations


class ValuationSplitterError(Exception):
    """Base class for errors raised while splitting a valuation export."""


class ParseError(ValuationSplitterError):
    """The input file is not valid UTF-8 JSON."""


class StructureError(ValuationSplitterError):
    """The parsed JSON does not look like a collection of valuation records."""


class ExportError(ValuationSplitterError):
    """Writing one of the output files failed."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write {path}: {cause}")


class ReadError(ValuationSplitterError):
    """The input file exists but could not be read."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Could not read {path}: {cause}")
