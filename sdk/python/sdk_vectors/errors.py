"""Error kinds raised while building the vector corpus."""

from typing import Optional


class VectorError(RuntimeError):
    """Base error. The driver fills in ``family`` and ``case`` as it unwinds."""

    def __init__(self, message: str, family: Optional[str] = None, case: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.family = family
        self.case = case

    def location(self) -> str:
        parts = [p for p in (self.family, self.case) if p]
        return "/".join(parts) if parts else "<unknown>"

    def __str__(self) -> str:
        if self.family or self.case:
            return f"{self.location()}: {self.message}"
        return self.message


class CatalogError(VectorError):
    """A catalog literal was rejected by the oracle (bad width, bad seed)."""


class EncodingError(VectorError):
    """The oracle produced a value that fails its own consistency check."""


class OutputError(VectorError):
    """The output directory or a vector file could not be written."""
