from .driver import FAMILIES, generate_all, render, write_family
from .errors import CatalogError, EncodingError, OutputError, VectorError

__all__ = [
    "FAMILIES",
    "generate_all",
    "render",
    "write_family",
    "VectorError",
    "CatalogError",
    "EncodingError",
    "OutputError",
]
