"""Parsers for converting catalog text to CoordinatePair lists."""

from sky_acf.parsers.base import CatalogParseError, CatalogParser
from sky_acf.parsers.whitespace_text import WhitespaceCatalogParser, load_catalog

__all__ = ["CatalogParseError", "CatalogParser", "WhitespaceCatalogParser", "load_catalog"]
