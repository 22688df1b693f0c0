"""Parser for two-column whitespace-separated RA/Dec text files."""

from __future__ import annotations

import logging
import math
from pathlib import Path

from sky_acf.models import CoordinatePair
from sky_acf.parsers.base import CatalogParseError, CatalogParser

logger = logging.getLogger(__name__)

_COL_RA = 0
_COL_DEC = 1


class WhitespaceCatalogParser(CatalogParser):
    """Parse `ra dec` lines (degrees) → list of CoordinatePair.

    Blank lines and `#` comments are skipped, columns past the second are
    ignored. `inf` and `nan` values count as unparseable. With strict=True any other unparseable line fails the whole
    catalog; otherwise it is skipped with a warning.
    """

    def __init__(self, strict: bool = True):
        self.strict = strict

    def parse(self, raw_text: str) -> list[CoordinatePair]:
        pairs: list[CoordinatePair] = []
        errors: list[str] = []

        for lineno, line in enumerate(raw_text.splitlines(), start=1):
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            try:
                pairs.append(self._parse_line(stripped))
            except (IndexError, ValueError):
                errors.append(f"line {lineno}: cannot parse {stripped!r}")

        if errors:
            if self.strict:
                raise CatalogParseError(errors)
            for message in errors:
                logger.warning("Skipped %s", message)

        return pairs

    def _parse_line(self, line: str) -> CoordinatePair:
        cols = line.split()
        ra, dec = float(cols[_COL_RA]), float(cols[_COL_DEC])
        if not (math.isfinite(ra) and math.isfinite(dec)):
            raise ValueError(f"non-finite coordinate in {line!r}")
        return CoordinatePair(ra_deg=ra, dec_deg=dec)


def load_catalog(path: str | Path, strict: bool = True) -> list[CoordinatePair]:
    """Read and parse a catalog file. Logs positions outside conventional ranges."""
    raw_text = Path(path).read_text(encoding="utf-8")
    pairs = WhitespaceCatalogParser(strict=strict).parse(raw_text)

    out_of_range = sum(1 for p in pairs if CatalogParser.validate(p))
    if out_of_range:
        logger.warning("%d position(s) in %s outside conventional RA/Dec ranges", out_of_range, path)

    return pairs
