"""Abstract catalog parser with range checks."""

from __future__ import annotations

import abc

from sky_acf.models import CoordinatePair


class CatalogParseError(Exception):
    """Raised when catalog text cannot be parsed."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Catalog parse failed: {'; '.join(errors)}")


class CatalogParser(abc.ABC):
    """Abstract parser that converts raw catalog text → list of CoordinatePair."""

    @abc.abstractmethod
    def parse(self, raw_text: str) -> list[CoordinatePair]:
        """Parse catalog text into coordinate pairs, preserving input order."""

    @staticmethod
    def validate(pair: CoordinatePair) -> list[str]:
        """Report conventional-range violations. Returns list of messages (empty = in range).

        Out-of-range positions are still usable: the distance only depends
        on their sines and cosines.
        """
        errors: list[str] = []

        if not 0 <= pair.ra_deg < 360:
            errors.append(f"ra_deg {pair.ra_deg} out of range [0, 360)")

        if not -90 <= pair.dec_deg <= 90:
            errors.append(f"dec_deg {pair.dec_deg} out of range [-90, 90]")

        return errors
