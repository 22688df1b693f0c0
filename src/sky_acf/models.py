"""Data models for catalogs and pair-count histograms."""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field


@dataclass(frozen=True)
class CoordinatePair:
    """A single catalog position. Not range-validated."""

    ra_deg: float               # Right ascension, conventionally [0, 360)
    dec_deg: float              # Declination, conventionally [-90, 90]

    def __iter__(self):
        yield self.ra_deg
        yield self.dec_deg


@dataclass
class HistogramResult:
    """Output of one counting pass over a catalog."""

    histogram: list[int]
    counted_pairs: int
    num_points: int
    num_bins: int
    max_distance_deg: float

    # Diagnostic only, ignored by equality
    elapsed_seconds: float = field(default=0.0, compare=False)

    @property
    def bin_size(self) -> float:
        return self.max_distance_deg / self.num_bins

    @property
    def expected_pairs(self) -> int:
        """Number of distinct pairs in the catalog, n(n-1)/2."""
        return self.num_points * (self.num_points - 1) // 2 if self.num_points > 1 else 0

    def bin_edges(self) -> list[tuple[float, float]]:
        return [(i * self.bin_size, (i + 1) * self.bin_size) for i in range(self.num_bins)]

    def to_json(self) -> str:
        d = asdict(self)
        d["bin_size"] = self.bin_size
        d["expected_pairs"] = self.expected_pairs
        return json.dumps(d)

    @classmethod
    def from_json(cls, raw: str) -> HistogramResult:
        d = json.loads(raw)
        d.pop("bin_size", None)
        d.pop("expected_pairs", None)
        return cls(**d)
