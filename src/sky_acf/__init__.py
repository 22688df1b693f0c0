"""Angular two-point correlation pair counting for RA/Dec catalogs."""

from sky_acf.geo import angular_distance
from sky_acf.histogram import compute_histogram, compute_histogram_vectorized
from sky_acf.models import CoordinatePair, HistogramResult

__all__ = [
    "CoordinatePair",
    "HistogramResult",
    "angular_distance",
    "compute_histogram",
    "compute_histogram_vectorized",
]
