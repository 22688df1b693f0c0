"""Pair-counting histogram engine for the angular correlation function.

Every unordered pair {i, j} of the catalog is visited exactly once, its angular
separation computed, and the pair counted into a linear histogram over
[0, max_distance). Pairs at or beyond max_distance are discarded.
"""

from __future__ import annotations

import logging
import time
from typing import Sequence, Union

import numpy as np

from sky_acf.geo import DEGREE_TO_RAD, angular_distance
from sky_acf.models import CoordinatePair, HistogramResult

logger = logging.getLogger(__name__)

DEFAULT_NUM_BINS = 10
DEFAULT_MAX_DISTANCE_DEG = 10.0

Catalog = Sequence[Union[CoordinatePair, tuple[float, float]]]


def _check_binning(num_bins: int, max_distance_deg: float) -> None:
    if num_bins <= 0:
        raise ValueError(f"num_bins must be positive, got {num_bins}")
    if not max_distance_deg > 0:
        raise ValueError(f"max_distance_deg must be positive, got {max_distance_deg}")


def bin_index_for(distance: float, bin_size: float, num_bins: int) -> int:
    """Bin for a distance already known to be below max_distance.

    The floor of distance / bin_size can round up to num_bins for distances a
    hair below max_distance; those land in the last bin.
    """
    index = int(distance / bin_size)
    if index >= num_bins:
        logger.debug("Clamped bin index %d for distance %r", index, distance)
        return num_bins - 1
    return index


def compute_histogram(
    catalog: Catalog,
    num_bins: int = DEFAULT_NUM_BINS,
    max_distance_deg: float = DEFAULT_MAX_DISTANCE_DEG,
) -> HistogramResult:
    """Count catalog pairs into angular-separation bins.

    Args:
        catalog: Sequence of (ra, dec) positions in degrees. Not modified.
        num_bins: Number of equal-width bins covering [0, max_distance_deg).
        max_distance_deg: Exclusive upper bound on counted separations.

    Returns:
        HistogramResult with per-bin counts, total counted pairs and the
        wall-clock time of the counting pass.

    Raises:
        ValueError: If num_bins or max_distance_deg is not positive.
    """
    _check_binning(num_bins, max_distance_deg)

    n = len(catalog)
    bin_size = max_distance_deg / num_bins
    histogram = [0] * num_bins

    start = time.perf_counter()
    for i in range(n):
        ra_i, dec_i = catalog[i]
        for j in range(i + 1, n):
            ra_j, dec_j = catalog[j]
            dist = angular_distance(ra_i, dec_i, ra_j, dec_j)
            if dist < max_distance_deg:
                histogram[bin_index_for(dist, bin_size, num_bins)] += 1
    elapsed = time.perf_counter() - start

    counted = sum(histogram)
    logger.info("Counted %d of %d pairs in %.3fs", counted, n * (n - 1) // 2, elapsed)

    return HistogramResult(
        histogram=histogram,
        counted_pairs=counted,
        num_points=n,
        num_bins=num_bins,
        max_distance_deg=max_distance_deg,
        elapsed_seconds=elapsed,
    )


def compute_histogram_vectorized(
    catalog: Catalog,
    num_bins: int = DEFAULT_NUM_BINS,
    max_distance_deg: float = DEFAULT_MAX_DISTANCE_DEG,
) -> HistogramResult:
    """numpy variant of compute_histogram with the same contract.

    Works one row of the upper triangle at a time, so extra memory is O(n)
    rather than an n x n separation matrix.
    """
    _check_binning(num_bins, max_distance_deg)

    n = len(catalog)
    bin_size = max_distance_deg / num_bins
    counts = np.zeros(num_bins, dtype=np.int64)

    start = time.perf_counter()
    if n > 1:
        coords = np.asarray([tuple(p) for p in catalog], dtype=np.float64) * DEGREE_TO_RAD
        ra, dec = coords[:, 0], coords[:, 1]
        sin_dec, cos_dec = np.sin(dec), np.cos(dec)

        for i in range(n - 1):
            cos_angle = (
                sin_dec[i] * sin_dec[i + 1:]
                + cos_dec[i] * cos_dec[i + 1:] * np.cos(ra[i] - ra[i + 1:])
            )
            dist = np.arccos(np.clip(cos_angle, -1.0, 1.0)) / DEGREE_TO_RAD
            dist = dist[dist < max_distance_deg]
            if dist.size == 0:
                continue
            index = np.minimum((dist / bin_size).astype(np.int64), num_bins - 1)
            counts += np.bincount(index, minlength=num_bins)
    elapsed = time.perf_counter() - start

    histogram = [int(c) for c in counts]
    counted = sum(histogram)
    logger.info("Counted %d of %d pairs in %.3fs (numpy)", counted, n * (n - 1) // 2, elapsed)

    return HistogramResult(
        histogram=histogram,
        counted_pairs=counted,
        num_points=n,
        num_bins=num_bins,
        max_distance_deg=max_distance_deg,
        elapsed_seconds=elapsed,
    )


ENGINES = {
    "python": compute_histogram,
    "numpy": compute_histogram_vectorized,
}
