"""Run configuration, with defaults taken from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sky_acf.histogram import DEFAULT_MAX_DISTANCE_DEG, DEFAULT_NUM_BINS, ENGINES

REPORT_PATH = os.getenv("ACF_REPORT_PATH", "acf_results_cpu.txt")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AcfConfig:
    """Settings for a single correlation run."""

    num_bins: int = DEFAULT_NUM_BINS
    max_distance_deg: float = DEFAULT_MAX_DISTANCE_DEG
    report_path: str = REPORT_PATH
    engine: str = "python"      # key of sky_acf.histogram.ENGINES
    log_level: str = "WARNING"


def load_config(log_level: str | None = None) -> AcfConfig:
    """Build an AcfConfig from ACF_* environment variables.

    An explicit log_level replaces ACF_LOG_LEVEL, which is then not read.

    Raises:
        ValueError: On a non-numeric bin count/distance, an unknown engine or log level.
    """
    config = AcfConfig(
        num_bins=int(os.getenv("ACF_NUM_BINS", DEFAULT_NUM_BINS)),
        max_distance_deg=float(os.getenv("ACF_MAX_DISTANCE_DEG", DEFAULT_MAX_DISTANCE_DEG)),
        report_path=os.getenv("ACF_REPORT_PATH", REPORT_PATH),
        engine=os.getenv("ACF_ENGINE", "python").lower(),
        log_level=(log_level or os.getenv("ACF_LOG_LEVEL", "WARNING")).upper(),
    )
    if config.engine not in ENGINES:
        raise ValueError(f"ACF_ENGINE '{config.engine}' not in ({', '.join(ENGINES)})")
    if config.log_level not in LOG_LEVELS:
        raise ValueError(f"ACF_LOG_LEVEL '{config.log_level}' not in ({', '.join(LOG_LEVELS)})")
    return config
