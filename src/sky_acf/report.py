"""Histogram report rendering: plain-text report sections and rich console tables."""

from __future__ import annotations

from typing import TextIO

from rich.table import Table

from sky_acf.models import HistogramResult


def format_bin_range(low: float, high: float) -> str:
    return f"{low:g}-{high:g}"


def histogram_lines(result: HistogramResult) -> list[str]:
    return [
        f"{format_bin_range(low, high)} deg: {count}"
        for (low, high), count in zip(result.bin_edges(), result.histogram)
    ]


def write_report(result: HistogramResult, source: str, sink: TextIO) -> None:
    """Write one report section for `source` to a caller-owned text stream.

    The sink is neither opened nor closed here; callers that keep a running
    results file open it in append mode.
    """
    sink.write(f"\n=== Results for file: {source} ===\n")
    sink.write("Angular Correlation Function Histogram:\n")
    for line in histogram_lines(result):
        sink.write(line + "\n")
    sink.write(f"Total pairs counted: {result.counted_pairs}\n")
    sink.write(f"Expected total pairs (n(n-1)/2): {result.expected_pairs}\n")
    sink.write(f"Time taken (CPU): {result.elapsed_seconds:g} seconds\n")


def build_table(result: HistogramResult, title: str = "Angular Correlation Function Histogram") -> Table:
    table = Table(title=title)
    table.add_column("Bin", justify="right", width=5)
    table.add_column("Range (deg)")
    table.add_column("Pairs", justify="right", style="bold")
    table.add_column("Fraction", justify="right")

    for i, ((low, high), count) in enumerate(zip(result.bin_edges(), result.histogram)):
        fraction = count / result.counted_pairs if result.counted_pairs else 0.0
        table.add_row(str(i), format_bin_range(low, high), str(count), f"{fraction:.3f}")

    return table
