from __future__ import annotations
"""Plain-text tables for a benchmark result set.

Both renderers are pure: the same result set always yields the same text.
"""

from typing import List, Sequence

from certbench.metrics import Algorithm, BenchmarkResult

SIZE_TITLE = "Certificate Compression Benchmark Results"
RATIO_TITLE = "Compression Ratios (compressed/original):"
SIZE_RULE_WIDTH = 85
RATIO_RULE_WIDTH = 55


def _size_row(*cells: object) -> str:
    return "{:<15} {:<10} {:<12} {:<12} {:<12} {:<12}".format(*cells)


def _ratio_row(*cells: object) -> str:
    return "{:<15} {:<10} {:<12} {:<12} {:<12}".format(*cells)


def render_size_table(results: Sequence[BenchmarkResult]) -> str:
    lines: List[str] = [
        "",
        SIZE_TITLE,
        "=" * 42,
        _size_row("Certificate", "Key Size", "Original", "Zstd", "Zlib", "Brotli"),
        _size_row("Name", "(bits)", "Size (bytes)", "Size (bytes)", "Size (bytes)", "Size (bytes)"),
        "-" * SIZE_RULE_WIDTH,
    ]
    for result in results:
        lines.append(
            _size_row(
                result.certificate,
                result.key_size,
                result.original_size,
                result.result_for(Algorithm.ZSTD).compressed_size,
                result.result_for(Algorithm.ZLIB).compressed_size,
                result.result_for(Algorithm.BROTLI).compressed_size,
            )
        )
    return "\n".join(lines)


def render_ratio_table(results: Sequence[BenchmarkResult]) -> str:
    lines: List[str] = [
        "",
        RATIO_TITLE,
        _ratio_row("Certificate", "Key Size", "Zstd", "Zlib", "Brotli"),
        "-" * RATIO_RULE_WIDTH,
    ]
    for result in results:
        # fixed-point formatting is locale independent
        lines.append(
            _ratio_row(
                result.certificate,
                result.key_size,
                f"{result.result_for(Algorithm.ZSTD).compression_ratio:.3f}",
                f"{result.result_for(Algorithm.ZLIB).compression_ratio:.3f}",
                f"{result.result_for(Algorithm.BROTLI).compression_ratio:.3f}",
            )
        )
    return "\n".join(lines)
