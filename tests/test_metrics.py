from __future__ import annotations

import json

import pytest

from certbench.metrics import (
    Algorithm,
    BenchmarkResult,
    CompressionResult,
    load_results,
    results_from_json,
    results_to_json,
)


def _result(name: str = "sample512.crt", original: int = 1000, sizes=(700, 720, 650)) -> BenchmarkResult:
    return BenchmarkResult(
        certificate=name,
        key_size="512",
        results=tuple(
            CompressionResult.measure(algo, original, size) for algo, size in zip(Algorithm, sizes)
        ),
    )


def test_measure_computes_compressed_over_original():
    entry = CompressionResult.measure(Algorithm.ZSTD, 1000, 734)
    assert entry.compression_ratio == pytest.approx(0.734, abs=1e-9)
    assert isinstance(entry.compression_ratio, float)


def test_measure_rejects_zero_original_size():
    with pytest.raises(ValueError):
        CompressionResult.measure(Algorithm.ZLIB, 0, 20)


def test_algorithm_accepts_plain_strings():
    entry = CompressionResult(algorithm="brotli", original_size=10, compressed_size=5, compression_ratio=0.5)
    assert entry.algorithm is Algorithm.BROTLI


def test_benchmark_result_requires_every_algorithm_in_order():
    zstd = CompressionResult.measure(Algorithm.ZSTD, 100, 80)
    zlib = CompressionResult.measure(Algorithm.ZLIB, 100, 85)
    brotli = CompressionResult.measure(Algorithm.BROTLI, 100, 75)
    with pytest.raises(ValueError, match="expected results"):
        BenchmarkResult(certificate="a.crt", key_size="512", results=(zstd, zlib))
    with pytest.raises(ValueError, match="expected results"):
        BenchmarkResult(certificate="a.crt", key_size="512", results=(zlib, zstd, brotli))
    with pytest.raises(ValueError, match="expected results"):
        BenchmarkResult(certificate="a.crt", key_size="512", results=(zstd, zlib, brotli, brotli))


def test_benchmark_result_requires_shared_original_size():
    results = (
        CompressionResult.measure(Algorithm.ZSTD, 100, 80),
        CompressionResult.measure(Algorithm.ZLIB, 101, 85),
        CompressionResult.measure(Algorithm.BROTLI, 100, 75),
    )
    with pytest.raises(ValueError, match="original_size differs"):
        BenchmarkResult(certificate="a.crt", key_size="512", results=results)


def test_result_for_is_keyed_by_algorithm():
    result = _result()
    assert result.result_for(Algorithm.ZSTD).compressed_size == 700
    assert result.result_for(Algorithm.ZLIB).compressed_size == 720
    assert result.result_for(Algorithm.BROTLI).compressed_size == 650
    assert result.original_size == 1000


def test_results_are_immutable():
    result = _result()
    with pytest.raises(AttributeError):
        result.key_size = "768"  # type: ignore[misc]
    assert isinstance(result.results, tuple)


def test_json_layout_matches_report_schema():
    payload = json.loads(results_to_json([_result()]))
    assert payload == [
        {
            "certificate": "sample512.crt",
            "key_size": "512",
            "results": [
                {"algorithm": "zstd", "original_size": 1000, "compressed_size": 700, "compression_ratio": 0.7},
                {"algorithm": "zlib", "original_size": 1000, "compressed_size": 720, "compression_ratio": 0.72},
                {"algorithm": "brotli", "original_size": 1000, "compressed_size": 650, "compression_ratio": 0.65},
            ],
        }
    ]


def test_json_round_trip(tmp_path):
    original = [_result("sample512.crt"), _result("mlkem1024.crt", original=3000, sizes=(2900, 2950, 2875))]
    text = results_to_json(original)
    assert "\n  " in text  # indented
    assert results_from_json(text) == original

    path = tmp_path / "report.json"
    path.write_text(text, encoding="utf-8")
    assert load_results(path) == original


def test_results_from_json_rejects_non_array():
    with pytest.raises(ValueError, match="JSON array"):
        results_from_json('{"certificate": "x"}')
