from __future__ import annotations
"""Shared benchmarking utilities for the CLI.

Includes the per-certificate aggregator, the run driver that ties discovery to
aggregation, and the JSON export helper.
"""

import logging
import pathlib
from typing import Iterable, List, Sequence

from certbench import registry
from certbench.compressors import DECOMPRESSORS
from certbench.discovery import CERTIFICATE_TABLE, CertificateSpec, iter_certificates
from certbench.errors import CertificateReadError, CodecError, EmptyCertificateError, NoCertificatesFound
from certbench.interfaces import Compressor
from certbench.metrics import Algorithm, BenchmarkResult, CompressionResult, results_to_json

log = logging.getLogger("certbench.cli")

RESULTS_FILENAME = "benchmark_results.json"


def benchmark_data(name: str, data: bytes, key_size: str, *, verify: bool = False) -> BenchmarkResult:
    """Compress ``data`` with every registered algorithm, in `Algorithm` order.

    With ``verify`` set, each output is decompressed again and compared with
    the input; a mismatch is reported as a CodecError.
    """
    original_size = len(data)
    if original_size == 0:
        raise EmptyCertificateError(name)

    results: List[CompressionResult] = []
    for algorithm in Algorithm:
        compress: Compressor = registry.get(algorithm.value)
        compressed = compress(data)
        if verify and DECOMPRESSORS[algorithm](compressed) != data:
            raise CodecError(algorithm.value, f"round-trip mismatch for {name}")
        log.debug("%s: %s %d -> %d bytes", name, algorithm.value, original_size, len(compressed))
        results.append(CompressionResult.measure(algorithm, original_size, len(compressed)))

    return BenchmarkResult(certificate=name, key_size=key_size, results=tuple(results))


def benchmark_certificate(cert_path: pathlib.Path, key_size: str, *, verify: bool = False) -> BenchmarkResult:
    try:
        cert_data = cert_path.read_bytes()
    except OSError as exc:
        raise CertificateReadError(cert_path, exc.strerror or str(exc)) from exc
    return benchmark_data(cert_path.name, cert_data, key_size, verify=verify)


def run_benchmarks(
    cert_dir: pathlib.Path | str,
    *,
    table: Sequence[CertificateSpec] = CERTIFICATE_TABLE,
    verify: bool = False,
) -> List[BenchmarkResult]:
    """Benchmark every certificate of ``table`` found under ``cert_dir``.

    All-or-nothing: the first fatal error propagates and no partial result
    set is returned.
    """
    results: List[BenchmarkResult] = []
    for cert in iter_certificates(cert_dir, table):
        log.info("Benchmarking %s...", cert.name)
        results.append(benchmark_certificate(cert.path, cert.key_size, verify=verify))
    if not results:
        raise NoCertificatesFound(cert_dir)
    return results


def export_json(results: Iterable[BenchmarkResult], export_path: pathlib.Path | str | None = None) -> pathlib.Path:
    """Write ``results`` as an indented JSON array, replacing any existing file.

    The report is serialized first and written to a sibling temp file that
    replaces the target, so a failure never leaves a truncated report.

    Relative paths (including the default file name) resolve against the
    current working directory.
    """
    path = pathlib.Path(export_path) if export_path else pathlib.Path(RESULTS_FILENAME)
    if not path.is_absolute():
        path = pathlib.Path.cwd() / path
    payload = results_to_json(results)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        tmp.write_text(payload, encoding="utf-8")
        tmp.replace(path)
    finally:
        if tmp.exists():
            tmp.unlink()
    return path
