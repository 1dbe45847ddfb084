from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple
import json
import pathlib

"""Benchmark result containers and their JSON form.

`BenchmarkResult.results` always holds exactly one `CompressionResult` per
`Algorithm`, in declaration order. The JSON export mirrors these dataclasses
field-for-field; downstream tooling depends on the field names.
"""


class Algorithm(str, Enum):
    ZSTD = "zstd"
    ZLIB = "zlib"
    BROTLI = "brotli"


@dataclass(frozen=True)
class CompressionResult:
    algorithm: Algorithm
    original_size: int
    compressed_size: int
    compression_ratio: float  # compressed_size / original_size

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", Algorithm(self.algorithm))

    @classmethod
    def measure(cls, algorithm: Algorithm, original_size: int, compressed_size: int) -> "CompressionResult":
        if original_size <= 0:
            raise ValueError("original_size must be positive to compute a ratio")
        return cls(
            algorithm=algorithm,
            original_size=original_size,
            compressed_size=compressed_size,
            compression_ratio=float(compressed_size) / float(original_size),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm.value,
            "original_size": self.original_size,
            "compressed_size": self.compressed_size,
            "compression_ratio": self.compression_ratio,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompressionResult":
        return cls(
            algorithm=Algorithm(data["algorithm"]),
            original_size=int(data["original_size"]),
            compressed_size=int(data["compressed_size"]),
            compression_ratio=float(data["compression_ratio"]),
        )


@dataclass(frozen=True)
class BenchmarkResult:
    certificate: str
    key_size: str
    results: Tuple[CompressionResult, ...]

    def __post_init__(self) -> None:
        # accept any sequence but store a tuple so the record stays immutable
        object.__setattr__(self, "results", tuple(self.results))
        found = [r.algorithm for r in self.results]
        expected = list(Algorithm)
        if found != expected:
            raise ValueError(
                f"{self.certificate}: expected results for {[a.value for a in expected]}, "
                f"got {[a.value for a in found]}"
            )
        sizes = {r.original_size for r in self.results}
        if len(sizes) != 1:
            raise ValueError(f"{self.certificate}: original_size differs between algorithms: {sorted(sizes)}")

    @property
    def original_size(self) -> int:
        return self.results[0].original_size

    def result_for(self, algorithm: Algorithm) -> CompressionResult:
        # positions are fixed by __post_init__
        return self.results[list(Algorithm).index(algorithm)]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "certificate": self.certificate,
            "key_size": self.key_size,
            "results": [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BenchmarkResult":
        return cls(
            certificate=str(data["certificate"]),
            key_size=str(data["key_size"]),
            results=tuple(CompressionResult.from_dict(r) for r in data["results"]),
        )


def results_to_json(results: Iterable[BenchmarkResult]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2)


def results_from_json(text: str) -> List[BenchmarkResult]:
    payload = json.loads(text)
    if not isinstance(payload, list):
        raise ValueError("benchmark report must be a JSON array")
    return [BenchmarkResult.from_dict(item) for item in payload]


def load_results(path: pathlib.Path | str) -> List[BenchmarkResult]:
    """Read a report previously written by `export_json`."""
    return results_from_json(pathlib.Path(path).read_text(encoding="utf-8"))
