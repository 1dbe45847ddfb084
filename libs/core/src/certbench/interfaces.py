from __future__ import annotations
from typing import Protocol

"""Compressor interfaces used by the benchmark driver.

Compressors implement these Protocols and register themselves into the global
registry. The CLI interacts only with the registry, never with codec libraries
directly.
"""

class Compressor(Protocol):
    """One-shot compression contract: raw bytes in, compressed bytes out."""
    def __call__(self, data: bytes) -> bytes: ...

class Decompressor(Protocol):
    """Inverse of a Compressor, used for round-trip verification."""
    def __call__(self, data: bytes) -> bytes: ...
