from __future__ import annotations
"""The three compression runners and their inverses.

Each runner is a stateless ``bytes -> bytes`` function with one fixed
configuration and is registered under its algorithm name. Codec failures are
re-raised as :class:`certbench.errors.CodecError`.
"""

import gzip
import zlib
from typing import Dict

import brotli
import zstandard

from .errors import CodecError
from .interfaces import Decompressor
from .metrics import Algorithm
from .registry import registry

ZSTD_LEVEL = 3


@registry.register(Algorithm.ZSTD.value)
def compress_zstd(data: bytes) -> bytes:
    """Streaming zstd frame: no content size in the header, no checksum."""
    try:
        cobj = zstandard.ZstdCompressor(level=ZSTD_LEVEL).compressobj()
        return cobj.compress(data) + cobj.flush()
    except zstandard.ZstdError as exc:
        raise CodecError(Algorithm.ZSTD.value, str(exc)) from exc


@registry.register(Algorithm.ZLIB.value)
def compress_zlib(data: bytes) -> bytes:
    """DEFLATE at the codec's default level, inside gzip framing."""
    try:
        return gzip.compress(data, compresslevel=zlib.Z_DEFAULT_COMPRESSION, mtime=0)
    except zlib.error as exc:
        raise CodecError(Algorithm.ZLIB.value, str(exc)) from exc


@registry.register(Algorithm.BROTLI.value)
def compress_brotli(data: bytes) -> bytes:
    try:
        return brotli.compress(data)
    except brotli.error as exc:
        raise CodecError(Algorithm.BROTLI.value, str(exc)) from exc


def decompress_zstd(data: bytes) -> bytes:
    try:
        # frames carry no content size, so one-shot decompress() cannot size its buffer
        dobj = zstandard.ZstdDecompressor().decompressobj()
        return dobj.decompress(data)
    except zstandard.ZstdError as exc:
        raise CodecError(Algorithm.ZSTD.value, str(exc)) from exc


def decompress_zlib(data: bytes) -> bytes:
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as exc:
        raise CodecError(Algorithm.ZLIB.value, str(exc)) from exc


def decompress_brotli(data: bytes) -> bytes:
    try:
        return brotli.decompress(data)
    except brotli.error as exc:
        raise CodecError(Algorithm.BROTLI.value, str(exc)) from exc


DECOMPRESSORS: Dict[Algorithm, Decompressor] = {
    Algorithm.ZSTD: decompress_zstd,
    Algorithm.ZLIB: decompress_zlib,
    Algorithm.BROTLI: decompress_brotli,
}
