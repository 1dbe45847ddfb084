from .interfaces import Compressor, Decompressor
from .registry import registry
from .metrics import Algorithm, CompressionResult, BenchmarkResult, load_results
from .errors import (
    CertBenchError,
    CertDirectoryNotFound,
    NoCertificatesFound,
    CertificateReadError,
    EmptyCertificateError,
    CodecError,
)
from .discovery import CERTIFICATE_TABLE, CertificateSpec, DiscoveredCertificate, discover_certificates
from . import compressors  # noqa: F401  (registers the runners)

__version__ = "0.1.0"

__all__ = [
    "Compressor",
    "Decompressor",
    "registry",
    "Algorithm",
    "CompressionResult",
    "BenchmarkResult",
    "load_results",
    "CertBenchError",
    "CertDirectoryNotFound",
    "NoCertificatesFound",
    "CertificateReadError",
    "EmptyCertificateError",
    "CodecError",
    "CERTIFICATE_TABLE",
    "CertificateSpec",
    "DiscoveredCertificate",
    "discover_certificates",
    "__version__",
]
