from __future__ import annotations

"""Fatal error taxonomy.

Everything here aborts a run. The only recoverable condition (an expected
certificate file being absent) is a logged warning, not an exception.
"""

import pathlib


class CertBenchError(Exception):
    """Base class for errors that stop a benchmark run."""


class CertDirectoryNotFound(CertBenchError):
    hint = "Please run ./generate_certs.sh first"

    def __init__(self, cert_dir: pathlib.Path | str) -> None:
        self.cert_dir = str(cert_dir)
        super().__init__(f"Certificate directory '{self.cert_dir}' does not exist")


class NoCertificatesFound(CertBenchError):
    def __init__(self, cert_dir: pathlib.Path | str) -> None:
        self.cert_dir = str(cert_dir)
        super().__init__("No certificates found to benchmark")


class CertificateReadError(CertBenchError):
    def __init__(self, path: pathlib.Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to read certificate {path}: {reason}")


class EmptyCertificateError(CertBenchError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Certificate {name} is empty; compression ratio is undefined")


class CodecError(CertBenchError):
    def __init__(self, algorithm: str, reason: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"{algorithm} codec failed: {reason}")
