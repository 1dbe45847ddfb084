from __future__ import annotations
"""Locate the certificate files a benchmark run should cover.

The set of certificates is configuration data: an ordered table of
(filename, key-size label) pairs. Discovery keeps the table order and skips
entries whose file is absent.
"""

import logging
import pathlib
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Sequence

from .errors import CertDirectoryNotFound, NoCertificatesFound

log = logging.getLogger(__name__)


class CertificateSpec(NamedTuple):
    filename: str
    key_size: str


# Classical samples first, then the ML-KEM variants at the same nominal sizes.
CERTIFICATE_TABLE: Sequence[CertificateSpec] = (
    CertificateSpec("sample512.crt", "512"),
    CertificateSpec("sample768.crt", "768"),
    CertificateSpec("sample1024.crt", "1024"),
    CertificateSpec("mlkem512.crt", "512"),
    CertificateSpec("mlkem768.crt", "768"),
    CertificateSpec("mlkem1024.crt", "1024"),
)


@dataclass(frozen=True)
class DiscoveredCertificate:
    path: pathlib.Path
    key_size: str

    @property
    def name(self) -> str:
        return self.path.name


def iter_certificates(
    cert_dir: pathlib.Path | str,
    table: Sequence[CertificateSpec] = CERTIFICATE_TABLE,
) -> Iterator[DiscoveredCertificate]:
    """Yield the entries of ``table`` present under ``cert_dir``, in table order.

    The directory check runs on call, before any scanning. Absent entries are
    logged as they are reached, so warnings interleave with whatever the
    caller does per certificate. Anything that exists is selected; an entry
    that cannot be read fails later, when it is read.
    """
    base = pathlib.Path(cert_dir)
    if not base.is_dir():
        raise CertDirectoryNotFound(cert_dir)
    return _scan(base, table)


def _scan(base: pathlib.Path, table: Sequence[CertificateSpec]) -> Iterator[DiscoveredCertificate]:
    for spec in table:
        candidate = base / spec.filename
        if candidate.exists():
            yield DiscoveredCertificate(path=candidate, key_size=spec.key_size)
        else:
            log.warning("%s not found", spec.filename)


def discover_certificates(
    cert_dir: pathlib.Path | str,
    table: Sequence[CertificateSpec] = CERTIFICATE_TABLE,
) -> List[DiscoveredCertificate]:
    """Return the entries of ``table`` present under ``cert_dir``, in table order.

    Raises CertDirectoryNotFound before scanning when ``cert_dir`` is not a
    directory, and NoCertificatesFound when none of the entries exist.
    """
    found = list(iter_certificates(cert_dir, table))
    if not found:
        raise NoCertificatesFound(cert_dir)
    return found
