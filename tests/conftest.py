from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
CLI_SRC = ROOT / "apps" / "cli" / "src"
CORE_SRC = ROOT / "libs" / "core" / "src"

for candidate in (CLI_SRC, CORE_SRC):
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

# DER-ish filler: repetitive enough to compress, varied enough to be realistic
SAMPLE_CERT = (
    b"0\x82\x03\x1e0\x82\x02\x06\xa0\x03\x02\x01\x02\x02\x14"
    + b"CN=certbench sample,O=Example,C=US;" * 24
    + bytes(range(256))
)


@pytest.fixture
def sample_cert() -> bytes:
    return SAMPLE_CERT


@pytest.fixture
def make_certs():
    """Write one sample certificate per name under a directory."""
    def _make(cert_dir: Path, names: list[str], payload: bytes = SAMPLE_CERT) -> Path:
        cert_dir.mkdir(parents=True, exist_ok=True)
        for idx, name in enumerate(names):
            (cert_dir / name).write_bytes(payload + idx.to_bytes(2, "big"))
        return cert_dir
    return _make
