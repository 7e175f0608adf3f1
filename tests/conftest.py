from __future__ import annotations

from pathlib import Path

import pytest

from dna4bit.core.config import get_settings
from dna4bit.services.sequence_service import get_reader

# base -> nibble code, inverse of the on-disk decode table
CODES = {"A": 1, "C": 2, "G": 3, "T": 4, "a": 5, "c": 6, "g": 7, "t": 8, "N": 9, "n": 10}

# 24 bases, mixed case; odd-length variant below exercises a half-filled last byte
CHR1 = "ACGTacgtNnAAccGGttTGCAgn"
CHR2 = "GATTACAgattacaN"


def pack(seq: str, header: bytes = b"\x00") -> bytes:
    """Pack bases two per byte, even position in the high nibble."""
    codes = [CODES[b] for b in seq]
    if len(codes) % 2:
        codes.append(0)
    body = bytes((codes[i] << 4) | codes[i + 1] for i in range(0, len(codes), 2))
    return header + body


def write_packed(directory: Path, chrom: str, seq: str) -> Path:
    path = directory / f"{chrom.lower()}.dna.4bit"
    path.write_bytes(pack(seq))
    return path


@pytest.fixture
def dna_dir(tmp_path: Path) -> Path:
    write_packed(tmp_path, "chr1", CHR1)
    write_packed(tmp_path, "chr2", CHR2)
    return tmp_path


@pytest.fixture
def app_env(dna_dir: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DNA_DIR", str(dna_dir))
    monkeypatch.setenv("API_PREFIX", "/api")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.delenv("CHECK_DNA_DIR_ON_STARTUP", raising=False)
    get_settings.cache_clear()
    get_reader.cache_clear()
    yield dna_dir
    get_settings.cache_clear()
    get_reader.cache_clear()
