from __future__ import annotations

import numpy as np

FILE_SUFFIX: str = ".dna.4bit"
"""Per-chromosome packed file suffix (file name is the lower-cased chromosome)."""

HEADER_SIZE: int = 1
"""Reserved header bytes at the start of every packed file."""

NULL_BASE: int = 0
"""Sentinel byte for invalid nibble codes and bytes outside the alphabet."""

# nibble code i -> BASES[i - 1]; 0 and 11..15 are reserved
BASES: bytes = b"ACGTacgtNn"
LOWER_BASES: bytes = bytes(b for b in BASES if chr(b).islower())


def _make_table(src: bytes, dst: bytes, default: int = NULL_BASE) -> bytes:
    tbl = bytearray([default] * 256)
    for s, d in zip(src, dst):
        tbl[s] = d
    return bytes(tbl)


DECODE_TABLE = np.zeros(16, dtype=np.uint8)
DECODE_TABLE[1 : 1 + len(BASES)] = np.frombuffer(BASES, dtype=np.uint8)
DECODE_TABLE.setflags(write=False)

COMPLEMENT_TABLE: bytes = _make_table(BASES, b"TGCAtgcaNn")
UPPER_TABLE: bytes = _make_table(BASES, BASES.upper())
LOWER_TABLE: bytes = _make_table(BASES, BASES.lower())


def is_lower(base: int) -> bool:
    """True for a lowercase (repeat-masked) base byte."""
    return base in LOWER_BASES


# repeat-masked bases -> N, everything else unchanged
N_MASK_TABLE: bytes = bytes(ord("N") if is_lower(b) else b for b in range(256))
