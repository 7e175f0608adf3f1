from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import numpy as np

from .alphabet import DECODE_TABLE, FILE_SUFFIX, HEADER_SIZE, NULL_BASE
from .errors import DatabaseError, FormatError
from .location import Location
from .transform import Format, RepeatMask, to_text, transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedSequence:
    location: Location
    bases: str

    def __post_init__(self) -> None:
        if len(self.bases) != self.location.length:
            raise FormatError(
                f"Decoded {len(self.bases)} bases for {self.location} (expected {self.location.length})"
            )


def unpack_nibbles(buf: bytes, s0: int, length: int) -> bytes:
    """Unpack ``length`` bases starting at 0-based position ``s0``.

    ``buf`` must start at byte ``s0 // 2`` of the packed data. Each byte holds
    the even position in its high nibble and the odd position in its low nibble.
    """
    packed = np.frombuffer(buf, dtype=np.uint8)
    nibbles = np.empty(packed.size * 2, dtype=np.uint8)
    nibbles[0::2] = packed >> 4
    nibbles[1::2] = packed & 0x0F

    offset = s0 % 2
    return DECODE_TABLE[nibbles[offset : offset + length]].tobytes()


@dataclass(frozen=True)
class PackedSequenceReader:
    """Random-access reader for per-chromosome ``<chrom>.dna.4bit`` files."""

    directory: Union[str, Path]

    def __post_init__(self) -> None:
        # frozen: normalise via object.__setattr__
        object.__setattr__(self, "directory", Path(self.directory))

    def path_for(self, chromosome: str) -> Path:
        return self.directory / f"{str(chromosome).lower()}{FILE_SUFFIX}"

    def chromosomes(self) -> List[str]:
        """Chromosome names that have a packed file in ``directory`` (lower-cased)."""
        try:
            names = [
                p.name[: -len(FILE_SUFFIX)]
                for p in self.directory.iterdir()
                if p.name.endswith(FILE_SUFFIX) and p.is_file()
            ]
        except OSError as e:
            raise DatabaseError(f"Cannot list packed genome directory {self.directory}: {e}") from e
        return sorted(names)

    def read_bases(self, location: Location) -> bytes:
        """Read and unpack the raw bases of ``location`` (forward strand, no transforms)."""
        s0 = location.start - 1
        e0 = location.end - 1
        length = e0 - s0 + 1

        byte_start = s0 // 2
        byte_end = e0 // 2
        byte_count = byte_end - byte_start + 1

        path = self.path_for(location.chromosome)
        logger.debug("read %s: %d bytes at offset %d from %s", location, byte_count, HEADER_SIZE + byte_start, path)

        try:
            with open(path, "rb") as f:
                size = os.fstat(f.fileno()).st_size
                if HEADER_SIZE + byte_end >= size:
                    raise DatabaseError(
                        f"Short read for {location} from {path}: "
                        f"needs {byte_end + 1} packed bytes, file has {max(size - HEADER_SIZE, 0)}"
                    )
                f.seek(HEADER_SIZE + byte_start)
                buf = f.read(byte_count)
        except OSError as e:
            raise DatabaseError(f"Cannot read sequence for {location} from {path}: {e}") from e

        if len(buf) != byte_count:
            raise DatabaseError(
                f"Short read for {location} from {path}: got {len(buf)} of {byte_count} bytes"
            )

        bases = unpack_nibbles(buf, s0, length)
        invalid = bases.count(NULL_BASE)
        if invalid:
            logger.warning("%d invalid base code(s) in %s (%s)", invalid, location, path)
        return bases

    def decode(
        self,
        location: Location,
        reverse: bool = False,
        complement: bool = False,
        format: Format = Format.NONE,
        repeat_mask: RepeatMask = RepeatMask.NONE,
    ) -> DecodedSequence:
        raw = self.read_bases(location)
        out = transform(raw, reverse=reverse, complement=complement, fmt=format, repeat_mask=repeat_mask)
        return DecodedSequence(location=location, bases=to_text(out))
