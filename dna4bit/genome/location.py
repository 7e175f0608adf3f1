from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import LocationError

CHROM_MARKER = "chr"

# marker + identifier; no path separators (the name becomes a file name)
_CHROM_RE = re.compile(r"chr[A-Za-z0-9_.]+", re.IGNORECASE)

# plain digits, or comma-grouped thousands (1,000,000); no sign, no spaces
_POSITION_RE = re.compile(r"\d+|\d{1,3}(?:,\d{3})+", re.ASCII)


def has_chr_marker(chrom: str) -> bool:
    """'chr' prefix followed by a non-empty identifier (chr1, chrX, chrUn_gl000220)."""
    return bool(_CHROM_RE.fullmatch(str(chrom)))


def _parse_position(token: str, text: str) -> int:
    if not _POSITION_RE.fullmatch(token):
        raise LocationError(f"Invalid position {token!r} in location {text!r}")
    return int(token.replace(",", ""))


@dataclass(frozen=True)
class Location:
    """1-based inclusive genomic range, e.g. chr1:100-200."""

    chromosome: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not has_chr_marker(self.chromosome):
            raise LocationError(f"Invalid chromosome {self.chromosome!r}: expected e.g. 'chr1'")
        for value in (self.start, self.end):
            if isinstance(value, bool) or not isinstance(value, int):
                raise LocationError(f"Position must be an integer, got {value!r}")
        if not 1 <= self.start <= self.end:
            raise LocationError(f"Invalid range {self.start}-{self.end}: expected 1 <= start <= end")

    @classmethod
    def new(cls, chromosome: str, start: int, end: int) -> "Location":
        """Build a location from two positions given in either order.

        The smaller position becomes ``start`` (clamped to 1), the larger ``end``.
        """
        for value in (start, end):
            if isinstance(value, bool) or not isinstance(value, int):
                raise LocationError(f"Position must be an integer, got {value!r}")
            if value < 0:
                raise LocationError(f"Position must be >= 0, got {value}")

        lo = max(1, min(start, end))
        hi = max(lo, start, end)
        return cls(chromosome=str(chromosome).strip(), start=lo, end=hi)

    @classmethod
    def parse(cls, text: str) -> "Location":
        """Parse ``<chromosome>:<pos>[-<pos>]``.

        - single position -> length-1 range
        - reversed positions are swapped, not rejected
        - ``,`` thousands separators are accepted in groups of three (chr1:1,000-2,000)
        - no whitespace inside the location
        """
        s = str(text or "").strip()
        if ":" not in s or CHROM_MARKER not in s.lower():
            raise LocationError(f"Invalid location {text!r}: expected e.g. 'chr1:100-200'")

        chrom, _, span = s.partition(":")
        if not has_chr_marker(chrom):
            raise LocationError(f"Invalid chromosome {chrom!r} in location {text!r}")
        parts = span.split("-")
        if len(parts) > 2:
            raise LocationError(f"Invalid range {span!r} in location {text!r}")

        start = _parse_position(parts[0], s)
        end = _parse_position(parts[1], s) if len(parts) == 2 else start
        return cls.new(chrom, start, end)

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def mid(self) -> int:
        return (self.start + self.end) // 2

    def __str__(self) -> str:
        return f"{self.chromosome}:{self.start}-{self.end}"
