"""Packed 4-bit genome access.

  - Location: 1-based inclusive range parsed from 'chr1:100-200'
  - PackedSequenceReader: seeks into '<chrom>.dna.4bit' and unpacks two bases per byte
  - transform: reverse -> complement -> repeat mask -> case format
"""

from .errors import DatabaseError, DnaError, FormatError, LocationError
from .location import Location
from .reader import DecodedSequence, PackedSequenceReader
from .transform import Format, RepeatMask, reverse_complement, transform

__all__ = [
    "DatabaseError",
    "DecodedSequence",
    "DnaError",
    "Format",
    "FormatError",
    "Location",
    "LocationError",
    "PackedSequenceReader",
    "RepeatMask",
    "reverse_complement",
    "transform",
]
