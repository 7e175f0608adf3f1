# dna4bit/services/sequence_service.py
from __future__ import annotations

import logging
from functools import lru_cache

from dna4bit.core.config import get_settings
from dna4bit.genome import Format, Location, PackedSequenceReader, RepeatMask
from dna4bit.schemas.sequence import ChromosomeListResponse, LocationResponse, SequenceResponse

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_reader() -> PackedSequenceReader:
    """Process-wide reader. Holds only the immutable DNA_DIR path, safe to share across threads."""
    s = get_settings()
    logger.info("Packed genome directory: %s", s.dna_dir)
    return PackedSequenceReader(s.dna_dir)


class SequenceService:
    """
    Location text / coordinates -> decoded sequence payload.
    Errors (LocationError, DatabaseError, FormatError) propagate to the app-level handlers.
    """

    @staticmethod
    def list_chromosomes() -> ChromosomeListResponse:
        names = get_reader().chromosomes()
        return ChromosomeListResponse(items=names, count=len(names))

    @staticmethod
    def parse_location(loc: str) -> LocationResponse:
        return LocationResponse.from_location(Location.parse(loc))

    @staticmethod
    def fetch(
        location: Location,
        *,
        reverse: bool = False,
        complement: bool = False,
        format: Format = Format.NONE,
        mask: RepeatMask = RepeatMask.NONE,
    ) -> SequenceResponse:
        seq = get_reader().decode(
            location,
            reverse=reverse,
            complement=complement,
            format=format,
            repeat_mask=mask,
        )
        return SequenceResponse.from_decoded(
            seq,
            reverse=reverse,
            complement=complement,
            format=Format(format).value,
            mask=RepeatMask(mask).value,
        )

    @staticmethod
    def fetch_by_text(loc: str, **options) -> SequenceResponse:
        return SequenceService.fetch(Location.parse(loc), **options)

    @staticmethod
    def fetch_by_coords(chromosome: str, start: int, end: int, **options) -> SequenceResponse:
        return SequenceService.fetch(Location.new(chromosome, start, end), **options)
