# dna4bit/api/routes/sequence.py
from __future__ import annotations

from fastapi import APIRouter, Query

from dna4bit.genome import Format, RepeatMask
from dna4bit.schemas.sequence import ChromosomeListResponse, LocationResponse, SequenceResponse
from dna4bit.services.sequence_service import SequenceService

router = APIRouter(tags=["sequence"])


@router.get("/chromosomes", response_model=ChromosomeListResponse)
def list_chromosomes() -> ChromosomeListResponse:
    """Chromosomes with a packed file under DNA_DIR."""
    return SequenceService.list_chromosomes()


@router.get("/location", response_model=LocationResponse)
def parse_location(
    loc: str = Query(..., description="e.g. chr1:100-200"),
) -> LocationResponse:
    """Validate and normalise a location without reading any file."""
    return SequenceService.parse_location(loc)


@router.get("/sequence", response_model=SequenceResponse)
def get_sequence(
    loc: str = Query(..., description="e.g. chr1:100-200 (1-based, inclusive)"),
    reverse: bool = Query(False, description="Reverse base order"),
    complement: bool = Query(False, description="Complement bases (with reverse: opposite strand)"),
    format: Format = Query(Format.NONE, description="Output case; ignored when mask != none"),
    mask: RepeatMask = Query(RepeatMask.NONE, description="'n' rewrites lowercase (repeat) bases to N"),
) -> SequenceResponse:
    return SequenceService.fetch_by_text(loc, reverse=reverse, complement=complement, format=format, mask=mask)


@router.get("/sequence/{chromosome}/{start}/{end}", response_model=SequenceResponse)
def get_sequence_by_coords(
    chromosome: str,
    start: int,
    end: int,
    reverse: bool = Query(False),
    complement: bool = Query(False),
    format: Format = Query(Format.NONE),
    mask: RepeatMask = Query(RepeatMask.NONE),
) -> SequenceResponse:
    """Same as /sequence; positions may be given in either order."""
    return SequenceService.fetch_by_coords(
        chromosome, start, end, reverse=reverse, complement=complement, format=format, mask=mask
    )
