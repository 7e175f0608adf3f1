# dna4bit/schemas/sequence.py
from __future__ import annotations

from typing import List, Literal

from pydantic import Field, model_validator

from dna4bit.genome import DecodedSequence, Location
from dna4bit.schemas.common import SchemaBase


class LocationResponse(SchemaBase):
    chromosome: str = Field(..., description="e.g. chr1")
    start: int = Field(..., ge=1, description="1-based, inclusive")
    end: int = Field(..., ge=1, description="1-based, inclusive")
    length: int = Field(..., gt=0)
    mid: int = Field(..., ge=1)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.end < self.start:
            raise ValueError("end must be >= start")
        return self

    @classmethod
    def from_location(cls, loc: Location) -> "LocationResponse":
        return cls(chromosome=loc.chromosome, start=loc.start, end=loc.end, length=loc.length, mid=loc.mid)


class SequenceResponse(LocationResponse):
    strand: Literal["+", "-"] = Field("+", description="'-' when reverse-complemented")
    reverse: bool = False
    complement: bool = False
    format: str = "none"
    mask: str = "none"
    bases: str

    @model_validator(mode="after")
    def _check_length(self):
        if len(self.bases) != self.length:
            raise ValueError("len(bases) must equal length")
        return self

    @classmethod
    def from_decoded(
        cls,
        seq: DecodedSequence,
        *,
        reverse: bool,
        complement: bool,
        format: str,
        mask: str,
    ) -> "SequenceResponse":
        loc = seq.location
        return cls(
            chromosome=loc.chromosome,
            start=loc.start,
            end=loc.end,
            length=loc.length,
            mid=loc.mid,
            strand="-" if (reverse and complement) else "+",
            reverse=reverse,
            complement=complement,
            format=format,
            mask=mask,
            bases=seq.bases,
        )


class ChromosomeListResponse(SchemaBase):
    items: List[str]
    count: int
