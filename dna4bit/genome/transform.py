from __future__ import annotations

from enum import Enum

from .alphabet import COMPLEMENT_TABLE, LOWER_TABLE, N_MASK_TABLE, UPPER_TABLE
from .errors import FormatError


class Format(str, Enum):
    """Output case."""

    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"


class RepeatMask(str, Enum):
    """How lowercase (repeat-masked) bases are rewritten."""

    NONE = "none"
    LOWER = "lower"
    N = "n"


def reverse_bases(bases: bytes) -> bytes:
    return bytes(bases)[::-1]


def complement_bases(bases: bytes) -> bytes:
    """Watson-Crick complement, case preserving. N/n map to themselves."""
    return bytes(bases).translate(COMPLEMENT_TABLE)


def reverse_complement(bases: bytes) -> bytes:
    return complement_bases(reverse_bases(bases))


def mask_repeats(bases: bytes, repeat_mask: RepeatMask) -> bytes:
    """RepeatMask.N rewrites every lowercase base to 'N'.

    RepeatMask.LOWER performs no masking here; it only disables case formatting
    (see format_case).
    """
    if RepeatMask(repeat_mask) is RepeatMask.N:
        return bytes(bases).translate(N_MASK_TABLE)
    return bytes(bases)


def format_case(bases: bytes, fmt: Format, repeat_mask: RepeatMask = RepeatMask.NONE) -> bytes:
    """Apply Format.UPPER / Format.LOWER.

    Only active when no repeat mask was requested; bytes outside the base
    alphabet become NUL.
    """
    fmt = Format(fmt)
    if fmt is Format.NONE or RepeatMask(repeat_mask) is not RepeatMask.NONE:
        return bytes(bases)
    table = UPPER_TABLE if fmt is Format.UPPER else LOWER_TABLE
    return bytes(bases).translate(table)


def transform(
    bases: bytes,
    reverse: bool = False,
    complement: bool = False,
    fmt: Format = Format.NONE,
    repeat_mask: RepeatMask = RepeatMask.NONE,
) -> bytes:
    """reverse -> complement -> repeat mask -> case format, in that order."""
    out = bytes(bases)
    if reverse:
        out = reverse_bases(out)
    if complement:
        out = complement_bases(out)
    out = mask_repeats(out, repeat_mask)
    return format_case(out, fmt, repeat_mask)


def to_text(bases: bytes) -> str:
    try:
        return bytes(bases).decode("ascii")
    except UnicodeDecodeError as e:
        raise FormatError(f"Decoded sequence is not valid text: {e}") from e
