from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .core.config import get_settings
from .genome import DecodedSequence, DnaError, Format, Location, PackedSequenceReader, RepeatMask

logger = logging.getLogger("dna4bit.cli")

FASTA_WIDTH = 60


def write_fasta(seq: DecodedSequence, out: TextIO, width: int = FASTA_WIDTH) -> None:
    out.write(f">{seq.location}\n")
    for i in range(0, len(seq.bases), width):
        out.write(seq.bases[i : i + width] + "\n")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dna4bit", description="Extract sequence from 4-bit packed genome files")
    p.add_argument("locations", nargs="+", help="e.g. chr1:100-200 (1-based, inclusive)")
    p.add_argument("--dir", default=None, help="Directory with <chrom>.dna.4bit files (default: $DNA_DIR)")
    p.add_argument("--reverse", action="store_true", help="Reverse base order")
    p.add_argument("--complement", action="store_true", help="Complement bases")
    p.add_argument("--rc", action="store_true", help="Reverse-complement (same as --reverse --complement)")
    p.add_argument("--format", choices=[f.value for f in Format], default=Format.NONE.value)
    p.add_argument("--mask", choices=[m.value for m in RepeatMask], default=RepeatMask.NONE.value)
    p.add_argument("--fasta", action="store_true", help="Write FASTA records instead of raw lines")
    p.add_argument("--log-level", default=None, help="Default: $LOG_LEVEL")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, (args.log_level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    reader = PackedSequenceReader(args.dir or settings.dna_dir)
    reverse = args.reverse or args.rc
    complement = args.complement or args.rc

    for text in args.locations:
        try:
            seq = reader.decode(
                Location.parse(text),
                reverse=reverse,
                complement=complement,
                format=Format(args.format),
                repeat_mask=RepeatMask(args.mask),
            )
        except DnaError as e:
            logger.error("%s: %s", type(e).__name__, e)
            return 1

        if args.fasta:
            write_fasta(seq, sys.stdout)
        else:
            sys.stdout.write(seq.bases + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
