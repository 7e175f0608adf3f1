"""dna4bit: random-access sequence retrieval from 4-bit packed genome files."""

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
