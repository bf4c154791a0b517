"""Sequence utilities for synthetic biology: transforms, IUPAC variants, random sequences, seqhash, codon tables and CDS fixing."""

__version__ = "0.1.0"

__all__ = [
    "blake3",
    "codon",
    "codon_table",
    "fix",
    "random_seq",
    "seqhash",
    "transform",
    "variants",
]