"""Seeded random DNA and protein sequences."""

from __future__ import annotations

import random

_AMINO_ACIDS = "ACDEFGHIJLMNPQRSTVWY"
_NUCLEOTIDES = "ACTG"


def protein_sequence(length: int, seed: int) -> str:
    """Return a random protein of the given length, starting with M and ending with *.

    Raises ValueError when length is two or less, since the start and stop
    residues are always present.
    """
    if length <= 2:
        raise ValueError(
            "The length needs to be greater than two because the random protein "
            "sequence returned always contains a start and stop codon. "
            "Please select a higher length."
        )
    rng = random.Random(seed)
    middle = "".join(rng.choice(_AMINO_ACIDS) for _ in range(length - 2))
    return f"M{middle}*"


def dna_sequence(length: int, seed: int) -> str:
    """Return a random DNA sequence of the given length."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    rng = random.Random(seed)
    return "".join(rng.choice(_NUCLEOTIDES) for _ in range(length))