"""Translation of coding sequences and codon optimisation of proteins."""

from __future__ import annotations

import random

from polybio.codon_table import CodonTable

_CODON_LENGTH = 3


class EmptyCodonTableError(ValueError):
    """Raised when a codon table holds no codons."""

    def __init__(self) -> None:
        super().__init__("empty codon table")


class EmptySequenceError(ValueError):
    """Raised when the sequence to translate or optimise is empty."""


class InvalidAminoAcidError(ValueError):
    """Raised when a protein holds an amino acid the codon table lacks."""

    def __init__(self, amino_acid: str) -> None:
        self.amino_acid = amino_acid
        super().__init__(f"amino acid {amino_acid!r} is missing from codon table")


def translate(sequence: str, table: CodonTable) -> str:
    """Translate a coding sequence into an upper-case amino acid sequence.

    Codons are read in frame from the start; a trailing partial codon is
    ignored, and codons missing from the table contribute nothing.
    """
    if table.is_empty():
        raise EmptyCodonTableError()
    if not sequence:
        raise EmptySequenceError("empty sequence string")

    translation = table.translation_table()
    usable = len(sequence) - len(sequence) % _CODON_LENGTH
    return "".join(
        translation.get(sequence[i : i + _CODON_LENGTH].upper(), "")
        for i in range(0, usable, _CODON_LENGTH)
    )


def optimize(amino_acids: str, table: CodonTable, seed: int | None = None) -> str:
    """Return a coding sequence for the protein, with codons drawn by table weight.

    The same seed gives the same result; without a seed the choice is fresh
    every call.
    """
    if table.is_empty():
        raise EmptyCodonTableError()
    if not amino_acids:
        raise EmptySequenceError("empty amino acid string")

    rng = random.Random(seed)
    choosers = table.chooser()

    codons = []
    for amino_acid in amino_acids:
        chooser = choosers.get(amino_acid)
        if chooser is None:
            raise InvalidAminoAcidError(amino_acid)
        codons.append(chooser.pick(rng))
    return "".join(codons)