"""Complement, reverse and reverse-complement of nucleic acid sequences."""

from __future__ import annotations

_COMPLEMENTS: dict[str, str] = {
    "A": "T",
    "B": "V",
    "C": "G",
    "D": "H",
    "G": "C",
    "H": "D",
    "K": "M",
    "M": "K",
    "N": "N",
    "R": "Y",
    "S": "S",
    "T": "A",
    "U": "A",
    "V": "B",
    "W": "W",
    "Y": "R",
    "a": "t",
    "b": "v",
    "c": "g",
    "d": "h",
    "g": "c",
    "h": "d",
    "k": "m",
    "m": "k",
    "n": "n",
    "r": "y",
    "s": "s",
    "t": "a",
    "u": "a",
    "v": "b",
    "w": "w",
    "y": "r",
}

_UNKNOWN = "\x00"


def complement_base(base: str) -> str:
    """Return the complement of a single base.

    Characters that are not IUPAC nucleotide codes map to the NUL character.
    """
    return _COMPLEMENTS.get(base, _UNKNOWN)


def complement(sequence: str) -> str:
    """Return the complement of a sequence, base by base."""
    return "".join(complement_base(base) for base in sequence)


def reverse(sequence: str) -> str:
    """Return the sequence in reverse order."""
    return sequence[::-1]


def reverse_complement(sequence: str) -> str:
    """Return the reverse complement of a sequence."""
    return reverse(complement(sequence))