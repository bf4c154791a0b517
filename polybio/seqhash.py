"""Seqhash: stable identifiers for DNA, RNA and protein sequences.

A seqhash looks like ``v1_DCD_<hex>``: a version tag, three metadata letters
(sequence type D/R/P, circular C or linear L, double D or single S stranded),
and the BLAKE3 digest of the sequence after it is made deterministic by
rotation and by choosing between the strand and its reverse complement.
"""

from __future__ import annotations

from enum import Enum

from polybio.blake3 import blake3_hexdigest
from polybio.transform import reverse_complement

_NUCLEIC_LETTERS = "ATUGCYRSWKMBDHVNZ"
_PROTEIN_LETTERS = "ACDEFGHIKLMNPQRSTVWYUO*BXZ"


class SequenceType(str, Enum):
    """The kinds of sequence a seqhash can describe."""

    DNA = "DNA"
    RNA = "RNA"
    PROTEIN = "PROTEIN"


_TYPE_LETTERS = {
    SequenceType.DNA: "D",
    SequenceType.RNA: "R",
    SequenceType.PROTEIN: "P",
}


def _least_rotation(sequence: str) -> int:
    """Return the start of the lexicographically least rotation (Booth's algorithm)."""
    doubled = sequence + sequence
    failure = [-1] * len(doubled)
    least = 0
    for index in range(1, len(doubled)):
        char = doubled[index]
        fail = failure[index - least - 1]
        while fail != -1 and char != doubled[least + fail + 1]:
            if char < doubled[least + fail + 1]:
                least = index - fail - 1
            fail = failure[fail]
        if char != doubled[least + fail + 1]:
            if char < doubled[least]:
                least = index
            failure[index - least] = -1
        else:
            failure[index - least] = fail + 1
    return least


def rotate_sequence(sequence: str) -> str:
    """Rotate a circular sequence to its lexicographically least rotation."""
    start = _least_rotation(sequence)
    return (sequence + sequence)[start : start + len(sequence)]


def seqhash(
    sequence: str,
    sequence_type: SequenceType | str,
    circular: bool,
    double_stranded: bool,
) -> str:
    """Return the seqhash of a sequence.

    Raises ValueError for an unknown sequence type, for letters outside the
    alphabet of the type, and for double stranded proteins.
    """
    sequence = sequence.upper()
    try:
        kind = SequenceType(sequence_type)
    except ValueError:
        raise ValueError(
            "Only sequenceTypes of DNA, RNA, or PROTEIN allowed. "
            f"Got sequenceType: {sequence_type}"
        ) from None

    if kind is SequenceType.RNA:
        sequence = sequence.replace("U", "T")

    if kind in (SequenceType.DNA, SequenceType.RNA):
        for char in sequence:
            if char not in _NUCLEIC_LETTERS:
                raise ValueError(
                    f"Only letters {_NUCLEIC_LETTERS} are allowed for DNA/RNA. Got letter: {char}"
                )
    else:
        for char in sequence:
            if char not in _PROTEIN_LETTERS:
                raise ValueError(
                    f"Only letters {_PROTEIN_LETTERS} are allowed for Proteins. Got letter: {char}"
                )
        if double_stranded:
            raise ValueError("Proteins cannot be double stranded")

    if circular and double_stranded:
        deterministic = min(
            rotate_sequence(sequence), rotate_sequence(reverse_complement(sequence))
        )
    elif circular:
        deterministic = rotate_sequence(sequence)
    elif double_stranded:
        deterministic = min(sequence, reverse_complement(sequence))
    else:
        deterministic = sequence

    metadata = (
        _TYPE_LETTERS[kind]
        + ("C" if circular else "L")
        + ("D" if double_stranded else "S")
    )
    digest = blake3_hexdigest(deterministic.encode("utf-8"))
    return f"v1_{metadata}_{digest}"