"""Codon tables: the mapping between codons and amino acids, with codon weights.

Includes the NCBI standard genetic codes, JSON reading and writing, weighting
a table by codon usage, and combining two tables into one.
"""

from __future__ import annotations

import copy
import json
import os
import random
from bisect import bisect_left
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Iterable

_CODON_LENGTH = 3
_CHOOSER_THRESHOLD = 0.10


class ChooserError(ValueError):
    """Raised when a weighted codon chooser cannot be built."""


@dataclass
class Codon:
    """A codon triplet and its weight."""

    triplet: str
    weight: int = 1


@dataclass
class AminoAcid:
    """An amino acid letter and the codons that encode it."""

    letter: str
    codons: list[Codon] = field(default_factory=list)


class CodonChooser:
    """Picks codons at random in proportion to their weights."""

    def __init__(self, choices: Iterable[tuple[str, int]]) -> None:
        ordered = sorted(choices, key=lambda choice: choice[1])
        self._items: list[str] = []
        self._totals: list[int] = []
        running_total = 0
        for item, weight in ordered:
            running_total += weight
            self._items.append(item)
            self._totals.append(running_total)
        if running_total < 1:
            raise ChooserError("zero chooser weight: no valid choices")
        self._total = running_total

    def pick(self, rng: random.Random) -> str:
        """Return one codon, drawn with the given random generator."""
        target = rng.randrange(self._total) + 1
        return self._items[bisect_left(self._totals, target)]


@dataclass
class CodonTable:
    """Start codons, stop codons and the codons of each amino acid."""

    start_codons: list[str] = field(default_factory=list)
    stop_codons: list[str] = field(default_factory=list)
    amino_acids: list[AminoAcid] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True when the table holds no codons at all."""
        return not self.start_codons and not self.stop_codons and not self.amino_acids

    def translation_table(self) -> dict[str, str]:
        """Return a mapping of codon triplet to amino acid letter."""
        return {
            codon.triplet: amino_acid.letter
            for amino_acid in self.amino_acids
            for codon in amino_acid.codons
        }

    def optimize_table(self, sequence: str) -> CodonTable:
        """Weight every codon by how often it occurs in the sequence.

        The table is changed in place and returned.
        """
        frequencies = codon_frequency(sequence.upper())
        for amino_acid in self.amino_acids:
            for codon in amino_acid.codons:
                codon.weight = frequencies.get(codon.triplet, 0)
        return self

    def chooser(self) -> dict[str, CodonChooser]:
        """Return a weighted codon chooser for each amino acid letter.

        Codons that make up 10% or less of an amino acid's weight are left out.
        Raises ChooserError when an amino acid has no codon left to choose.
        """
        choosers: dict[str, CodonChooser] = {}
        for amino_acid in self.amino_acids:
            total = sum(codon.weight for codon in amino_acid.codons)
            choices = [
                (codon.triplet, codon.weight)
                for codon in amino_acid.codons
                if total > 0 and codon.weight / total > _CHOOSER_THRESHOLD
            ]
            try:
                choosers[amino_acid.letter] = CodonChooser(choices)
            except ChooserError as error:
                raise ChooserError(
                    f"codon chooser error for amino acid {amino_acid.letter!r}: {error}"
                ) from None
        return choosers


def codon_frequency(sequence: str) -> dict[str, int]:
    """Count the codons of a sequence, read in frame from its start."""
    usable = len(sequence) - len(sequence) % _CODON_LENGTH
    return dict(
        Counter(sequence[i : i + _CODON_LENGTH] for i in range(0, usable, _CODON_LENGTH))
    )


_BASE1 = "TTTTTTTTTTTTTTTTCCCCCCCCCCCCCCCCAAAAAAAAAAAAAAAAGGGGGGGGGGGGGGGG"
_BASE2 = "TTTTCCCCAAAAGGGGTTTTCCCCAAAAGGGGTTTTCCCCAAAAGGGGTTTTCCCCAAAAGGGG"
_BASE3 = "TCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAGTCAG"


def _generate_codon_table(amino_acids: str, starts: str) -> CodonTable:
    by_letter: dict[str, list[Codon]] = {}
    start_codons: list[str] = []
    stop_codons: list[str] = []
    for letter, start, b1, b2, b3 in zip(amino_acids, starts, _BASE1, _BASE2, _BASE3):
        triplet = b1 + b2 + b3
        by_letter.setdefault(letter, []).append(Codon(triplet, 1))
        if start == "M":
            start_codons.append(triplet)
        elif start == "*":
            stop_codons.append(triplet)
    return CodonTable(
        start_codons,
        stop_codons,
        [AminoAcid(letter, codons) for letter, codons in by_letter.items()],
    )


_NCBI_TABLES: dict[int, tuple[str, str]] = {
    1: ("FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "---M------**--*----M---------------M----------------------------"),
    2: ("FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIMMTTTTNNKKSS**VVVVAAAADDEEGGGG", "----------**--------------------MMMM----------**---M------------"),
    3: ("FFLLSSSSYY**CCWWTTTTPPPPHHQQRRRRIIMMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "----------**----------------------MM---------------M------------"),
    4: ("FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "--MM------**-------M------------MMMM---------------M------------"),
    5: ("FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIMMTTTTNNKKSSSSVVVVAAAADDEEGGGG", "---M------**--------------------MMMM---------------M------------"),
    6: ("FFLLSSSSYYQQCC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "--------------*--------------------M----------------------------"),
    9: ("FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIIMTTTTNNNKSSSSVVVVAAAADDEEGGGG", "----------**-----------------------M---------------M------------"),
    10: ("FFLLSSSSYY**CCCWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "----------**-----------------------M----------------------------"),
    11: ("FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "---M------**--*----M------------MMMM---------------M------------"),
    12: ("FFLLSSSSYY**CC*WLLLSPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "----------**--*----M---------------M----------------------------"),
    13: ("FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIMMTTTTNNKKSSGGVVVVAAAADDEEGGGG", "---M------**----------------------MM---------------M------------"),
    14: ("FFLLSSSSYYY*CCWWLLLLPPPPHHQQRRRRIIIMTTTTNNNKSSSSVVVVAAAADDEEGGGG", "-----------*-----------------------M----------------------------"),
    16: ("FFLLSSSSYY*LCC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "----------*---*--------------------M----------------------------"),
    21: ("FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIMMTTTTNNNKSSSSVVVVAAAADDEEGGGG", "----------**-----------------------M---------------M------------"),
    22: ("FFLLSS*SYY*LCC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "------*---*---*--------------------M----------------------------"),
    23: ("FF*LSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "--*-------**--*-----------------M--M---------------M------------"),
    24: ("FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSSKVVVVAAAADDEEGGGG", "---M------**-------M---------------M---------------M------------"),
    25: ("FFLLSSSSYY**CCGWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "---M------**-----------------------M---------------M------------"),
    26: ("FFLLSSSSYY**CC*WLLLAPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "----------**--*----M---------------M----------------------------"),
    27: ("FFLLSSSSYYQQCCWWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "--------------*--------------------M----------------------------"),
    28: ("FFLLSSSSYYQQCCWWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "----------**--*--------------------M----------------------------"),
    29: ("FFLLSSSSYYYYCC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "--------------*--------------------M----------------------------"),
    30: ("FFLLSSSSYYEECC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "--------------*--------------------M----------------------------"),
    31: ("FFLLSSSSYYEECCWWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG", "----------**-----------------------M----------------------------"),
    33: ("FFLLSSSSYYY*CCWWLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSSKVVVVAAAADDEEGGGG", "---M-------*-------M---------------M---------------M------------"),
}


def get_codon_table(index: int) -> CodonTable:
    """Return a fresh copy of the NCBI genetic code with the given number.

    Raises KeyError for a number NCBI does not publish.
    """
    try:
        amino_acids, starts = _NCBI_TABLES[index]
    except KeyError:
        raise KeyError(f"no NCBI codon table numbered {index}") from None
    return _generate_codon_table(amino_acids, starts)


def _table_from_dict(raw: dict) -> CodonTable:
    return CodonTable(
        start_codons=list(raw.get("start_codons") or []),
        stop_codons=list(raw.get("stop_codons") or []),
        amino_acids=[
            AminoAcid(
                letter=amino_acid.get("letter", ""),
                codons=[
                    Codon(codon.get("triplet", ""), int(codon.get("weight", 0)))
                    for codon in amino_acid.get("codons") or []
                ],
            )
            for amino_acid in raw.get("amino_acids") or []
        ],
    )


def parse_codon_json(data: str | bytes) -> CodonTable:
    """Parse a codon table from JSON text."""
    return _table_from_dict(json.loads(data))


def read_codon_json(path: str | os.PathLike[str]) -> CodonTable:
    """Read a codon table from a JSON file."""
    with open(path, "rb") as handle:
        return parse_codon_json(handle.read())


def write_codon_json(table: CodonTable, path: str | os.PathLike[str]) -> None:
    """Write a codon table to a JSON file."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(json.dumps(asdict(table), indent=1))


def _scaled_weight(weight: int, total: int) -> int | None:
    """Return the weight as parts in 10,000 of the total, or None when the total is zero."""
    if total == 0:
        return None
    return int(weight / total * 10000)


def compromise_codon_table(first: CodonTable, second: CodonTable, cut_off: float) -> CodonTable:
    """Return a table that weighs both tables equally.

    Codons below cut_off (a fraction from 0 to 1) of their amino acid's usage in
    either table get weight zero. Start and stop codons come from the first table.
    Raises ValueError when cut_off is outside 0..1.
    """
    if cut_off < 0:
        raise ValueError("cut off too low, cannot be less than 0")
    if cut_off > 1:
        raise ValueError("cut off too high, cannot be greater than 1")

    second_weights = {
        (amino_acid.letter, codon.triplet): codon.weight
        for amino_acid in second.amino_acids
        for codon in amino_acid.codons
    }
    cut_off_weight = int(10000 * cut_off)

    final_amino_acids: list[AminoAcid] = []
    for amino_acid in first.amino_acids:
        pairs = []
        for codon in amino_acid.codons:
            key = (amino_acid.letter, codon.triplet)
            if key not in second_weights:
                raise ValueError(
                    f"codon {codon.triplet} for amino acid {amino_acid.letter} "
                    "is missing from the second table"
                )
            pairs.append((codon.triplet, codon.weight, second_weights[key]))
        first_total = sum(first_weight for _, first_weight, _ in pairs)
        second_total = sum(second_weight for _, _, second_weight in pairs)

        final_codons = []
        for triplet, first_weight, second_weight in pairs:
            first_scaled = _scaled_weight(first_weight, first_total)
            second_scaled = _scaled_weight(second_weight, second_total)
            if (
                first_scaled is None
                or second_scaled is None
                or first_scaled < cut_off_weight
                or second_scaled < cut_off_weight
            ):
                weight = 0
            else:
                weight = int((first_scaled + second_scaled) / 2)
            final_codons.append(Codon(triplet, weight))
        final_amino_acids.append(AminoAcid(amino_acid.letter, final_codons))

    return CodonTable(
        list(first.start_codons), list(first.stop_codons), final_amino_acids
    )


def add_codon_table(first: CodonTable, second: CodonTable) -> CodonTable:
    """Return a table whose codon weights are the sums of both tables' weights.

    Start and stop codons come from the first table.
    """
    second_codons = [codon for amino_acid in second.amino_acids for codon in amino_acid.codons]
    final_amino_acids = [
        AminoAcid(
            amino_acid.letter,
            [
                Codon(codon.triplet, codon.weight + other.weight)
                for codon in amino_acid.codons
                for other in second_codons
                if other.triplet == codon.triplet
            ],
        )
        for amino_acid in first.amino_acids
    ]
    return CodonTable(
        copy.copy(first.start_codons), copy.copy(first.stop_codons), final_amino_acids
    )