"""Fixing coding sequences for DNA synthesis with synonymous codon changes.

Problem finders look at a sequence and suggest ranges of codons to change,
along with how many changes are needed and which way the GC content should
move. ``cds`` applies the best-weighted synonymous codon changes until no
finder reports a problem, or raises when a problem cannot be fixed.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from polybio.codon_table import CodonTable
from polybio.transform import reverse_complement

_CODON_LENGTH = 3
_VALID_BIASES = ("NA", "GC", "AT")


class CdsFixError(ValueError):
    """Raised when a coding sequence cannot be fixed."""


@dataclass(frozen=True)
class DnaSuggestion:
    """A range of codon positions to change and how to change them.

    ``bias`` is ``"NA"`` for no preference, ``"GC"`` to raise GC content and
    ``"AT"`` to lower it.
    """

    start: int
    end: int
    bias: str
    quantity_fixes: int
    suggestion_type: str


@dataclass(frozen=True)
class Change:
    """One codon change made to a sequence."""

    position: int
    step: int
    from_codon: str
    to_codon: str
    reason: str


ProblemFinder = Callable[[str], Iterable[DnaSuggestion]]


def gc_content(sequence: str) -> float:
    """Return the fraction of G and C bases in the sequence (0.0 when empty)."""
    if not sequence:
        return 0.0
    upper = sequence.upper()
    return (upper.count("G") + upper.count("C")) / len(upper)


def remove_sequence(sequences_to_remove: Iterable[str], reason: str) -> ProblemFinder:
    """Return a finder that flags each site, or its reverse complement, in a sequence."""
    sites = list(sequences_to_remove)

    def find(sequence: str) -> Iterator[DnaSuggestion]:
        for site in sites:
            for pattern in (site, reverse_complement(site)):
                for match in re.finditer(pattern, sequence):
                    yield DnaSuggestion(
                        match.start() // _CODON_LENGTH,
                        match.end() // _CODON_LENGTH - 1,
                        "NA",
                        1,
                        reason,
                    )

    return find


def remove_repeat(repeat_length: int) -> ProblemFinder:
    """Return a finder that flags repeats of the given length, forward or reversed."""

    def find(sequence: str) -> Iterator[DnaSuggestion]:
        kmers: set[str] = set()
        position = 0
        while position < len(sequence) - repeat_length:
            kmer = sequence[position : position + repeat_length]
            seen = kmer in kmers or reverse_complement(kmer) in kmers
            kmers.add(kmer)
            if seen:
                leftover = position % _CODON_LENGTH
                end = (position + repeat_length) // _CODON_LENGTH
                if leftover != 0:
                    end -= 1
                yield DnaSuggestion(
                    position // _CODON_LENGTH, end, "NA", 1, "Repeat sequence"
                )
                position += leftover
            position += 1

    return find


def gc_content_fixer(upper_bound: float, lower_bound: float) -> ProblemFinder:
    """Return a finder that flags a sequence whose GC content is out of bounds."""

    def find(sequence: str) -> Iterator[DnaSuggestion]:
        if not sequence:
            return
        content = gc_content(sequence)
        last_codon = len(sequence) // _CODON_LENGTH - 1
        if content > upper_bound:
            changes = int((content - upper_bound) * len(sequence)) + 1
            yield DnaSuggestion(0, last_codon, "AT", changes, "GcContent too high")
        if content < lower_bound:
            changes = int((lower_bound - content) * len(sequence)) + 1
            yield DnaSuggestion(0, last_codon, "GC", changes, "GcContent too low")

    return find


def _find_problems(
    sequence: str, finders: Iterable[ProblemFinder]
) -> list[DnaSuggestion]:
    return [suggestion for finder in finders for suggestion in finder(sequence)]


def _gc_count(triplet: str) -> int:
    return triplet.count("G") + triplet.count("C")


def cds(
    sequence: str,
    codon_table: CodonTable,
    problematic_sequence_funcs: Iterable[ProblemFinder],
) -> tuple[str, list[Change]]:
    """Fix a coding sequence with synonymous codon changes.

    Returns the fixed sequence and the changes made, ordered by step and
    position. Raises CdsFixError when the sequence is not whole codons, when
    an amino acid of the table has no weight, when a suggestion has an unknown
    bias, or when a problem needs more changes than are available.
    """
    finders = list(problematic_sequence_funcs)
    if len(sequence) % _CODON_LENGTH != 0:
        raise CdsFixError(
            "this sequence isn't a complete CDS, please try to use a CDS "
            "without interrupted codons"
        )

    bias_maps: dict[str, defaultdict[str, list[str]]] = {
        bias: defaultdict(list) for bias in _VALID_BIASES
    }
    amino_acid_totals: dict[str, int] = {}
    for amino_acid in codon_table.amino_acids:
        total = 0
        for codon in amino_acid.codons:
            total += codon.weight
            codon_gc = _gc_count(codon.triplet)
            for other in amino_acid.codons:
                if other.triplet == codon.triplet:
                    continue
                other_gc = _gc_count(other.triplet)
                if codon_gc > other_gc:
                    bias_maps["AT"][codon.triplet].append(other.triplet)
                elif codon_gc < other_gc:
                    bias_maps["GC"][codon.triplet].append(other.triplet)
                bias_maps["NA"][codon.triplet].append(other.triplet)
        if total == 0:
            raise CdsFixError("incomplete codon table")
        amino_acid_totals[amino_acid.letter] = total

    weights: dict[str, float] = {
        codon.triplet: 100 * codon.weight / amino_acid_totals[amino_acid.letter]
        for amino_acid in codon_table.amino_acids
        for codon in amino_acid.codons
    }

    history: list[list[str]] = [
        [sequence[i : i + _CODON_LENGTH]]
        for i in range(0, len(sequence), _CODON_LENGTH)
    ]

    changes: list[Change] = []
    step = 0
    while True:
        suggestions = _find_problems(sequence, finders)
        if not suggestions:
            return sequence, sorted(changes, key=lambda c: (c.step, c.position))

        for suggestion in suggestions:
            if suggestion.bias not in _VALID_BIASES:
                raise CdsFixError(
                    f"Invalid bias. Expected NA, GC, or AT, got {suggestion.bias}"
                )
            bias_map = bias_maps[suggestion.bias]

            potential: list[Change] = []
            last_position = min(suggestion.end, len(history) - 1)
            for position in range(suggestion.start, last_position + 1):
                codon_history = history[position]
                last_codon = codon_history[-1]
                unavailable = set(codon_history)
                potential.extend(
                    Change(position, step, last_codon, candidate, suggestion.suggestion_type)
                    for candidate in bias_map.get(last_codon, [])
                    if candidate not in unavailable
                )

            potential.sort(key=lambda change: weights.get(change.to_codon, 0.0), reverse=True)

            best_per_position: list[Change] = []
            used_positions: set[int] = set()
            for change in potential:
                if change.position not in used_positions:
                    used_positions.add(change.position)
                    best_per_position.append(change)

            if len(best_per_position) < suggestion.quantity_fixes:
                raise CdsFixError(
                    "Too many fixes required. Number of potential fixes: "
                    f"{len(potential)} , number of required fixes: "
                    f"{suggestion.quantity_fixes}"
                )

            for change in best_per_position[: suggestion.quantity_fixes]:
                history[change.position].append(change.to_codon)
                changes.append(change)
            sequence = "".join(codon_history[-1] for codon_history in history)
        step += 1


def cds_simple(
    sequence: str, codon_table: CodonTable, sequences_to_remove: Iterable[str]
) -> tuple[str, list[Change]]:
    """Fix a coding sequence with the usual checks.

    Removes runs of eight A or G bases, the requested sequences, repeats of
    18 base pairs, and keeps GC content between 20% and 80%.
    """
    finders: list[ProblemFinder] = [
        remove_sequence(["AAAAAAAA", "GGGGGGGG"], "Homopolymers"),
        remove_sequence(sequences_to_remove, "Removal requested by user"),
        remove_repeat(18),
        gc_content_fixer(0.80, 0.20),
    ]
    return cds(sequence, codon_table, finders)