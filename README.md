# polybio

Sequence utilities for synthetic biology, in pure Python with no
third-party dependencies.

## Installation

```
pip install polybio
```

## What it provides

- `polybio.transform`: `complement`, `reverse`, `reverse_complement` and
  `complement_base` for DNA/RNA strings, including IUPAC ambiguity codes and
  lower-case letters. Characters that are not nucleotide codes complement to
  the NUL character.
- `polybio.variants`: `all_variants_iupac` expands an ambiguous sequence
  into every concrete DNA sequence it can stand for, and raises `ValueError`
  on a character that is not an IUPAC nucleotide code.
- `polybio.random_seq`: `protein_sequence` (always starting with `M` and
  ending with `*`, length greater than two) and `dna_sequence` make random
  sequences that are the same every time for the same length and seed.
- `polybio.seqhash`: `seqhash` builds a stable identifier of the form
  `v1_<type><circular><strands>_<hex>` for DNA, RNA and protein sequences
  (`SequenceType.DNA`, `SequenceType.RNA`, `SequenceType.PROTEIN`), taking
  rotation and strandedness into account; `rotate_sequence` gives the least
  rotation of a circular sequence. `polybio.blake3` holds the BLAKE3 hash the
  identifier rests on (`blake3_digest`, `blake3_hexdigest`).
- `polybio.codon_table`: the `Codon`, `AminoAcid` and `CodonTable` data
  classes; the NCBI genetic code tables (`get_codon_table`, which raises
  `KeyError` for an unpublished number); weighting a table from coding
  sequences (`CodonTable.optimize_table`, which changes the table in place);
  counting codons (`codon_frequency`); weighted codon choice
  (`CodonTable.chooser`, `CodonChooser`, `ChooserError`); JSON input and output
  (`read_codon_json`, `parse_codon_json`, `write_codon_json`); and merging
  tables (`compromise_codon_table`, `add_codon_table`).
- `polybio.codon`: `translate` from DNA to protein and `optimize` from
  protein to codon-optimised DNA, with `EmptyCodonTableError`,
  `EmptySequenceError` and `InvalidAminoAcidError` for bad input.
- `polybio.fix`: `cds` and `cds_simple` swap synonymous codons to remove
  unwanted sites, repeats and extreme GC content before synthesis. The
  problem finders `remove_sequence`, `remove_repeat` and `gc_content_fixer`
  can be combined freely; `gc_content` measures GC fraction.

## Examples

```python
from polybio.transform import reverse_complement
from polybio.seqhash import seqhash, SequenceType
from polybio.codon import translate, optimize
from polybio.codon_table import get_codon_table

reverse_complement("GATTACA")            # 'TGTAATC'

seqhash("ATGC", SequenceType.DNA, circular=False, double_stranded=True)
# 'v1_DLD_f4028f93e08c5c23cbb8daa189b0a9802b378f1a1c919dcbcf1608a615f46350'

table = get_codon_table(11)
translate("ATGGCTAGCAAATAA", table)      # 'MASK*'
dna = optimize("MASK*", table, seed=10)  # same seed, same result
```

Removing a BsaI site from a coding sequence:

```python
from polybio.codon_table import read_codon_json
from polybio.fix import cds_simple

table = read_codon_json("my_codon_table.json")
fixed, changes = cds_simple(my_cds, table, ["GGTCTC"])
for change in changes:
    print(change.position, change.from_codon, change.to_codon, change.reason)
```

A custom set of checks goes through `cds`:

```python
from polybio.fix import cds, remove_repeat, remove_sequence

fixed, changes = cds(
    my_cds,
    table,
    [remove_repeat(20), remove_sequence(["GAAGAC", "GGTCTC"], "TypeIIS site")],
)
```

Errors are raised as exceptions: invalid input to `seqhash` raises
`ValueError`, and `cds` raises `CdsFixError` when a sequence cannot be fixed.

## What it does not do

- It reads no sequence file formats such as GenBank or FASTA: sequences are
  passed in as strings, and codon usage tables are built with
  `CodonTable.optimize_table` from coding sequences you supply, or read from
  the package's own JSON codon table format.
- It has no command-line program; it is a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```