import json
import random

import pytest

from polybio.codon_table import (
    AminoAcid,
    ChooserError,
    Codon,
    CodonChooser,
    CodonTable,
    add_codon_table,
    codon_frequency,
    compromise_codon_table,
    get_codon_table,
    parse_codon_json,
    read_codon_json,
    write_codon_json,
)


def _weights(table):
    return {
        codon.triplet: codon.weight
        for amino_acid in table.amino_acids
        for codon in amino_acid.codons
    }


def _lysine_table(aaa, aag):
    return CodonTable(
        ["ATG"],
        ["TAA"],
        [AminoAcid("K", [Codon("AAA", aaa), Codon("AAG", aag)])],
    )


def test_codon_frequency_every_codon_once_then_twice():
    codon_string = "".join(get_codon_table(11).translation_table())
    assert len(codon_string) == 64 * 3

    frequencies = codon_frequency(codon_string)
    assert len(frequencies) == 64
    assert set(frequencies.values()) == {1}

    doubled = codon_frequency(codon_string + codon_string)
    assert len(doubled) == 64
    assert set(doubled.values()) == {2}


def test_codon_frequency_ignores_trailing_partial_codon():
    assert codon_frequency("ATGATGAA") == {"ATG": 2}


def test_table_11_translation_table():
    translation = get_codon_table(11).translation_table()
    assert len(translation) == 64
    assert translation["ATG"] == "M"
    assert translation["TAA"] == "*"
    assert translation["TGG"] == "W"


def test_table_11_start_and_stop_codons():
    table = get_codon_table(11)
    assert table.start_codons == ["TTG", "CTG", "ATT", "ATC", "ATA", "ATG", "GTG"]
    assert table.stop_codons == ["TAA", "TAG", "TGA"]


def test_unknown_table_number_raises():
    with pytest.raises(KeyError):
        get_codon_table(7)


def test_get_codon_table_returns_independent_copies():
    get_codon_table(1).optimize_table("ATGATG")
    assert _weights(get_codon_table(1))["ATG"] == 1


def test_is_empty():
    assert CodonTable().is_empty() is True
    assert get_codon_table(1).is_empty() is False


def test_optimize_table_weights_by_frequency():
    table = get_codon_table(11)
    result = table.optimize_table("atgatgaaa")
    weights = _weights(result)
    assert weights["ATG"] == 2
    assert weights["AAA"] == 1
    assert weights["AAG"] == 0
    assert _weights(table)["ATG"] == 2


def test_chooser_leaves_out_rare_codons():
    chooser = _lysine_table(95, 5).chooser()["K"]
    rng = random.Random(0)
    picks = {chooser.pick(rng) for _ in range(200)}
    assert picks == {"AAA"}


def test_chooser_picks_all_common_codons():
    chooser = _lysine_table(50, 50).chooser()["K"]
    rng = random.Random(1)
    picks = {chooser.pick(rng) for _ in range(200)}
    assert picks == {"AAA", "AAG"}


def test_chooser_same_seed_same_picks():
    chooser = _lysine_table(30, 70).chooser()["K"]
    first = [chooser.pick(random.Random(10)) for _ in range(5)]
    second = [chooser.pick(random.Random(10)) for _ in range(5)]
    assert first == second


def test_chooser_error_when_no_weight():
    with pytest.raises(ChooserError):
        _lysine_table(0, 0).chooser()


def test_codon_chooser_without_choices_raises():
    with pytest.raises(ChooserError):
        CodonChooser([])


def test_parse_codon_json():
    text = json.dumps(
        {
            "start_codons": ["ATG"],
            "stop_codons": ["TAA"],
            "amino_acids": [
                {"letter": "K", "codons": [{"triplet": "AAA", "weight": 28327}]}
            ],
        }
    )
    table = parse_codon_json(text)
    assert table.amino_acids[0].codons[0].weight == 28327
    assert table.amino_acids[0].letter == "K"
    assert table.start_codons == ["ATG"]


def test_write_and_read_codon_json_round_trip(tmp_path):
    table = get_codon_table(11).optimize_table("ATGGCTAGCAAAGGAGAA")
    path = tmp_path / "codon_test.json"
    write_codon_json(table, path)
    assert read_codon_json(path) == table


def test_compromise_cut_off_too_low():
    with pytest.raises(ValueError):
        compromise_codon_table(get_codon_table(11), get_codon_table(11), -1.0)


def test_compromise_cut_off_too_high():
    with pytest.raises(ValueError):
        compromise_codon_table(get_codon_table(11), get_codon_table(11), 10.0)


def test_compromise_of_equal_tables():
    table = _lysine_table(1, 1)
    result = compromise_codon_table(table, table, 0.1)
    assert _weights(result) == {"AAA": 5000, "AAG": 5000}
    assert result.start_codons == ["ATG"]
    assert result.stop_codons == ["TAA"]


def test_compromise_zeroes_codons_below_cut_off():
    first = _lysine_table(1, 1)
    second = _lysine_table(1, 0)
    result = compromise_codon_table(first, second, 0.1)
    assert _weights(result)["AAG"] == 0


def test_add_codon_table_sums_weights():
    first = get_codon_table(11).optimize_table("ATGGGC")
    second = get_codon_table(11).optimize_table("ATGATGGGC")
    result = add_codon_table(first, second)
    weights = _weights(result)
    assert weights["ATG"] == 3
    assert weights["GGC"] == 2
    assert weights["AAA"] == 0
    assert result.start_codons == first.start_codons
    assert len(weights) == 64