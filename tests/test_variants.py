import pytest

from polybio.variants import all_variants_iupac


def test_iupac_n():
    assert sorted(all_variants_iupac("ATN")) == sorted(["ATG", "ATA", "ATT", "ATC"])


def test_iupac_order_follows_code_order():
    assert all_variants_iupac("ATN") == ["ATG", "ATA", "ATT", "ATC"]


def test_iupac_error():
    with pytest.raises(ValueError, match="X is not a supported IUPAC character"):
        all_variants_iupac("ATX")


def test_iupac_error_mendel():
    with pytest.raises(ValueError):
        all_variants_iupac("ATGGARAAYGAYGARXYZ")


def test_mendel_variants():
    variants = all_variants_iupac("ATGGARAAYGAYGARCTN")
    assert len(variants) == 64
    assert len(set(variants)) == 64
    assert variants[0] == "ATGGAGAATGATGAGCTG"
    assert variants[1] == "ATGGAGAATGATGAGCTA"
    assert variants[2] == "ATGGAGAATGATGAGCTT"
    assert variants[3] == "ATGGAGAATGATGAGCTC"
    assert variants[4] == "ATGGAGAATGATGAACTG"
    assert variants[8] == "ATGGAGAATGACGAGCTG"
    assert variants[16] == "ATGGAGAACGATGAGCTG"
    assert variants[32] == "ATGGAAAATGATGAGCTG"
    assert variants[-1] == "ATGGAAAACGACGAACTC"


def test_two_position_product():
    assert all_variants_iupac("RY") == ["GT", "GC", "AT", "AC"]


def test_lowercase_input():
    assert all_variants_iupac("aw") == ["AA", "AT"]


def test_unambiguous_sequence_has_single_variant():
    assert all_variants_iupac("GATTACA") == ["GATTACA"]


def test_empty_sequence():
    assert all_variants_iupac("") == [""]