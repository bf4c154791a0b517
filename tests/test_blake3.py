import pytest

from polybio.blake3 import blake3_digest, blake3_hexdigest


def test_empty_input():
    assert (
        blake3_hexdigest(b"")
        == "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"
    )


def test_known_sequence_digest():
    assert (
        blake3_hexdigest(b"TTAGCCCAT")
        == "063ea37d1154351639f9a48546bdae62fd8a3c18f3d3d3061060c9a55352d967"
    )


def test_known_protein_digest():
    assert (
        blake3_hexdigest(b"MGC*")
        == "922ec11f5227ce77a42f07f565a7a1a479772b5cf3f1f6e93afc5ecbc0fd5955"
    )


@pytest.mark.parametrize("length", [0, 1, 63, 64, 65, 1023, 1024, 1025, 2048, 3000, 5121])
def test_digest_length_and_hex_agree(length):
    data = bytes(i % 251 for i in range(length))
    digest = blake3_digest(data)
    assert len(digest) == 32
    assert blake3_hexdigest(data) == digest.hex()


def test_deterministic_over_many_chunks():
    data = bytes(i % 251 for i in range(4500))
    assert blake3_digest(data) == blake3_digest(bytearray(data))
    assert blake3_digest(data) == blake3_digest(memoryview(data))


def test_boundary_lengths_differ():
    data = bytes(i % 251 for i in range(2049))
    digests = {blake3_digest(data[:n]) for n in (63, 64, 65, 1023, 1024, 1025, 2048, 2049)}
    assert len(digests) == 8


def test_single_byte_change_alters_digest():
    data = bytearray(b"A" * 1500)
    original = blake3_digest(data)
    data[1400] = ord("B")
    assert blake3_digest(data) != original
    assert blake3_digest(b"A" * 1500) == original


def test_rejects_text():
    with pytest.raises(TypeError):
        blake3_digest("ATGC")