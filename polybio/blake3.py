"""BLAKE3 hashing with the default 32-byte output."""

from __future__ import annotations

_MASK = 0xFFFFFFFF

_IV = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_MSG_PERMUTATION = (2, 6, 3, 10, 7, 0, 4, 13, 1, 11, 12, 5, 9, 14, 15, 8)

_CHUNK_START = 1 << 0
_CHUNK_END = 1 << 1
_PARENT = 1 << 2
_ROOT = 1 << 3

_BLOCK_LEN = 64
_CHUNK_LEN = 1024
_OUT_LEN = 32

# Column then diagonal mixing, as index quadruples into the state.
_G_INDICES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotr(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (32 - shift))) & _MASK


def _g(state: list[int], a: int, b: int, c: int, d: int, mx: int, my: int) -> None:
    state[a] = (state[a] + state[b] + mx) & _MASK
    state[d] = _rotr(state[d] ^ state[a], 16)
    state[c] = (state[c] + state[d]) & _MASK
    state[b] = _rotr(state[b] ^ state[c], 12)
    state[a] = (state[a] + state[b] + my) & _MASK
    state[d] = _rotr(state[d] ^ state[a], 8)
    state[c] = (state[c] + state[d]) & _MASK
    state[b] = _rotr(state[b] ^ state[c], 7)


def _round(state: list[int], message: list[int]) -> None:
    for number, (a, b, c, d) in enumerate(_G_INDICES):
        _g(state, a, b, c, d, message[2 * number], message[2 * number + 1])


def _compress(
    chaining_value: tuple[int, ...],
    block_words: list[int],
    counter: int,
    block_len: int,
    flags: int,
) -> list[int]:
    state = [
        *chaining_value,
        *_IV[:4],
        counter & _MASK,
        (counter >> 32) & _MASK,
        block_len,
        flags,
    ]
    message = list(block_words)
    for round_number in range(7):
        _round(state, message)
        if round_number < 6:
            message = [message[index] for index in _MSG_PERMUTATION]
    for index in range(8):
        state[index] ^= state[index + 8]
        state[index + 8] ^= chaining_value[index]
    return state


def _words(block: bytes) -> list[int]:
    padded = block.ljust(_BLOCK_LEN, b"\x00")
    return [int.from_bytes(padded[i : i + 4], "little") for i in range(0, _BLOCK_LEN, 4)]


class _Output:
    """The inputs of a final compression, kept until it is known whether it is the root."""

    __slots__ = ("chaining_value", "block_words", "counter", "block_len", "flags")

    def __init__(
        self,
        chaining_value: tuple[int, ...],
        block_words: list[int],
        counter: int,
        block_len: int,
        flags: int,
    ) -> None:
        self.chaining_value = chaining_value
        self.block_words = block_words
        self.counter = counter
        self.block_len = block_len
        self.flags = flags

    def chaining(self) -> tuple[int, ...]:
        words = _compress(
            self.chaining_value, self.block_words, self.counter, self.block_len, self.flags
        )
        return tuple(words[:8])

    def root_bytes(self) -> bytes:
        words = _compress(
            self.chaining_value, self.block_words, 0, self.block_len, self.flags | _ROOT
        )
        return b"".join(word.to_bytes(4, "little") for word in words[:8])[:_OUT_LEN]


def _chunk_output(chunk: bytes, chunk_index: int) -> _Output:
    blocks = [chunk[i : i + _BLOCK_LEN] for i in range(0, len(chunk), _BLOCK_LEN)] or [b""]
    chaining_value = _IV
    for position, block in enumerate(blocks[:-1]):
        flags = _CHUNK_START if position == 0 else 0
        words = _compress(chaining_value, _words(block), chunk_index, _BLOCK_LEN, flags)
        chaining_value = tuple(words[:8])
    last = blocks[-1]
    flags = _CHUNK_END | (_CHUNK_START if len(blocks) == 1 else 0)
    return _Output(chaining_value, _words(last), chunk_index, len(last), flags)


def _subtree_output(chunks: list[bytes], first_index: int) -> _Output:
    if len(chunks) == 1:
        return _chunk_output(chunks[0], first_index)
    left_count = 1 << ((len(chunks) - 1).bit_length() - 1)
    left = _subtree_output(chunks[:left_count], first_index).chaining()
    right = _subtree_output(chunks[left_count:], first_index + left_count).chaining()
    return _Output(_IV, [*left, *right], 0, _BLOCK_LEN, _PARENT)


def blake3_digest(data: bytes | bytearray | memoryview) -> bytes:
    """Return the 32-byte BLAKE3 digest of the data."""
    raw = memoryview(data).tobytes()
    chunks = [raw[i : i + _CHUNK_LEN] for i in range(0, len(raw), _CHUNK_LEN)] or [b""]
    return _subtree_output(chunks, 0).root_bytes()


def blake3_hexdigest(data: bytes | bytearray | memoryview) -> str:
    """Return the BLAKE3 digest of the data as lower-case hexadecimal."""
    return blake3_digest(data).hex()