"""AES-128 in cipher block chaining mode, one 16-byte block at a time."""

from __future__ import annotations

from collections.abc import Sequence

from .keyschedule import ROUNDS, WORDS_PER_ROUND, decryption_key_schedule, expand_key
from .tables import TD0, TD1, TD2, TD3, TD4, TE0, TE1, TE2, TE3, TE4

BLOCK_SIZE = 16

BytesLike = bytes | bytearray | memoryview


def _as_bytes(value: BytesLike, name: str, size: int) -> bytes:
    if isinstance(value, str) or not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like, not {type(value).__name__}")
    data = bytes(value)
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes long, got {len(data)}")
    return data


def _to_words(block: bytes) -> list[int]:
    return [int.from_bytes(block[i:i + 4], "big") for i in range(0, BLOCK_SIZE, 4)]


def _from_words(words: Sequence[int]) -> bytes:
    return b"".join(word.to_bytes(4, "big") for word in words)


def _rotate(words: list[int], shift: int) -> list[int]:
    return words[shift:] + words[:shift]


def _round_key(schedule: Sequence[int], index: int) -> Sequence[int]:
    start = index * WORDS_PER_ROUND
    return schedule[start:start + WORDS_PER_ROUND]


def _encrypt_words(state: list[int], schedule: Sequence[int]) -> list[int]:
    s = [word ^ key for word, key in zip(state, _round_key(schedule, 0))]
    for index in range(1, ROUNDS):
        s = [
            TE0[w0 >> 24]
            ^ TE1[(w1 >> 16) & 0xFF]
            ^ TE2[(w2 >> 8) & 0xFF]
            ^ TE3[w3 & 0xFF]
            ^ key
            for w0, w1, w2, w3, key in zip(
                s, _rotate(s, 1), _rotate(s, 2), _rotate(s, 3), _round_key(schedule, index)
            )
        ]
    return [
        (TE4[(w0 >> 24) & 0xFF] & 0xFF000000)
        ^ (TE4[(w1 >> 16) & 0xFF] & 0x00FF0000)
        ^ (TE4[(w2 >> 8) & 0xFF] & 0x0000FF00)
        ^ (TE4[w3 & 0xFF] & 0x000000FF)
        ^ key
        for w0, w1, w2, w3, key in zip(
            s, _rotate(s, 1), _rotate(s, 2), _rotate(s, 3), _round_key(schedule, ROUNDS)
        )
    ]


def _decrypt_words(state: list[int], schedule: Sequence[int]) -> list[int]:
    s = [word ^ key for word, key in zip(state, _round_key(schedule, 0))]
    for index in range(1, ROUNDS):
        s = [
            TD0[w0 >> 24]
            ^ TD1[(w1 >> 16) & 0xFF]
            ^ TD2[(w2 >> 8) & 0xFF]
            ^ TD3[w3 & 0xFF]
            ^ key
            for w0, w1, w2, w3, key in zip(
                s, _rotate(s, 3), _rotate(s, 2), _rotate(s, 1), _round_key(schedule, index)
            )
        ]
    return [
        (TD4[(w0 >> 24) & 0xFF] & 0xFF000000)
        ^ (TD4[(w1 >> 16) & 0xFF] & 0x00FF0000)
        ^ (TD4[(w2 >> 8) & 0xFF] & 0x0000FF00)
        ^ (TD4[w3 & 0xFF] & 0x000000FF)
        ^ key
        for w0, w1, w2, w3, key in zip(
            s, _rotate(s, 3), _rotate(s, 2), _rotate(s, 1), _round_key(schedule, ROUNDS)
        )
    ]


class CBCEncryptor:
    """Encrypts successive blocks, chaining each on the previous ciphertext."""

    def __init__(self, key: BytesLike, iv: BytesLike) -> None:
        self._schedule = expand_key(key)
        self._chain = _to_words(_as_bytes(iv, "iv", BLOCK_SIZE))

    def encrypt_block(self, block: BytesLike) -> bytes:
        """Encrypt one 16-byte block and return the ciphertext block."""
        words = _to_words(_as_bytes(block, "block", BLOCK_SIZE))
        mixed = [word ^ chain for word, chain in zip(words, self._chain)]
        result = _encrypt_words(mixed, self._schedule)
        self._chain = result
        return _from_words(result)


class CBCDecryptor:
    """Decrypts successive blocks produced by a matching CBCEncryptor."""

    def __init__(self, key: BytesLike, iv: BytesLike) -> None:
        self._schedule = decryption_key_schedule(key)
        self._chain = _to_words(_as_bytes(iv, "iv", BLOCK_SIZE))

    def decrypt_block(self, block: BytesLike) -> bytes:
        """Decrypt one 16-byte block and return the plaintext block."""
        words = _to_words(_as_bytes(block, "block", BLOCK_SIZE))
        result = _decrypt_words(words, self._schedule)
        plain = [word ^ chain for word, chain in zip(result, self._chain)]
        self._chain = words
        return _from_words(plain)


def _blocks(data: BytesLike) -> list[bytes]:
    if isinstance(data, str) or not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
    raw = bytes(data)
    if len(raw) % BLOCK_SIZE:
        raise ValueError(
            f"data length must be a multiple of {BLOCK_SIZE}, got {len(raw)}"
        )
    return [raw[i:i + BLOCK_SIZE] for i in range(0, len(raw), BLOCK_SIZE)]


def encrypt_cbc(key: BytesLike, iv: BytesLike, data: BytesLike) -> bytes:
    """Encrypt block-aligned data with AES-128-CBC."""
    encryptor = CBCEncryptor(key, iv)
    return b"".join(encryptor.encrypt_block(block) for block in _blocks(data))


def decrypt_cbc(key: BytesLike, iv: BytesLike, data: BytesLike) -> bytes:
    """Decrypt block-aligned data with AES-128-CBC."""
    decryptor = CBCDecryptor(key, iv)
    return b"".join(decryptor.decrypt_block(block) for block in _blocks(data))