"""AES-128 key expansion for encryption and for the equivalent inverse cipher."""

from __future__ import annotations

from .tables import RCON, SBOX, TD0, TD1, TD2, TD3

KEY_SIZE = 16
ROUNDS = 10
WORDS_PER_ROUND = 4
SCHEDULE_LENGTH = WORDS_PER_ROUND * (ROUNDS + 1)


def _key_bytes(key: bytes | bytearray | memoryview) -> bytes:
    if isinstance(key, str) or not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError(f"key must be bytes-like, not {type(key).__name__}")
    data = bytes(key)
    if len(data) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes long, got {len(data)}")
    return data


def _sub_rot_word(word: int) -> int:
    # RotWord followed by SubWord.
    return (
        (SBOX[(word >> 16) & 0xFF] << 24)
        | (SBOX[(word >> 8) & 0xFF] << 16)
        | (SBOX[word & 0xFF] << 8)
        | SBOX[(word >> 24) & 0xFF]
    )


def _inverse_mix_column(word: int) -> int:
    # TD tables are built over the inverse S-box, so index them through SBOX
    # to apply InvMixColumns alone.
    return (
        TD0[SBOX[(word >> 24) & 0xFF]]
        ^ TD1[SBOX[(word >> 16) & 0xFF]]
        ^ TD2[SBOX[(word >> 8) & 0xFF]]
        ^ TD3[SBOX[word & 0xFF]]
    )


def expand_key(key: bytes | bytearray | memoryview) -> tuple[int, ...]:
    """Expand a 16-byte key into the 44 big-endian round-key words."""
    data = _key_bytes(key)
    words = [int.from_bytes(data[i:i + 4], "big") for i in range(0, KEY_SIZE, 4)]
    for rcon in RCON:
        first = words[-4] ^ _sub_rot_word(words[-1]) ^ rcon
        second = words[-3] ^ first
        third = words[-2] ^ second
        fourth = words[-1] ^ third
        words.extend((first, second, third, fourth))
    return tuple(words)


def decryption_key_schedule(key: bytes | bytearray | memoryview) -> tuple[int, ...]:
    """Return the round keys for decryption.

    The rounds are taken in reverse order, and InvMixColumns is applied to
    every round key except the first and the last.
    """
    schedule = expand_key(key)
    rounds = [
        schedule[start:start + WORDS_PER_ROUND]
        for start in range(0, SCHEDULE_LENGTH, WORDS_PER_ROUND)
    ]
    rounds.reverse()
    result: list[int] = list(rounds[0])
    for round_key in rounds[1:-1]:
        result.extend(_inverse_mix_column(word) for word in round_key)
    result.extend(rounds[-1])
    return tuple(result)