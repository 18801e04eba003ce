"""Finite-field helpers and the lookup tables used by the AES-128 block cipher.

The tables are derived at import time from the field arithmetic instead of
being written out by hand. Each round table maps a byte to a 32-bit word,
with the most significant byte first.
"""

from __future__ import annotations

_REDUCING_POLYNOMIAL = 0x11B
_AFFINE_CONSTANT = 0x63


def _check_byte(value: int, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in range 0..255, got {value}")


def xtime(value: int) -> int:
    """Multiply a field element by x (that is, by 2) in GF(2^8)."""
    _check_byte(value, "value")
    value <<= 1
    if value & 0x100:
        value ^= _REDUCING_POLYNOMIAL
    return value


def gf_multiply(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo x^8 + x^4 + x^3 + x + 1."""
    _check_byte(a, "a")
    _check_byte(b, "b")
    product = 0
    while b:
        if b & 1:
            product ^= a
        a = xtime(a)
        b >>= 1
    return product


def round_constants(count: int) -> tuple[int, ...]:
    """Return the first ``count`` key-schedule round constants as bytes."""
    if not isinstance(count, int) or isinstance(count, bool):
        raise TypeError(f"count must be an int, not {type(count).__name__}")
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    constants = []
    value = 0x01
    for _ in range(count):
        constants.append(value)
        value = xtime(value)
    return tuple(constants)


def _inverse(value: int) -> int:
    # a^254 == a^-1 in GF(2^8); zero maps to zero by convention.
    result = 1
    base = value
    exponent = 254
    while exponent:
        if exponent & 1:
            result = gf_multiply(result, base)
        base = gf_multiply(base, base)
        exponent >>= 1
    return result if value else 0


def _rotl8(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (8 - shift))) & 0xFF


def _substitute(value: int) -> int:
    b = _inverse(value)
    return (
        b
        ^ _rotl8(b, 1)
        ^ _rotl8(b, 2)
        ^ _rotl8(b, 3)
        ^ _rotl8(b, 4)
        ^ _AFFINE_CONSTANT
    )


def _word(b0: int, b1: int, b2: int, b3: int) -> int:
    return (b0 << 24) | (b1 << 16) | (b2 << 8) | b3


def _rotr32(word: int, shift: int) -> int:
    return ((word >> shift) | (word << (32 - shift))) & 0xFFFFFFFF


def _rotated(table: tuple[int, ...], shift: int) -> tuple[int, ...]:
    return tuple(_rotr32(word, shift) for word in table)


SBOX: tuple[int, ...] = tuple(_substitute(x) for x in range(256))

_inverse_sbox = [0] * 256
for _index, _value in enumerate(SBOX):
    _inverse_sbox[_value] = _index
INV_SBOX: tuple[int, ...] = tuple(_inverse_sbox)
del _inverse_sbox, _index, _value

TE0: tuple[int, ...] = tuple(
    _word(gf_multiply(s, 2), s, s, gf_multiply(s, 3)) for s in SBOX
)
TE1: tuple[int, ...] = _rotated(TE0, 8)
TE2: tuple[int, ...] = _rotated(TE0, 16)
TE3: tuple[int, ...] = _rotated(TE0, 24)
TE4: tuple[int, ...] = tuple(_word(s, s, s, s) for s in SBOX)

TD0: tuple[int, ...] = tuple(
    _word(
        gf_multiply(s, 0x0E),
        gf_multiply(s, 0x09),
        gf_multiply(s, 0x0D),
        gf_multiply(s, 0x0B),
    )
    for s in INV_SBOX
)
TD1: tuple[int, ...] = _rotated(TD0, 8)
TD2: tuple[int, ...] = _rotated(TD0, 16)
TD3: tuple[int, ...] = _rotated(TD0, 24)
TD4: tuple[int, ...] = tuple(_word(s, s, s, s) for s in INV_SBOX)

RCON: tuple[int, ...] = tuple(c << 24 for c in round_constants(10))