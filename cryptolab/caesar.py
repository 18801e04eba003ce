"""Caesar shift cipher over the ASCII letters, with an interactive command."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator

ALPHABET_SIZE = 26

# The input buffer holds 10000 characters including the terminator.
_MAX_INPUT = 9999


def _check_shift(shift: int) -> None:
    if not isinstance(shift, int) or isinstance(shift, bool):
        raise TypeError(f"shift must be an int, not {type(shift).__name__}")
    if not 0 <= shift < ALPHABET_SIZE:
        raise ValueError(f"shift must be in range 0..{ALPHABET_SIZE - 1}, got {shift}")


def _shift_char(char: str, shift: int) -> str:
    if "a" <= char <= "z":
        base = ord("a")
    elif "A" <= char <= "Z":
        base = ord("A")
    else:
        return char
    return chr(base + (ord(char) - base + shift) % ALPHABET_SIZE)


def encrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter forward by ``shift``, wrapping within its case."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    _check_shift(shift)
    return "".join(_shift_char(char, shift) for char in text)


def decrypt(text: str, shift: int) -> str:
    """Shift every ASCII letter back by ``shift``, wrapping within its case."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    _check_shift(shift)
    return "".join(_shift_char(char, -shift) for char in text)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Read a text, a key and a choice, then print the encrypted or decrypted text."""
    parser = argparse.ArgumentParser(
        prog="cryptolab-caesar",
        description="Encrypt or decrypt a line of text with a Caesar shift.",
    )
    parser.parse_args(argv)

    print("Saisir le code a crypter/decrypter : ", end="", flush=True)
    line = sys.stdin.readline()
    text = line[:_MAX_INPUT].split("\n", 1)[0]

    tokens = _tokens(sys.stdin)
    while True:
        print("Saisir la cle : ", end="", flush=True)
        token = next(tokens, None)
        if token is None:
            return 1
        try:
            shift = int(token)
        except ValueError:
            continue
        if 0 < shift < ALPHABET_SIZE:
            break

    print("Choisir c pour crypter d pour decrypter : ", end="", flush=True)
    choice = next(tokens, None)
    if choice is None:
        return 0
    option = choice[0].lower()
    if option == "c":
        print(encrypt(text, shift), end="")
    elif option == "d":
        print(decrypt(text, shift), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())