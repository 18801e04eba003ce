"""Interactive demonstration: encrypt a line of text with AES-128-CBC and back."""

from __future__ import annotations

import argparse
import sys

from .aes import BLOCK_SIZE, decrypt_cbc, encrypt_cbc

DEMO_KEY = bytes(range(16))
DEMO_IV = bytes([161, 178, 195, 212, 229, 246, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16])

# The input buffer holds 128 bytes including the terminator.
_MAX_INPUT = 127


def add_padding(data: bytes | bytearray | memoryview | str) -> bytes:
    """Append PKCS#7 padding; a full block is added to aligned input."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like or str, not {type(data).__name__}")
    raw = bytes(data)
    needed = BLOCK_SIZE - len(raw) % BLOCK_SIZE
    return raw + bytes([needed]) * needed


def remove_padding(data: bytes | bytearray | memoryview) -> bytes:
    """Strip PKCS#7 padding; data with invalid padding is returned unchanged."""
    if isinstance(data, str) or not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
    raw = bytes(data)
    if not raw:
        return raw
    value = raw[-1]
    if value == 0 or value > BLOCK_SIZE or value > len(raw):
        return raw
    if any(byte != value for byte in raw[-value:]):
        return raw
    return raw[:-value]


def main(argv: list[str] | None = None) -> int:
    """Read one line, print its ciphertext in hex and the decrypted text."""
    parser = argparse.ArgumentParser(
        prog="cryptolab-aes",
        description="Encrypt and decrypt a line of text with AES-128-CBC.",
    )
    parser.parse_args(argv)

    print("Entrez le texte à chiffrer : ", end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        print("Erreur de lecture")
        return 1
    plaintext = line.encode("utf-8")[:_MAX_INPUT].split(b"\n", 1)[0]

    padded = add_padding(plaintext)
    encrypted = encrypt_cbc(DEMO_KEY, DEMO_IV, padded)
    print("Encrypted text (hex): " + "".join(f"{byte:02X} " for byte in encrypted))

    decrypted = remove_padding(decrypt_cbc(DEMO_KEY, DEMO_IV, encrypted))
    text = decrypted.split(b"\0", 1)[0].decode("utf-8", errors="replace")
    print(f"Decrypted text: {text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())