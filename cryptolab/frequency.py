"""Letter frequency analysis of a text, as a first step of cryptanalysis."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

# Most frequent letters of French text, compared with the top symbols.
REFERENCE_LETTERS = ("e", "s", "a", "n")


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def _ascii_lower(char: str) -> str:
    return char.lower() if "A" <= char <= "Z" else char


@dataclass(frozen=True)
class SymbolStat:
    """How often one letter occurs in a text."""

    symbol: str
    occurrences: int
    probability: float


def count_occurrences(text: str, char: str) -> int:
    """Count the characters of ``text`` equal to ``char`` once lower-cased."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError("char must be a single character")
    return sum(1 for current in text if _ascii_lower(current) == char)


def analyse(text: str) -> list[SymbolStat]:
    """Return letter statistics in order of first appearance, case-insensitively.

    Probabilities are relative to the number of letters in the text.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    letters = [_ascii_lower(char) for char in text if _is_ascii_letter(char)]
    total = len(letters)
    seen: dict[str, None] = dict.fromkeys(letters)
    stats = []
    for symbol in seen:
        occurrences = count_occurrences(text, symbol)
        stats.append(SymbolStat(symbol, occurrences, occurrences / total))
    return stats


def main(argv: list[str] | None = None) -> int:
    """Read one line and print its letter frequencies."""
    parser = argparse.ArgumentParser(
        prog="cryptolab-frequency",
        description="Print the letter frequencies of a line of text.",
    )
    parser.parse_args(argv)

    print("Entrez votre texte :")
    text = sys.stdin.readline().split("\n", 1)[0]
    if not text:
        return 0

    stats = analyse(text)
    for index, stat in enumerate(stats):
        print(
            f"Symbole {index} : {stat.symbol} NbOccurence: {stat.occurrences} "
            f"Proba: {stat.probability:.4f} "
        )

    ranked = sorted(stats, key=lambda stat: stat.occurrences, reverse=True)
    print("\nSymboles triés par fréquence décroissante :")
    for index, stat in enumerate(ranked):
        print(
            f"Symbole {index} : {stat.symbol} NbOccurence: {stat.occurrences} "
            f"Proba: {stat.probability:.4f}"
        )

    for index, (stat, reference) in enumerate(zip(ranked, REFERENCE_LETTERS)):
        print(
            f"\nSymbole {index} : {stat.symbol} Proba: {stat.probability:.4f} "
            f"Decalage avec {reference}",
            end="",
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())