import io

import pytest

from cryptolab.frequency import SymbolStat, analyse, count_occurrences, main


def test_count_occurrences_is_case_insensitive():
    assert count_occurrences("aAbA", "a") == 3


def test_count_occurrences_absent_char():
    assert count_occurrences("hello", "z") == 0


def test_count_occurrences_rejects_long_char():
    with pytest.raises(ValueError):
        count_occurrences("abc", "ab")


def test_analyse_first_appearance_order():
    text = "Banana Split"
    symbols = [stat.symbol for stat in analyse(text)]
    expected = list(dict.fromkeys(c.lower() for c in text if c.isalpha()))
    assert symbols == expected


def test_analyse_occurrences_match_count():
    text = "Mississippi River"
    for stat in analyse(text):
        assert stat.occurrences == count_occurrences(text, stat.symbol)


def test_analyse_totals():
    text = "Hello, World! 42"
    stats = analyse(text)
    letters = sum(1 for c in text if c.isalpha())
    assert sum(stat.occurrences for stat in stats) == letters
    assert sum(stat.probability for stat in stats) == pytest.approx(1.0)


def test_analyse_symbols_are_unique_and_lowercase():
    stats = analyse("AaBbCcAB")
    symbols = [stat.symbol for stat in stats]
    assert len(symbols) == len(set(symbols))
    assert all(symbol.islower() for symbol in symbols)


def test_analyse_single_letter():
    assert analyse("zzz") == [SymbolStat("z", 3, 1.0)]


def test_analyse_without_letters_is_empty():
    assert analyse("123 !?") == []


def test_analyse_rejects_non_str():
    with pytest.raises(TypeError):
        analyse(b"abc")


def test_main_prints_sorted_symbols(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abbb\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    first, ranked = out.split("Symboles triés par fréquence décroissante :")
    assert first.index("Symbole 0 : a") < first.index("Symbole 1 : b")
    assert "Symbole 0 : b" in ranked
    assert "Decalage avec e" in ranked
    assert "Decalage avec s" in ranked
    assert "Decalage avec a" not in ranked


def test_main_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Entrez votre texte :\n"