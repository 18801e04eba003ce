import io

import pytest

from cryptolab.aes import decrypt_cbc, encrypt_cbc
from cryptolab.aes_demo import DEMO_IV, DEMO_KEY, add_padding, main, remove_padding


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def _hex_bytes(output):
    hex_part = output.split("Encrypted text (hex): ", 1)[1].split("\n", 1)[0]
    return bytes.fromhex(hex_part)


def test_padding_of_empty_input_is_full_block():
    assert add_padding(b"") == bytes([16]) * 16


def test_padding_short_input():
    assert add_padding(b"abc") == b"abc" + bytes([13]) * 13


def test_padding_aligned_input_adds_block():
    data = b"0123456789abcdef"
    padded = add_padding(data)
    assert len(padded) == 32
    assert padded[:16] == data
    assert remove_padding(padded) == data


def test_padding_accepts_text():
    assert add_padding("abc") == add_padding(b"abc")


@pytest.mark.parametrize("length", [0, 1, 7, 15, 16, 17, 40])
def test_padding_round_trip(length):
    data = bytes(range(65, 65 + length % 26)) * (length // 26 + 1)
    data = data[:length]
    padded = add_padding(data)
    assert len(padded) % 16 == 0
    assert len(padded) > len(data)
    assert remove_padding(padded) == data


def test_remove_padding_empty():
    assert remove_padding(b"") == b""


@pytest.mark.parametrize(
    "data",
    [
        b"abcdefghijklmno\x00",
        b"abcdefghijklmno\x11",
        b"abcdefghijklm\x03\x02\x03",
        b"\x05\x05",
    ],
)
def test_remove_padding_invalid_returns_unchanged(data):
    assert remove_padding(data) == data


def test_padding_type_errors():
    with pytest.raises(TypeError):
        add_padding(123)
    with pytest.raises(TypeError):
        remove_padding("abc")


def test_main_round_trip(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "hello\n")
    assert code == 0
    assert "Entrez le texte à chiffrer : " in out
    assert "Decrypted text: hello\n" in out


def test_main_ciphertext_matches_library(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "hello\n")
    cipher = _hex_bytes(out)
    assert cipher == encrypt_cbc(DEMO_KEY, DEMO_IV, add_padding(b"hello"))
    assert remove_padding(decrypt_cbc(DEMO_KEY, DEMO_IV, cipher)) == b"hello"


def test_main_hex_is_uppercase_pairs(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "0123456789abcdef\n")
    hex_part = out.split("Encrypted text (hex): ", 1)[1].split("\n", 1)[0]
    pairs = hex_part.split()
    assert len(pairs) == 32
    assert all(len(pair) == 2 and pair == pair.upper() for pair in pairs)


def test_main_empty_line(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "\n")
    assert code == 0
    assert len(_hex_bytes(out)) == 16
    assert "Decrypted text: \n" in out


def test_main_truncates_long_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "a" * 200 + "\n")
    assert code == 0
    assert f"Decrypted text: {'a' * 127}\n" in out


def test_main_read_error(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 1
    assert "Erreur de lecture" in out