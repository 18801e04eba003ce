# cryptolab

A small teaching toolkit for classical and modern ciphers. It is pure Python
and needs no third-party packages.

It contains:

- **AES-128 in CBC mode** (`cryptolab.aes`). This covers the key schedule
  (`cryptolab.keyschedule`), the field arithmetic and lookup tables
  (`cryptolab.tables`), and block encryption and decryption.
- **PKCS#7 padding** and a demonstration command (`cryptolab.aes_demo`).
- **A Caesar cipher** (`cryptolab.caesar`). It shifts the ASCII letters a–z
  and A–Z and leaves every other character as it is.
- **Letter-frequency analysis** (`cryptolab.frequency`). It counts how often
  each ASCII letter occurs, ignoring case. It then sets the most common letters
  beside the most frequent letters of French (`e`, `s`, `a`, `n`).

The AES code is for study. For real data, use a maintained cryptography
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool reads its input from standard input. Its prompts and messages are in
French.

```
cryptolab-aes
```

This command reads one line of text and keeps at most its first 127 bytes. It
adds PKCS#7 padding and encrypts the result with AES-128-CBC, using a fixed
demonstration key (`DEMO_KEY`) and IV (`DEMO_IV`). It prints the ciphertext as
hexadecimal bytes. It then decrypts the ciphertext, removes the padding and
prints the text it gets back. If there is no input, it prints an error and
exits with status 1.

```
cryptolab-caesar
```

This command reads a line of text and then a key, which is the shift. It asks
for the key again until it gets a whole number from 1 to 25. Next it reads a
choice: `c` to encrypt or `d` to decrypt, in either case. It prints the result
with no newline after it. For any other choice it prints nothing.

```
cryptolab-frequency
```

This command reads one line of text and prints three things:

1. Each distinct letter, in the order the letters first appear, with its count
   and its share of all the letters in the line.
2. The same list, sorted by count from highest to lowest. Letters with equal
   counts keep their order.
3. The top letters, up to four of them, each paired with `e`, `s`, `a` and `n`
   in turn.

An empty line produces no output beyond the prompt.

## Library use

### AES-128-CBC

```python
from cryptolab.aes import encrypt_cbc, decrypt_cbc, CBCEncryptor, CBCDecryptor
from cryptolab.aes_demo import add_padding, remove_padding

key = bytes(range(16))          # made-up demonstration key
iv = bytes(16)

ciphertext = encrypt_cbc(key, iv, add_padding(b"attack at dawn"))
plaintext = remove_padding(decrypt_cbc(key, iv, ciphertext))

# Block by block, with the chaining state kept between calls:
enc = CBCEncryptor(key, iv)
first = enc.encrypt_block(b"sixteen byte blk")
dec = CBCDecryptor(key, iv)
assert dec.decrypt_block(first) == b"sixteen byte blk"
```

- The key and the IV must be exactly 16 bytes. Each block must be exactly 16
  bytes.
- `encrypt_cbc` and `decrypt_cbc` need data whose length is a multiple of 16.
  Other lengths raise `ValueError`. Text strings raise `TypeError`.
- `add_padding` also accepts a `str`, which it encodes as UTF-8. When the
  input is already a whole number of blocks, it adds one full block of
  padding.
- `remove_padding` returns its input unchanged when the padding is not valid.
  It does not raise an error.

The key schedule and the field arithmetic are available too:

```python
from cryptolab.keyschedule import expand_key, decryption_key_schedule
from cryptolab.tables import xtime, gf_multiply, round_constants, SBOX, INV_SBOX

len(expand_key(bytes(range(16))))   # 44 round-key words
gf_multiply(0x57, 0x83)             # 0xc1
round_constants(4)                  # (1, 2, 4, 8)
```

`decryption_key_schedule` returns the round keys in reverse order, with
InvMixColumns applied to every round key except the first and the last. This
is the form the equivalent inverse cipher uses.

### Caesar cipher

```python
from cryptolab.caesar import encrypt, decrypt

encrypt("Hello, World", 3)   # 'Khoor, Zruog'
decrypt("Khoor, Zruog", 3)   # 'Hello, World'
```

The shift must be an integer from 0 to 25. Any other value raises
`ValueError`.

### Frequency analysis

```python
from cryptolab.frequency import analyse, count_occurrences

count_occurrences("Banana", "a")   # 3
for stat in analyse("Banana"):
    print(stat.symbol, stat.occurrences, stat.probability)
```

`analyse` returns a list of `SymbolStat` objects, one for each distinct ASCII
letter, in order of first appearance. Each object holds the lower-case
letter, its count and its probability. The probability is the count divided
by the number of letters in the text. `count_occurrences` lower-cases the
text before it compares, so pass it a lower-case letter.

## What it does not do

- AES supports 128-bit keys and CBC mode only. There is no AES-192 or AES-256
  and no other mode of operation.
- Nothing reads or writes files. The commands work on a single line from
  standard input.
- The AES command always uses its built-in demonstration key and IV. It
  cannot be given a key.
- The frequency analysis reports the counts and pairs the top letters with
  the reference letters. It does not work out a shift or decrypt anything.