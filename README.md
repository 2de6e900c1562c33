# exerkit

A handful of small, self-contained tools:

- **Huffman compression** (`exerkit.huffman`): compresses text into a format
  whose header holds the character frequency table. The code tree is rebuilt
  from that table when the data is decompressed.
- **Huffman with a stored tree** (`exerkit.treecodec`): a second format that
  serializes the code tree itself rather than the frequencies.
- **Binary search tree** (`exerkit.bst`): `Tree` with insertion (duplicates
  are ignored), removal, popping the greatest element and in-order iteration.
- **Numeric and text helpers** (`exerkit.basics`): Celsius to Fahrenheit,
  Fibonacci sequences, the largest value of a sequence, brute-force and
  Miller–Rabin primality tests, prime filtering and palindrome checks.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

Install with `pip install .[test]` to get the test dependencies, then run
`pytest`.

## Library use

```python
from exerkit import huffman, treecodec
from exerkit.bst import Tree
from exerkit.basics import fibonacci, is_prime_probabilistic, is_palindrome

packed = huffman.compress("abracadabra")
assert huffman.decompress(packed) == "abracadabra"

blob = treecodec.compress("hello")
assert treecodec.decompress(blob) == "hello"

tree = Tree(6)
for value in (2, 3, 5, 9, 12, 1):
    tree.add(value)
print(tree.pop_greatest())      # 12
tree.remove(6)
print(list(tree))               # [1, 2, 3, 5, 9]

print(fibonacci(10))            # [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
print(is_prime_probabilistic(32416190071))
print(is_palindrome("Ame a ema"))   # True
```

Working on files (read and written as UTF-8):

```python
huffman.compress_file("entrada.txt", "compactado.huff")
huffman.decompress_file("compactado.huff", "descompactado.txt")
```

The lower-level pieces are public too: `huffman.count_frequencies`,
`huffman.build_tree` (returning `Leaf` and `Node` objects),
`huffman.generate_codes` and `huffman.pack_bits`; and in `treecodec`,
`serialize_tree`, `deserialize_tree`, `encode_bits`, `bytes_to_bits` and
`decode_bits`. Malformed compressed data raises `ValueError`.

## Commands

```
exerkit-basics
exerkit-bst
exerkit-huffman compress [SOURCE] [DESTINATION]
exerkit-huffman decompress [SOURCE] [DESTINATION]
exerkit-treecodec [SOURCE] [COMPRESSED] [RESTORED]
```

- `exerkit-basics` and `exerkit-bst` print a short demonstration.
- `exerkit-huffman compress` defaults to `entrada.txt` → `compactado.huff`;
  `exerkit-huffman decompress` defaults to `compactado.huff` →
  `descompactado.txt`.
- `exerkit-treecodec` compresses `SOURCE` (default `input.txt`) into
  `COMPRESSED` (default `compactado.bin`) and then decompresses that into
  `RESTORED` (default `descompactado.txt`).

The file commands exit with status 1 and a message on standard error if a file
cannot be read or the data is malformed.

## Limitations

- Both formats compress text only, not arbitrary binary files, and neither
  can compress an empty string: building the code tree raises `ValueError`.
- `exerkit.treecodec` keeps only the low byte of each character's code point,
  so text outside Latin-1 does not come back unchanged. A text made of a single
  distinct character gets an empty code and decompresses to an empty string.
  Use `exerkit.huffman` when either matters.
- `Tree` is not self-balancing.