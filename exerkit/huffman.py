"""Huffman compression of text with a frequency-table header.

File layout (all integers big-endian):

* ``u16`` number of distinct characters ``n``
* ``u32`` number of characters in the uncompressed text ``t``
* ``n`` entries of ``u32`` code point followed by ``u32`` frequency
* the Huffman-coded bit stream, most significant bit first, zero padded
"""

from __future__ import annotations

import argparse
import heapq
import struct
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from itertools import count
from pathlib import Path
from typing import Union

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFF_FFFF
_HEADER = struct.Struct(">HI")
_ENTRY = struct.Struct(">II")


@dataclass(frozen=True)
class Leaf:
    """A tree leaf holding one character and its frequency."""

    char: str
    freq: int


@dataclass(frozen=True)
class Node:
    """An inner tree node; its frequency is the sum of its children's."""

    freq: int
    left: HuffmanTree
    right: HuffmanTree


HuffmanTree = Union[Leaf, Node]


def count_frequencies(text: str) -> dict[str, int]:
    """Count each character of ``text``, keyed in order of first appearance."""
    return dict(Counter(text))


def build_tree(frequencies: Mapping[str, int]) -> HuffmanTree:
    """Build a Huffman tree; the two lightest subtrees merge, lightest on the left.

    Ties are broken by insertion order, so the same mapping always yields the same tree.
    """
    if not frequencies:
        raise ValueError("cannot build a Huffman tree without any characters")
    sequence = count()
    heap: list[tuple[int, int, HuffmanTree]] = [
        (freq, next(sequence), Leaf(char, freq)) for char, freq in frequencies.items()
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_freq, _, left = heapq.heappop(heap)
        right_freq, _, right = heapq.heappop(heap)
        total = left_freq + right_freq
        heapq.heappush(heap, (total, next(sequence), Node(total, left, right)))
    return heap[0][2]


def generate_codes(tree: HuffmanTree) -> dict[str, tuple[bool, ...]]:
    """Map every character to its code: ``False`` for left, ``True`` for right."""
    codes: dict[str, tuple[bool, ...]] = {}
    pending: list[tuple[HuffmanTree, tuple[bool, ...]]] = [(tree, ())]
    while pending:
        node, prefix = pending.pop()
        if isinstance(node, Leaf):
            codes[node.char] = prefix
        else:
            pending.append((node.right, prefix + (True,)))
            pending.append((node.left, prefix + (False,)))
    return codes


def pack_bits(bits: Iterable[bool]) -> bytes:
    """Pack bits into bytes, most significant bit first, padding the last byte with zeros."""
    out = bytearray()
    byte = 0
    filled = 0
    for bit in bits:
        if bit:
            byte |= 0x80 >> filled
        filled += 1
        if filled == 8:
            out.append(byte)
            byte = 0
            filled = 0
    if filled:
        out.append(byte)
    return bytes(out)


def _unpack_bits(data: bytes) -> Iterator[bool]:
    for byte in data:
        for shift in range(7, -1, -1):
            yield bool((byte >> shift) & 1)


def compress(text: str) -> bytes:
    """Compress ``text`` into the header-plus-bit-stream format."""
    frequencies = count_frequencies(text)
    tree = build_tree(frequencies)
    codes = generate_codes(tree)

    if len(frequencies) > _U16_MAX:
        raise ValueError("too many distinct characters for the header")
    if len(text) > _U32_MAX:
        raise ValueError("text too long for the header")

    parts = [_HEADER.pack(len(frequencies), len(text))]
    parts.extend(_ENTRY.pack(ord(char), freq) for char, freq in frequencies.items())
    parts.append(pack_bits(bit for char in text for bit in codes[char]))
    return b"".join(parts)


def decompress(data: bytes) -> str:
    """Restore the text held in ``data``; malformed input raises ``ValueError``."""
    try:
        distinct, total = _HEADER.unpack_from(data, 0)
    except struct.error as exc:
        raise ValueError("truncated header") from exc
    offset = _HEADER.size

    frequencies: dict[str, int] = {}
    for _ in range(distinct):
        try:
            code_point, freq = _ENTRY.unpack_from(data, offset)
        except struct.error as exc:
            raise ValueError("truncated frequency table") from exc
        offset += _ENTRY.size
        if code_point > 0x10FFFF or 0xD800 <= code_point <= 0xDFFF:
            raise ValueError(f"invalid character code {code_point:#x}")
        frequencies[chr(code_point)] = freq

    if total == 0:
        return ""
    root = build_tree(frequencies)
    if isinstance(root, Leaf):
        return root.char * total

    result: list[str] = []
    node: HuffmanTree = root
    for bit in _unpack_bits(data[offset:]):
        assert isinstance(node, Node)
        node = node.right if bit else node.left
        if isinstance(node, Leaf):
            result.append(node.char)
            if len(result) == total:
                break
            node = root
    if len(result) < total:
        raise ValueError("bit stream ends before all characters were decoded")
    return "".join(result)


def compress_file(source: str | Path, destination: str | Path) -> None:
    """Compress the UTF-8 text file ``source`` into ``destination``."""
    text = Path(source).read_bytes().decode("utf-8")
    Path(destination).write_bytes(compress(text))


def decompress_file(source: str | Path, destination: str | Path) -> None:
    """Decompress ``source`` and write the text to ``destination`` as UTF-8."""
    text = decompress(Path(source).read_bytes())
    Path(destination).write_bytes(text.encode("utf-8"))


def main(argv: Sequence[str] | None = None) -> int:
    """Compress or decompress a file from the command line."""
    parser = argparse.ArgumentParser(description="Huffman compression of text files.")
    commands = parser.add_subparsers(dest="command", required=True)

    packer = commands.add_parser("compress", help="compress a text file")
    packer.add_argument("source", nargs="?", default="entrada.txt")
    packer.add_argument("destination", nargs="?", default="compactado.huff")

    unpacker = commands.add_parser("decompress", help="decompress a file")
    unpacker.add_argument("source", nargs="?", default="compactado.huff")
    unpacker.add_argument("destination", nargs="?", default="descompactado.txt")

    args = parser.parse_args(argv)

    if args.command == "compress":
        try:
            compress_file(args.source, args.destination)
        except (OSError, ValueError) as exc:
            print(f"Erro ao compactar: {exc}", file=sys.stderr)
            return 1
        print("Arquivo compactado com sucesso.")
        return 0

    try:
        decompress_file(args.source, args.destination)
    except (OSError, ValueError) as exc:
        print(f"Erro ao descompactar: {exc}", file=sys.stderr)
        return 1
    print("Arquivo descompactado com sucesso.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())