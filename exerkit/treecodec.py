"""Huffman compression that stores the tree itself rather than a frequency table.

File layout (integers big-endian):

* ``u32`` length in bytes of the serialized tree
* ``u32`` number of meaningful bits in the coded stream
* the serialized tree: pre-order, ``0`` for an inner node, ``1`` then one byte for a leaf
* the coded bit stream, most significant bit first, zero padded

Each leaf keeps only the low byte of its character's code point. Text outside
Latin-1 therefore does not survive a round trip.
"""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from exerkit.huffman import (
    HuffmanTree,
    Leaf,
    Node,
    build_tree,
    count_frequencies,
    generate_codes,
    pack_bits,
)

_HEADER = struct.Struct(">II")
_U32_MAX = 0xFFFF_FFFF
_LEAF_TAG = 1
_NODE_TAG = 0


def serialize_tree(tree: HuffmanTree) -> bytes:
    """Serialize the tree shape in pre-order; frequencies are not kept."""
    out = bytearray()
    pending: list[HuffmanTree] = [tree]
    while pending:
        node = pending.pop()
        if isinstance(node, Leaf):
            out.append(_LEAF_TAG)
            out.append(ord(node.char) & 0xFF)
        else:
            out.append(_NODE_TAG)
            pending.append(node.right)
            pending.append(node.left)
    return bytes(out)


def deserialize_tree(data: bytes) -> HuffmanTree:
    """Rebuild a tree from its serialized form; every frequency comes back as 0.

    Any tag other than 1 denotes an inner node. Bytes after the tree are ignored.
    Truncated data raises ``ValueError``.
    """
    position = 0

    def read() -> HuffmanTree:
        nonlocal position
        if position >= len(data):
            raise ValueError("serialized tree is truncated")
        tag = data[position]
        position += 1
        if tag == _LEAF_TAG:
            if position >= len(data):
                raise ValueError("serialized tree is truncated")
            char = chr(data[position])
            position += 1
            return Leaf(char, 0)
        left = read()
        right = read()
        return Node(0, left, right)

    try:
        return read()
    except RecursionError as exc:
        raise ValueError("serialized tree is nested too deeply") from exc


def encode_bits(text: str, codebook: Mapping[str, Sequence[bool]]) -> list[bool]:
    """Concatenate the codes of the characters of ``text``; unknown characters are skipped."""
    return [bit for char in text for bit in codebook.get(char, ())]


def bytes_to_bits(data: bytes, bit_len: int) -> list[bool]:
    """Unpack at most ``bit_len`` bits from ``data``, most significant bit first."""
    bits = [bool((byte >> shift) & 1) for byte in data for shift in range(7, -1, -1)]
    return bits[:bit_len]


def decode_bits(tree: HuffmanTree, bits: Sequence[bool]) -> str:
    """Decode ``bits`` with ``tree``; a trailing incomplete code is dropped.

    A tree that is a single leaf consumes no bits, so it decodes nothing from an
    empty stream and rejects a non-empty one with ``ValueError``.
    """
    if isinstance(tree, Leaf):
        if bits:
            raise ValueError("a single-leaf tree cannot consume any bits")
        return ""
    result: list[str] = []
    node: HuffmanTree = tree
    for bit in bits:
        assert isinstance(node, Node)
        node = node.right if bit else node.left
        if isinstance(node, Leaf):
            result.append(node.char)
            node = tree
    return "".join(result)


def compress(text: str) -> bytes:
    """Compress ``text`` into the tree-plus-bit-stream format."""
    tree = build_tree(count_frequencies(text))
    bits = encode_bits(text, generate_codes(tree))
    tree_data = serialize_tree(tree)
    if len(bits) > _U32_MAX:
        raise ValueError("text too long for the header")
    return _HEADER.pack(len(tree_data), len(bits)) + tree_data + pack_bits(bits)


def decompress(data: bytes) -> str:
    """Restore the text held in ``data``; malformed input raises ``ValueError``."""
    try:
        tree_len, bit_len = _HEADER.unpack_from(data, 0)
    except struct.error as exc:
        raise ValueError("truncated header") from exc
    start = _HEADER.size
    tree_data = data[start : start + tree_len]
    if len(tree_data) < tree_len:
        raise ValueError("truncated tree")
    tree = deserialize_tree(tree_data)
    bits = bytes_to_bits(data[start + tree_len :], bit_len)
    return decode_bits(tree, bits)


def compress_file(source: str | Path, destination: str | Path) -> None:
    """Compress the UTF-8 text file ``source`` into ``destination``."""
    text = Path(source).read_bytes().decode("utf-8")
    Path(destination).write_bytes(compress(text))


def decompress_file(source: str | Path, destination: str | Path) -> None:
    """Decompress ``source`` and write the text to ``destination`` as UTF-8."""
    text = decompress(Path(source).read_bytes())
    Path(destination).write_bytes(text.encode("utf-8"))


def _run(steps: Iterable[tuple[str, str | Path, str | Path]]) -> int:
    for name, source, destination in steps:
        action = compress_file if name == "compress" else decompress_file
        try:
            action(source, destination)
        except (OSError, ValueError) as exc:
            print(f"{name} failed: {exc}", file=sys.stderr)
            return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Compress a text file, then decompress the result into another file."""
    parser = argparse.ArgumentParser(
        description="Compress a text file and decompress it again."
    )
    parser.add_argument("source", nargs="?", default="input.txt")
    parser.add_argument("compressed", nargs="?", default="compactado.bin")
    parser.add_argument("restored", nargs="?", default="descompactado.txt")
    args = parser.parse_args(argv)
    return _run(
        [
            ("compress", args.source, args.compressed),
            ("decompress", args.compressed, args.restored),
        ]
    )


if __name__ == "__main__":
    raise SystemExit(main())