import pytest

from exerkit.huffman import Leaf, Node, build_tree, count_frequencies, generate_codes
from exerkit.treecodec import (
    bytes_to_bits,
    compress,
    compress_file,
    decode_bits,
    decompress,
    decompress_file,
    deserialize_tree,
    encode_bits,
    main,
    serialize_tree,
)


@pytest.mark.parametrize(
    "text",
    [
        "ab",
        "hello world",
        "abracadabra",
        "the quick brown fox jumps over the lazy dog\n" * 20,
        "ação, café, über",
    ],
)
def test_round_trip(text):
    assert decompress(compress(text)) == text


def test_compress_two_characters_wire_format():
    data = compress("ab")
    assert data == b"\x00\x00\x00\x05\x00\x00\x00\x02\x00\x01a\x01b\x40"


def test_serialize_leaf_format():
    assert serialize_tree(Leaf("z", 7)) == b"\x01z"


def test_serialize_deserialize_drops_frequencies():
    tree = build_tree(count_frequencies("abracadabra"))
    restored = deserialize_tree(serialize_tree(tree))
    assert generate_codes(restored) == generate_codes(tree)
    assert restored.freq == 0


def test_deserialize_pair():
    assert deserialize_tree(b"\x00\x01a\x01b") == Node(0, Leaf("a", 0), Leaf("b", 0))


def test_deserialize_truncated_raises():
    with pytest.raises(ValueError):
        deserialize_tree(b"\x00\x01a")
    with pytest.raises(ValueError):
        deserialize_tree(b"")


def test_bytes_to_bits_limits_length():
    assert bytes_to_bits(b"\xa0", 3) == [True, False, True]
    assert len(bytes_to_bits(b"\xff\xff", 11)) == 11
    assert bytes_to_bits(b"\x01", 100) == [False] * 7 + [True]


def test_encode_bits_skips_unknown_characters():
    codebook = {"a": (False,), "b": (True, False)}
    assert encode_bits("axb", codebook) == [False, True, False]


def test_encode_decode_invariant():
    text = "mississippi river"
    tree = build_tree(count_frequencies(text))
    bits = encode_bits(text, generate_codes(tree))
    assert decode_bits(tree, bits) == text


def test_decode_drops_incomplete_trailing_code():
    tree = Node(0, Leaf("a", 0), Node(0, Leaf("b", 0), Leaf("c", 0)))
    assert decode_bits(tree, [False, True]) == "a"


def test_single_character_text_decodes_empty():
    assert decompress(compress("aaaa")) == ""


def test_single_leaf_with_bits_raises():
    with pytest.raises(ValueError):
        decode_bits(Leaf("a", 0), [True])


def test_empty_text_raises():
    with pytest.raises(ValueError):
        compress("")


def test_truncated_input_raises():
    data = compress("hello world")
    with pytest.raises(ValueError):
        decompress(data[:4])
    with pytest.raises(ValueError):
        decompress(data[:9])


def test_files_and_main(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text("banana bandana", encoding="utf-8")
    packed = tmp_path / "packed.bin"
    restored = tmp_path / "restored.txt"
    compress_file(source, packed)
    decompress_file(packed, restored)
    assert restored.read_text(encoding="utf-8") == "banana bandana"

    restored2 = tmp_path / "restored2.txt"
    assert main([str(source), str(tmp_path / "p2.bin"), str(restored2)]) == 0
    assert restored2.read_text(encoding="utf-8") == "banana bandana"


def test_main_missing_file_fails(tmp_path):
    missing = tmp_path / "missing.txt"
    assert main([str(missing), str(tmp_path / "x.bin"), str(tmp_path / "y.txt")]) == 1