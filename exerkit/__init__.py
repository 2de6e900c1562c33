"""Huffman compression, a binary search tree and small numeric helpers."""

__version__ = "0.1.0"
__all__ = ["basics", "bst", "huffman", "treecodec"]