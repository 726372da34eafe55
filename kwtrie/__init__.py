"""Trie-based keyword scanner."""

from .matching import Scanner, Trie, TrieNode, build, scan

__all__ = ["Trie", "TrieNode", "Scanner", "build", "scan"]
__version__ = "0.1.0"
