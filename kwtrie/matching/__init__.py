from .trie import Trie, TrieNode, build, segment
from .scanner import Scanner, descend, scan

__all__ = ["Trie", "TrieNode", "Scanner", "build", "scan", "segment", "descend"]
