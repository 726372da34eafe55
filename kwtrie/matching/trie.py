"""
Trie data structure for single-pass keyword scanning.

This module implements an insertion-only prefix tree over Unicode code points.
Every keyword in a list is stored once along a shared path, so a text can be
checked against all of them in one left-to-right walk (see scanner.py).
Keywords are stored verbatim: no case folding or normalization is applied.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

Units = Union[str, Sequence[str]]


def segment(text: Units) -> List[str]:
    """Split text into code points.

    Args:
        text: A decoded string, or a sequence of strings; multi-character
            elements are split so every unit is one code point

    Returns:
        List of single code point strings
    """
    if isinstance(text, (bytes, bytearray)):
        raise TypeError("segment() expects decoded text, got bytes")
    if isinstance(text, str):
        return list(text)
    return list("".join(text))


class TrieNode:
    """A node in the Trie data structure."""

    __slots__ = ("children", "is_terminal", "depth")

    def __init__(self, depth: int = 0):
        self.children: Dict[str, TrieNode] = {}
        self.is_terminal = False
        self.depth = depth

    def __repr__(self) -> str:
        return f"TrieNode(depth={self.depth}, terminal={self.is_terminal}, children={len(self.children)})"


class Trie:
    """Prefix tree of keywords, built once and then scanned read-only.

    Insertion is not synchronized. Finish all inserts before sharing the trie
    across threads for matching.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0
        self._nodes = 0

    def __len__(self) -> int:
        return self._size

    @property
    def node_count(self) -> int:
        """Number of nodes below the root."""
        return self._nodes

    def insert(self, keyword: Units) -> None:
        """Insert a keyword into the Trie.

        Inserting the same keyword twice leaves the Trie unchanged; inserting
        an empty keyword is a no-op.

        Args:
            keyword: Keyword string or its code points
        """
        units = segment(keyword)
        if not units:
            return
        node = self.root
        for unit in units:
            child = node.children.get(unit)
            if child is None:
                child = TrieNode(node.depth + 1)
                node.children[unit] = child
                self._nodes += 1
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def _walk(self, units: Sequence[str]) -> TrieNode | None:
        node = self.root
        for unit in units:
            node = node.children.get(unit)
            if node is None:
                return None
        return node

    def contains(self, keyword: Units) -> bool:
        """Check whether exactly this keyword was inserted.

        Args:
            keyword: Keyword string or its code points

        Returns:
            True if a keyword ends at the node reached by `keyword`
        """
        node = self._walk(segment(keyword))
        return node is not None and node.is_terminal

    __contains__ = contains

    def keywords_with_prefix(self, prefix: Units = "") -> List[str]:
        """Collect every inserted keyword that starts with `prefix`.

        Keywords are returned depth-first, children visited in insertion order.
        The prefix itself is included when it was inserted as a keyword.

        Args:
            prefix: Leading code points shared by the wanted keywords

        Returns:
            List of matching keywords, empty if no keyword has this prefix
        """
        units = segment(prefix)
        node = self._walk(units)
        if node is None:
            return []
        return [word for word, _ in _iter_terminals(node, "".join(units))]

    def __iter__(self) -> Iterator[str]:
        for word, _ in _iter_terminals(self.root, ""):
            yield word


def _iter_terminals(node: TrieNode, prefix: str) -> Iterator[Tuple[str, TrieNode]]:
    # Explicit stack; children pushed reversed to keep insertion order
    stack: List[Tuple[str, TrieNode]] = [(prefix, node)]
    while stack:
        path, cur = stack.pop()
        if cur.is_terminal:
            yield path, cur
        for unit, child in reversed(list(cur.children.items())):
            stack.append((path + unit, child))


def build(keywords: Iterable[str]) -> Trie:
    """Build a Trie from a list of keywords.

    Args:
        keywords: Keyword strings, already trimmed by the caller

    Returns:
        A Trie containing all the keywords
    """
    trie = Trie()
    for keyword in keywords:
        if keyword and isinstance(keyword, str):  # Skip empty or invalid entries
            trie.insert(keyword)
    return trie
