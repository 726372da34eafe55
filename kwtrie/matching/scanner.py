"""
Single-pass keyword scanner over a built Trie.

The scan runs repeated descent attempts from the Trie root. Each attempt
consumes code points from the cursor until it either reaches a terminal node
(the first terminal wins, so "ab" is reported even when "abc" is also a
keyword) or finds no matching child. The cursor then moves past everything
the attempt consumed plus one more code point, so a keyword that starts
inside a consumed span is never reported.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .trie import Trie, TrieNode, Units, segment


def descend(root: TrieNode, units: Sequence[str], start: int) -> Tuple[Optional[str], int]:
    """Run one descent attempt starting at `units[start]`.

    Args:
        root: Trie root to start from
        units: Segmented text
        start: Cursor offset of the attempt

    Returns:
        (matched keyword or None, number of code points consumed)
    """
    node = root
    pos = start
    end = len(units)
    while pos < end:
        child = node.children.get(units[pos])
        pos += 1
        if child is None:
            return None, pos - start
        node = child
        if node.is_terminal:
            return "".join(units[start:pos]), pos - start
    return None, pos - start


class Scanner:
    """Matches texts against a completed Trie.

    A Scanner keeps no state between calls, so one instance may serve
    concurrent `match` calls as long as the Trie is no longer modified.
    """

    def __init__(self, trie: Trie):
        self.trie = trie

    def match(self, text: Units) -> List[str]:
        """Return matched keywords in left-to-right discovery order.

        Args:
            text: Decoded text, or its code points

        Returns:
            Matched substrings, duplicates kept
        """
        units = segment(text)
        root = self.trie.root
        matched: List[str] = []
        cursor = 0
        while cursor < len(units):
            word, consumed = descend(root, units, cursor)
            if word is not None:
                matched.append(word)
            cursor += consumed + 1
        return matched


def scan(trie: Trie, text: Units) -> List[str]:
    return Scanner(trie).match(text)
