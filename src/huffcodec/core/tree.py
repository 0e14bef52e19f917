from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional

# -------------------
# Strutture di base Huffman
# -------------------


@dataclass(frozen=True, slots=True)
class HuffmanNode:
    """Tree node: a leaf holds a symbol, an internal node holds exactly two children."""

    freq: int
    symbol: Any = None  # None per i nodi interni
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_freq_table(symbols: Iterable[Hashable]) -> dict[Hashable, int]:
    """Occurrences per distinct symbol, in first-seen order."""
    return dict(Counter(symbols))


def build_huffman_tree(freq: Mapping[Hashable, int]) -> Optional[HuffmanNode]:
    """Greedy min-heap merge; returns None for an empty table.

    Ties on frequency are broken by insertion order (monotonic counter), so symbols
    themselves are never compared and the result is deterministic for a given table.
    """
    heap: list[tuple[int, int, HuffmanNode]] = []
    counter = itertools.count()

    for sym, f in freq.items():
        if f <= 0:
            continue
        heapq.heappush(heap, (f, next(counter), HuffmanNode(freq=f, symbol=sym)))

    if not heap:
        return None

    # Un solo simbolo: la foglia diventa la radice (codice "0", vedi code_table).
    while len(heap) > 1:
        f1, _, n1 = heapq.heappop(heap)
        f2, _, n2 = heapq.heappop(heap)
        parent = HuffmanNode(freq=f1 + f2, left=n1, right=n2)
        heapq.heappush(heap, (parent.freq, next(counter), parent))

    return heap[0][2]


def iter_leaves(root: Optional[HuffmanNode]) -> Iterator[HuffmanNode]:
    """Leaves left to right."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        stack.append(node.right)  # type: ignore[arg-type]
        stack.append(node.left)  # type: ignore[arg-type]


def tree_depth(root: Optional[HuffmanNode]) -> int:
    """Longest root-to-leaf path in edges (0 for a single leaf or an empty tree)."""
    if root is None:
        return 0
    best = 0
    stack: list[tuple[HuffmanNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.is_leaf:
            best = max(best, depth)
            continue
        stack.append((node.left, depth + 1))  # type: ignore[arg-type]
        stack.append((node.right, depth + 1))  # type: ignore[arg-type]
    return best
