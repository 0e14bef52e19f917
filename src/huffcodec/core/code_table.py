from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from typing import Any, NoReturn, Optional

from huffcodec.core.tree import HuffmanNode
from huffcodec.errors import UnsupportedMutation


def build_code_table(root: Optional[HuffmanNode]) -> dict[Hashable, str]:
    """Symbol -> bit-string, left edge '0', right edge '1'.

    A tree made of a single leaf has no edges: its symbol gets "0" so that every
    repetition still costs one bit.
    """
    codes: dict[Hashable, str] = {}
    if root is None:
        return codes
    if root.is_leaf:
        codes[root.symbol] = "0"
        return codes

    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, path = stack.pop()
        # Foglia
        if node.is_leaf:
            codes[node.symbol] = path
            continue
        stack.append((node.right, path + "1"))  # type: ignore[arg-type]
        stack.append((node.left, path + "0"))  # type: ignore[arg-type]
    return codes


def is_prefix_free(codes: Mapping[Any, str]) -> bool:
    """True if no code is a prefix of another (sorted neighbours are enough)."""
    ordered = sorted(codes.values())
    for a, b in zip(ordered, ordered[1:]):
        if b.startswith(a):
            return False
    return True


def weighted_length(freq: Mapping[Any, int], codes: Mapping[Any, str]) -> int:
    """Total encoded bits for a payload with the given frequencies."""
    return sum(f * len(codes[sym]) for sym, f in freq.items())


class CodeTable(Mapping):
    """Read-only symbol -> code mapping.

    Reads behave like a dict; every mutating call raises UnsupportedMutation.
    The backing dict is a private copy, so the table cannot change after construction.
    """

    __slots__ = ("_codes",)

    def __init__(self, codes: Mapping[Any, str] | None = None) -> None:
        object.__setattr__(self, "_codes", dict(codes or {}))

    def __getitem__(self, symbol: Any) -> str:
        return self._codes[symbol]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, symbol: object) -> bool:
        try:
            return symbol in self._codes
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"CodeTable({self._codes!r})"

    def to_dict(self) -> dict[Any, str]:
        """Fresh, mutable copy."""
        return dict(self._codes)

    # copy/pickle rebuild through __init__, never through setattr.
    def __reduce__(self) -> tuple[Any, ...]:
        return (CodeTable, (self._codes,))

    def __copy__(self) -> "CodeTable":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "CodeTable":
        return self

    def _reject(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise UnsupportedMutation("Huffman code table is read-only.")

    __setitem__ = _reject
    __delitem__ = _reject
    __ior__ = _reject
    __setattr__ = _reject
    __delattr__ = _reject
    update = _reject
    pop = _reject
    popitem = _reject
    clear = _reject
    setdefault = _reject
