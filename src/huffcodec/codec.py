"""HuffmanCodec: frequency table, tree, code table, encode/decode.

The codec is built once from a sample payload and is read-only afterwards:
  - encode(): symbols -> bit-string ('0'/'1' characters)
  - decode(): bit-string -> symbols, walking the tree one bit at a time
  - code_table: read-only view of the symbol -> code assignment

An empty (or None) sample gives an empty codec: empty payloads still round-trip,
anything else raises InvalidState.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, Optional, Tuple

from huffcodec.core.bitpack import check_bits, pack_bits, unpack_bits
from huffcodec.core.code_table import CodeTable, build_code_table
from huffcodec.core.tree import HuffmanNode, build_freq_table, build_huffman_tree
from huffcodec.errors import (
    InvalidState,
    MalformedInput,
    TruncatedInput,
    UnsupportedMutation,
    UnsupportedSymbol,
    UsageError,
)
from huffcodec.symbols import (
    DEFAULT_UNIT,
    SymbolUnit,
    check_unit,
    describe_symbol,
    empty_value,
    join_symbols,
    split_symbols,
)


def _restore_codec(unit: SymbolUnit, freq: dict[Hashable, int]) -> "HuffmanCodec":
    return HuffmanCodec.from_frequencies(freq, unit=unit)


class HuffmanCodec:
    """Huffman codec built once from a sample payload.

    `unit` picks how payloads are cut into symbols (see huffcodec.symbols).
    Instances are read-only: attribute assignment raises UnsupportedMutation,
    so one codec can be shared between threads.
    """

    __slots__ = ("_unit", "_freq", "_root", "_codes")

    def __init__(self, data: Any = None, *, unit: SymbolUnit = DEFAULT_UNIT) -> None:
        unit = check_unit(unit)
        freq: dict[Hashable, int] = {}
        if data is not None:
            freq = build_freq_table(split_symbols(data, unit))
        self._setup(unit, freq)

    def _setup(self, unit: SymbolUnit, freq: dict[Hashable, int]) -> None:
        root = build_huffman_tree(freq)
        object.__setattr__(self, "_unit", unit)
        object.__setattr__(self, "_freq", freq)
        object.__setattr__(self, "_root", root)
        object.__setattr__(self, "_codes", CodeTable(build_code_table(root)))

    @classmethod
    def from_frequencies(cls, freq: Mapping[Hashable, int], *, unit: SymbolUnit = DEFAULT_UNIT) -> "HuffmanCodec":
        """Rebuild a codec from a frequency table (same table, same codes)."""
        unit = check_unit(unit)
        clean: dict[Hashable, int] = {}
        for sym, f in freq.items():
            if not isinstance(f, int) or isinstance(f, bool) or f < 0:
                raise UsageError(f"frequencies: count for {sym!r} must be a non-negative int, got {f!r}")
            if f > 0:
                clean[sym] = f
        codec = cls.__new__(cls)
        codec._setup(unit, clean)
        return codec

    def __setattr__(self, name: str, value: Any) -> None:
        raise UnsupportedMutation("HuffmanCodec is read-only.")

    def __delattr__(self, name: str) -> None:
        raise UnsupportedMutation("HuffmanCodec is read-only.")

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore_codec, (self._unit, self._freq))

    def __copy__(self) -> "HuffmanCodec":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "HuffmanCodec":
        return self

    def __repr__(self) -> str:
        return f"HuffmanCodec(unit={self._unit!r}, symbols={len(self._codes)})"

    def __len__(self) -> int:
        return len(self._codes)

    @property
    def unit(self) -> SymbolUnit:
        return self._unit

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @property
    def root(self) -> Optional[HuffmanNode]:
        """Tree root (frozen nodes), None for an empty codec."""
        return self._root

    @property
    def code_table(self) -> CodeTable:
        """Read-only symbol -> code view."""
        return self._codes

    @property
    def frequencies(self) -> dict[Hashable, int]:
        """Copy of the frequency table the tree was built from."""
        return dict(self._freq)

    def _require_tree(self) -> HuffmanNode:
        if self._root is None:
            raise InvalidState("Huffman tree is empty.")
        return self._root

    def _lookup(self, symbols: list[Hashable]) -> list[str]:
        codes = self._codes
        out: list[str] = []
        for pos, sym in enumerate(symbols):
            code = codes.get(sym)
            if code is None:
                raise UnsupportedSymbol(
                    f"{describe_symbol(sym)} not found in Huffman dictionary.",
                    symbol=sym,
                    position=pos,
                )
            out.append(code)
        return out

    # -------------------
    # Encode
    # -------------------

    def encode(self, data: Any) -> str:
        """Concatenate the code of each symbol of `data`.

        Returns "" for empty/None input whatever the codec state.
        Raises InvalidState on an empty codec, UnsupportedSymbol on the first unknown symbol.
        """
        if data is None:
            return ""
        symbols = split_symbols(data, self._unit)
        if not symbols:
            return ""
        self._require_tree()
        return "".join(self._lookup(symbols))

    def encoded_length(self, data: Any) -> int:
        """Number of bits encode(data) would produce."""
        if data is None:
            return 0
        symbols = split_symbols(data, self._unit)
        if not symbols:
            return 0
        self._require_tree()
        return sum(len(code) for code in self._lookup(symbols))

    def encode_packed(self, data: Any) -> Tuple[bytes, int]:
        """encode() + pack_bits(): (bitstream, lastbits)."""
        return pack_bits(self.encode(data))

    # -------------------
    # Decode
    # -------------------

    def decode(self, bits: Optional[str]) -> Any:
        """Walk the tree bit by bit; emit a symbol at every leaf and restart at the root.

        Returns the empty value of the unit ("" / b"" / []) for empty/None input.
        Raises InvalidState on an empty codec, MalformedInput on a non-binary character
        (or a '1' against a single-symbol tree), TruncatedInput if the bits end mid-code.
        """
        if bits is None or (isinstance(bits, str) and not bits):
            return empty_value(self._unit)
        if not isinstance(bits, str):
            raise UsageError(f"decode expects a bit-string (str), got {type(bits).__name__}")

        root = self._require_tree()
        check_bits(bits)

        if root.is_leaf:
            # Caso speciale: un solo simbolo, un bit '0' per ripetizione.
            pos = bits.find("1")
            if pos != -1:
                raise MalformedInput(
                    f"Invalid binary sequence for single-character tree: '1' at position {pos}",
                    char="1",
                    position=pos,
                )
            return join_symbols([root.symbol] * len(bits), self._unit)

        out: list[Any] = []
        node = root
        start = 0
        for i, bit in enumerate(bits):
            node = node.left if bit == "0" else node.right  # type: ignore[assignment]
            if node.is_leaf:
                out.append(node.symbol)
                node = root
                start = i + 1

        if node is not root:
            pending = len(bits) - start
            raise TruncatedInput(
                f"Malformed encoded string: incomplete sequence ending ({pending} dangling bits).",
                pending=pending,
                position=start,
            )

        return join_symbols(out, self._unit)

    def decode_packed(self, bitstream: bytes, lastbits: int) -> Any:
        """unpack_bits() + decode()."""
        return self.decode(unpack_bits(bitstream, lastbits))
