"""Symbol units: how an input value is cut into the symbols the tree is built on.

  - codepoint: str -> one symbol per Unicode code point (default)
  - utf16:     str -> one symbol per UTF-16 code unit; a surrogate pair is two symbols
  - bytes:     bytes/bytearray -> one symbol per byte value (0..255)
  - ids:       any sequence of hashable values (e.g. vocabulary IDs)

ids symbols are dict keys: values that compare equal with the same hash (1, True, 1.0)
share one leaf, and decode returns the first one seen in the sample.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any, Literal

from huffcodec.errors import UsageError

SymbolUnit = Literal["codepoint", "utf16", "bytes", "ids"]

SYMBOL_UNITS: tuple[str, ...] = ("codepoint", "utf16", "bytes", "ids")
DEFAULT_UNIT: SymbolUnit = "codepoint"


def check_unit(unit: str) -> SymbolUnit:
    if unit not in SYMBOL_UNITS:
        raise UsageError(f"unit: value not supported: {unit!r} (expected one of {', '.join(SYMBOL_UNITS)})")
    return unit  # type: ignore[return-value]


def _utf16_units(text: str) -> list[str]:
    raw = text.encode("utf-16-le", "surrogatepass")
    return [chr(int.from_bytes(raw[i:i + 2], "little")) for i in range(0, len(raw), 2)]


def split_symbols(data: Any, unit: SymbolUnit) -> list[Hashable]:
    """Cut `data` into a list of symbols according to `unit`."""
    if unit in ("codepoint", "utf16"):
        if not isinstance(data, str):
            raise UsageError(f"unit {unit!r} expects str, got {type(data).__name__}")
        return list(data) if unit == "codepoint" else _utf16_units(data)

    if unit == "bytes":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise UsageError(f"unit 'bytes' expects bytes, got {type(data).__name__}")
        return list(bytes(data))

    if unit == "ids":
        if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, Iterable):
            raise UsageError(f"unit 'ids' expects a sequence of IDs, got {type(data).__name__}")
        out = list(data)
        for sym in out:
            if not isinstance(sym, Hashable):
                raise UsageError(f"unit 'ids': unhashable symbol of type {type(sym).__name__}")
        return out

    raise UsageError(f"unit: value not supported: {unit!r}")


def join_symbols(symbols: Sequence[Any], unit: SymbolUnit) -> Any:
    """Inverse of split_symbols()."""
    if unit == "codepoint":
        return "".join(symbols)
    if unit == "utf16":
        # Reassemble surrogate pairs; lone surrogates from the input survive as-is.
        raw = "".join(symbols).encode("utf-16-le", "surrogatepass")
        return raw.decode("utf-16-le", "surrogatepass")
    if unit == "bytes":
        return bytes(symbols)
    if unit == "ids":
        return list(symbols)
    raise UsageError(f"unit: value not supported: {unit!r}")


def empty_value(unit: SymbolUnit) -> Any:
    return join_symbols([], unit)


def describe_symbol(symbol: Any) -> str:
    """Human readable symbol: value plus code point where it has one."""
    if isinstance(symbol, str) and len(symbol) == 1:
        return f"Character {symbol!r} (U+{ord(symbol):04X})"
    if isinstance(symbol, int) and not isinstance(symbol, bool) and 0 <= symbol <= 0xFF:
        return f"Symbol {symbol} (0x{symbol:02X})"
    return f"Symbol {symbol!r}"
