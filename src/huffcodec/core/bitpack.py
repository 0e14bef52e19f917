from __future__ import annotations

import re
from typing import Tuple

from huffcodec.errors import MalformedInput

_NON_BINARY = re.compile(r"[^01]")


def check_bits(bits: str) -> None:
    """Raise MalformedInput on the first character that is not '0' or '1'."""
    m = _NON_BINARY.search(bits)
    if m is not None:
        ch = m.group(0)
        raise MalformedInput(
            f"Encoded text contains invalid characters: {ch!r} at position {m.start()}",
            char=ch,
            position=m.start(),
        )


def pack_bits(bits: str) -> Tuple[bytes, int]:
    """
    bit-string -> (bitstream, lastbits)
    MSB-first; lastbits = numero di bit validi nell'ultimo byte (1..8) oppure 0 se vuoto.
    """
    if not bits:
        return b"", 0
    check_bits(bits)

    n = len(bits)
    pad = (-n) % 8
    padded = bits + "0" * pad
    bitstream = int(padded, 2).to_bytes(len(padded) // 8, "big")
    lastbits = 8 - pad
    return bitstream, lastbits


def unpack_bits(bitstream: bytes, lastbits: int) -> str:
    """Inverse of pack_bits()."""
    if not bitstream:
        if lastbits != 0:
            raise MalformedInput(f"bitstream empty but lastbits={lastbits}")
        return ""
    if not 1 <= lastbits <= 8:
        raise MalformedInput(f"lastbits out of range (1..8): {lastbits}")

    total = len(bitstream) * 8
    bits = bin(int.from_bytes(bitstream, "big"))[2:].zfill(total)
    return bits[: total - (8 - lastbits)]
