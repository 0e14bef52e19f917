"""Typed errors for huffcodec.

Single source of truth for error kinds lives here.

Policy:
- Errors are small and boring.
- Every error extends `HuffcodecError` and one builtin (ValueError, RuntimeError, TypeError),
  so callers can catch either the precise kind or the generic family.
- docs/errors.md is generated from this module (scripts/gen_errors_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# -------------------------
# Error kinds (single source)
# -------------------------

KIND_GENERIC = "GENERIC"
KIND_USAGE = "USAGE"
KIND_INVALID_STATE = "INVALID_STATE"
KIND_UNSUPPORTED_SYMBOL = "UNSUPPORTED_SYMBOL"
KIND_MALFORMED_INPUT = "MALFORMED_INPUT"
KIND_TRUNCATED_INPUT = "TRUNCATED_INPUT"
KIND_UNSUPPORTED_MUTATION = "UNSUPPORTED_MUTATION"


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    name: str
    exception: str
    description: str


ERROR_KINDS: tuple[ErrorInfo, ...] = (
    ErrorInfo(KIND_GENERIC, "HuffcodecError", "Base class, never raised directly"),
    ErrorInfo(KIND_USAGE, "UsageError", "Bad argument (unknown symbol unit, wrong input type)"),
    ErrorInfo(KIND_INVALID_STATE, "InvalidState", "Non-empty payload against a codec with no tree"),
    ErrorInfo(KIND_UNSUPPORTED_SYMBOL, "UnsupportedSymbol", "Encode hit a symbol absent from the code table"),
    ErrorInfo(KIND_MALFORMED_INPUT, "MalformedInput", "Bit-string holds a character other than '0'/'1'"),
    ErrorInfo(KIND_TRUNCATED_INPUT, "TruncatedInput", "Bit-string ends in the middle of a code"),
    ErrorInfo(KIND_UNSUPPORTED_MUTATION, "UnsupportedMutation", "Caller tried to modify the code table or the codec"),
)

_ERROR_BY_NAME: dict[str, ErrorInfo] = {e.name: e for e in ERROR_KINDS}


def error_info(name: str) -> ErrorInfo | None:
    return _ERROR_BY_NAME.get(str(name).upper())


def render_errors_markdown() -> str:
    """Render docs/errors.md content."""
    lines: list[str] = []
    lines.append("# Error kinds\n")
    lines.append("> GENERATED FILE - do not edit manually.\n")
    lines.append("> Source of truth: `src/huffcodec/errors.py` (ERROR_KINDS).\n")
    lines.append("> Regenerate: `python scripts/gen_errors_md.py`.\n\n")
    lines.append("Every failure of the codec is one of these exceptions.\n\n")
    lines.append("| Kind | Exception | Meaning |\n")
    lines.append("|---|---|---|\n")
    for e in ERROR_KINDS:
        lines.append(f"| `{e.name}` | `{e.exception}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- All exceptions extend `HuffcodecError` and carry a `kind`.\n")
    lines.append("- A failed call never alters the codec; it stays usable.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffcodecError(Exception):
    """Base error for huffcodec."""

    kind: str = KIND_GENERIC


class UsageError(HuffcodecError, ValueError):
    kind = KIND_USAGE


class InvalidState(HuffcodecError, RuntimeError):
    kind = KIND_INVALID_STATE


class UnsupportedSymbol(HuffcodecError, ValueError):
    kind = KIND_UNSUPPORTED_SYMBOL

    def __init__(self, message: str, *, symbol: Any, position: int) -> None:
        super().__init__(message)
        self.symbol = symbol
        self.position = position


class MalformedInput(HuffcodecError, ValueError):
    kind = KIND_MALFORMED_INPUT

    def __init__(self, message: str, *, char: str | None = None, position: int | None = None) -> None:
        super().__init__(message)
        self.char = char
        self.position = position


class TruncatedInput(MalformedInput):
    kind = KIND_TRUNCATED_INPUT

    def __init__(self, message: str, *, pending: int, position: int | None = None) -> None:
        super().__init__(message, position=position)
        self.pending = pending


class UnsupportedMutation(HuffcodecError, TypeError):
    kind = KIND_UNSUPPORTED_MUTATION
