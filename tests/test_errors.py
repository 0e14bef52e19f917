from __future__ import annotations

from huffcodec import errors
from huffcodec.errors import (
    ERROR_KINDS,
    HuffcodecError,
    InvalidState,
    MalformedInput,
    TruncatedInput,
    UnsupportedMutation,
    UnsupportedSymbol,
    UsageError,
    error_info,
    render_errors_markdown,
)


def test_every_exception_listed_once() -> None:
    names = [e.exception for e in ERROR_KINDS]
    assert len(names) == len(set(names))
    for cls in (
        HuffcodecError,
        UsageError,
        InvalidState,
        UnsupportedSymbol,
        MalformedInput,
        TruncatedInput,
        UnsupportedMutation,
    ):
        assert cls.__name__ in names
        info = error_info(cls.kind)
        assert info is not None
        assert info.exception == cls.__name__


def test_error_info_lookup() -> None:
    assert error_info("usage") == error_info(errors.KIND_USAGE)
    assert error_info("nope") is None


def test_builtin_families() -> None:
    assert issubclass(UsageError, ValueError)
    assert issubclass(InvalidState, RuntimeError)
    assert issubclass(UnsupportedSymbol, ValueError)
    assert issubclass(TruncatedInput, MalformedInput)
    assert issubclass(UnsupportedMutation, TypeError)


def test_payload_attributes() -> None:
    e = UnsupportedSymbol("x", symbol="d", position=3)
    assert (e.symbol, e.position) == ("d", 3)
    m = MalformedInput("x", char="2", position=9)
    assert (m.char, m.position) == ("2", 9)
    t = TruncatedInput("x", pending=2, position=4)
    assert (t.pending, t.position, t.char) == (2, 4, None)


def test_render_markdown() -> None:
    md = render_errors_markdown()
    assert md.startswith("# Error kinds\n")
    assert "GENERATED FILE" in md
    for e in ERROR_KINDS:
        assert f"| `{e.name}` | `{e.exception}` |" in md
