#!/usr/bin/env python3
"""Generate docs/errors.md from src/huffcodec/errors.py (single source of truth)."""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    repo = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo / "src"))

    from huffcodec import errors  # noqa: E402

    out = repo / "docs" / "errors.md"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(errors.render_errors_markdown(), encoding="utf-8")
    print(f"[huffcodec] wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
