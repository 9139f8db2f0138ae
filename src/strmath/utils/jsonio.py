from __future__ import annotations

"""Reading and writing JSON / JSONL files."""

import json
from pathlib import Path
from typing import Any, Iterator


def write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=indent, ensure_ascii=False)
        handle.write("\n")


def iter_jsonl(path: Path) -> Iterator[Any]:
    """Yield one decoded object per non-blank line of *path*."""

    with path.open("r", encoding="utf-8") as handle:
        for line_no, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Malformed JSON on line {line_no} of {path}") from exc

