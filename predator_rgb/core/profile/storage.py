from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping


def read_text(path: Path) -> str | None:
    """Return the file's text, or None when it does not exist.

    Other OS and decoding errors propagate to the caller.
    """

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def write_text_atomic(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def dump_fields(fields: Mapping[str, str], *, header: str | None = None) -> str:
    lines: list[str] = []
    if header:
        lines.append(f"# {header}")
    for key, value in fields.items():
        lines.append(f"{key}={value}")
    return "\n".join(lines) + "\n"


def parse_fields(text: str) -> dict[str, str]:
    """Parse ``key=value`` lines.

    Blank lines and ``#`` comments are skipped. Later duplicates win. Raises
    ValueError naming the first malformed line.
    """

    out: dict[str, str] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"line {lineno} is not key=value: {raw!r}")
        out[key] = value.strip()
    return out
