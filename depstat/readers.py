"""
Edge line sources — I/O only.
No parsing or statistics live here.
"""
from __future__ import annotations

from pathlib import Path
from typing import IO, Iterator

from depstat.errors import InputReadError


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def iter_lines(stream: IO[str]) -> Iterator[str]:
    """
    Lazily yield lines from `stream` without their terminators.

    Read failures (I/O errors, undecodable bytes) surface as InputReadError.
    """
    it = iter(stream)
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"scan input error {e}") from e
        yield _strip_eol(line)


def iter_file_lines(path: str | Path) -> Iterator[str]:
    """Yield lines from a UTF-8 text file; the file stays open until exhausted."""
    try:
        f = open(path, encoding="utf-8")
    except OSError as e:
        raise InputReadError(f"open input {path}: {e}") from e
    with f:
        yield from iter_lines(f)


def split_lines(text: str) -> list[str]:
    """
    Split an in-memory edge document on line feeds only, like iter_lines.

    A trailing newline adds no empty line.
    """
    lines = [_strip_eol(line) for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines
