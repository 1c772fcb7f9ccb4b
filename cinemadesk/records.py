"""Shared helpers for the plain-text record files and the errors they raise."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]


class RecordError(Exception):
    """Base class for every record-keeping failure."""


class ValidationError(RecordError, ValueError):
    """A value does not have the required format."""


class NotFoundError(RecordError, LookupError):
    """The requested record does not exist."""


class DuplicateError(RecordError):
    """A record with the same key already exists."""


def field_value(line: str) -> str:
    """Return the value of a ``Label: value`` line (the text after ``": "``).

    A line without a colon yields everything after its first character.
    """
    colon = line.find(":")
    start = colon + 2 if colon >= 0 else 1
    return line[start:]


def read_lines(path: PathLike) -> list[str]:
    """Read a text file as a list of lines; a missing file reads as empty."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except FileNotFoundError:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_blocks(path: PathLike, blocks: Iterable[Sequence[str]]) -> None:
    """Overwrite *path* with the given blocks of lines, each followed by a blank line."""
    with open(Path(path), "w", encoding="utf-8") as handle:
        for block in blocks:
            for line in block:
                handle.write(f"{line}\n")
            handle.write("\n")