"""
Error types raised by the analyse pipeline.

Every failure is fatal for the run: nothing is reported once one is raised.
"""
from __future__ import annotations


class DepstatError(Exception):
    """Base class for all pipeline failures."""

    exit_code = 1


class ParseError(DepstatError):
    """A line does not match the `"A" -> "B";` edge grammar."""

    def __init__(self, line: str, fields: int):
        self.line   = line
        self.fields = fields
        super().__init__(f"match line {line!r} got {fields} fields")


class InputReadError(DepstatError):
    """The line source failed for a reason other than end of input."""

    exit_code = 2


class SerializationError(DepstatError):
    """The accumulated statistics could not be encoded."""

    exit_code = 3


class OutputWriteError(DepstatError):
    """The serialized document could not be written to its destination."""

    exit_code = 4
