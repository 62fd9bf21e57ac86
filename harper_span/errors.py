from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class SpanErrorKind(IntEnum):
    # start > end, or a negative offset in a decoded record
    INVALID_RANGE = 1
    # content requested through a zero-width span
    EMPTY_SPAN = 2
    # span reaches past the end of the source sequence
    OUT_OF_BOUNDS = 3
    # negative length or offset passed to a mutator
    NEGATIVE_VALUE = 4


@dataclass
class SpanException(Exception):
    kind: SpanErrorKind
    message: Optional[str] = None

    def __init__(self, kind: SpanErrorKind, message: Optional[str] = None):
        super().__init__(kind, message)
        self.kind = kind
        self.message = message

    def __str__(self):
        if self.message is None:
            return self.kind.name
        return f"{self.kind.name}: {self.message}"


def bail(kind: SpanErrorKind, fmt: str, *args):
    raise SpanException(kind, fmt.format(*args))


def ensure(cond: bool, kind: SpanErrorKind, fmt: str, *args):
    if not cond:
        bail(kind, fmt, *args)
