from __future__ import annotations
from harper_span.errors import SpanErrorKind, SpanException, bail, ensure
from canoser import Struct, Uint64
from dataclasses import dataclass
from dataclasses_json import DataClassJsonMixin
from copy import copy
from typing import Optional, Sequence, Union
import logging

logger = logging.getLogger(__name__)

CharIndex = int #usize

# Anything that can be indexed by character position: a str or a list of chars.
Source = Union[str, Sequence[str]]


def is_offset(value) -> bool:
    # bool is an int subclass but never a position
    return isinstance(value, int) and not isinstance(value, bool)


# On-wire layout of a span: two little-endian u64 offsets.
class SpanRecord(Struct):
    _fields = [
        ('start', Uint64),
        ('end', Uint64),
    ]


# A window in a sequence of chars.
#
# The window is half-open, `[start, end)`, and measured in characters rather than bytes.
# A span does not own or borrow the text it points into; the text is handed in by the caller
# whenever content is read.
@dataclass
class Span(DataClassJsonMixin):
    start: CharIndex = 0
    end: CharIndex = 0

    @classmethod
    def new(cls, start: CharIndex, end: CharIndex) -> Span:
        span = cls(start, end)
        span.validate()
        return span

    def validate(self):
        for value in (self.start, self.end):
            if not is_offset(value):
                logger.debug("rejecting span offset %r", value)
                bail(SpanErrorKind.INVALID_RANGE, "span offsets must be integers, got {!r}", value)
        if 0 <= self.start <= self.end:
            return
        logger.debug("rejecting span %s..%s", self.start, self.end)
        bail(SpanErrorKind.INVALID_RANGE, "invalid span {}..{}", self.start, self.end)

    def len(self) -> CharIndex:
        ensure(self.start <= self.end, SpanErrorKind.INVALID_RANGE,
            "span start {} is after end {}", self.start, self.end)
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.len() == 0

    # Endpoints are compared inclusively, so spans that only touch (e.g. 0..5 and 5..10)
    # count as overlapping.
    def overlaps_with(self, other: Span) -> bool:
        return max(self.start, other.start) <= min(self.end, other.end)

    def get_content(self, source: Source) -> Source:
        ensure(self.start <= self.end, SpanErrorKind.INVALID_RANGE,
            "span start {} is after end {}", self.start, self.end)
        ensure(self.start < self.end, SpanErrorKind.EMPTY_SPAN,
            "no content in empty span at {}", self.start)
        ensure(self.start < len(source) and self.end <= len(source), SpanErrorKind.OUT_OF_BOUNDS,
            "span {}..{} is out of bounds for source of length {}", self.start, self.end, len(source))
        return source[self.start:self.end]

    def try_get_content(self, source: Source) -> Optional[Source]:
        try:
            return self.get_content(source)
        except SpanException:
            return None

    def get_content_string(self, source: Source) -> str:
        return "".join(self.get_content(source))

    def set_len(self, length: CharIndex):
        ensure(length >= 0, SpanErrorKind.NEGATIVE_VALUE, "negative span length {}", length)
        self.end = self.start + length

    def with_len(self, length: CharIndex) -> Span:
        cloned = copy(self)
        cloned.set_len(length)
        return cloned

    # Add an amount to both `start` and `end`
    def offset(self, by: CharIndex):
        ensure(by >= 0, SpanErrorKind.NEGATIVE_VALUE, "negative span offset {}", by)
        self.start += by
        self.end += by

    def with_offset(self, by: CharIndex) -> Span:
        cloned = copy(self)
        cloned.offset(by)
        return cloned

    def __lt__(self, other):
        return (self.start, self.end).__lt__((other.start, other.end))

    @classmethod
    def from_dict(cls, kvs, *, infer_missing=False) -> Span:
        try:
            # checked before decoding, which would truncate floats to ints
            for name in ('start', 'end'):
                if name in kvs and not is_offset(kvs[name]):
                    bail(SpanErrorKind.INVALID_RANGE, "span {} must be an integer, got {!r}", name, kvs[name])
            span = super().from_dict(kvs, infer_missing=infer_missing)
            span.validate()
        except SpanException:
            logger.warning("decoded invalid span %s", kvs)
            raise
        return span

    def serialize(self) -> bytes:
        self.validate()
        return SpanRecord(self.start, self.end).serialize()

    @classmethod
    def deserialize(cls, buffer: bytes) -> Span:
        try:
            record = SpanRecord.deserialize(buffer)
        except (OSError, TypeError, ValueError) as err:
            logger.warning("undecodable span record %s: %s", bytes(buffer).hex(), err)
            raise SpanException(SpanErrorKind.INVALID_RANGE, str(err)) from err
        span = cls(record.start, record.end)
        try:
            span.validate()
        except SpanException:
            logger.warning("decoded invalid span from %s", bytes(buffer).hex())
            raise
        return span
