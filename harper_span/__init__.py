from harper_span.errors import SpanErrorKind, SpanException, bail, ensure
from harper_span.span import Span, SpanRecord
from harper_span.version import version

__version__ = version
