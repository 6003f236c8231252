"""
Domain value types.

Contains MutableInfiniteInteger, InfiniteInteger, IntegerQuotient, their
JSON payload models and the persisted byte form.
"""

from src.core.domain.infinite_integer import InfiniteInteger
from src.core.domain.integer_payload import InfiniteIntegerPayload, IntegerQuotientPayload
from src.core.domain.integer_quotient import IntegerQuotient
from src.core.domain.mutable_infinite_integer import MutableInfiniteInteger
from src.core.domain.stream_form import (
    MAX_CHUNK_WORDS,
    TAG_FINITE_NEGATIVE,
    TAG_FINITE_POSITIVE,
    TAG_NAN,
    TAG_NEGATIVE_INFINITY,
    TAG_POSITIVE_INFINITY,
    from_bytes,
    read_infinite_integer,
    to_bytes,
    write_infinite_integer,
)

__all__ = [
    # Value types
    "MutableInfiniteInteger",
    "InfiniteInteger",
    "IntegerQuotient",
    # Payload models
    "InfiniteIntegerPayload",
    "IntegerQuotientPayload",
    # Stream form
    "MAX_CHUNK_WORDS",
    "TAG_NAN",
    "TAG_POSITIVE_INFINITY",
    "TAG_NEGATIVE_INFINITY",
    "TAG_FINITE_NEGATIVE",
    "TAG_FINITE_POSITIVE",
    "write_infinite_integer",
    "read_infinite_integer",
    "to_bytes",
    "from_bytes",
]
