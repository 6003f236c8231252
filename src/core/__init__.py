"""
Core arithmetic engine, value types and contracts.

This package contains the word-chain algorithms for unbounded integers,
the mutable and immutable integer types built on top of them, and the
JSON contracts for exchanging values.
"""
