"""
Test suite for infinite-numbers

Contains:
- tests/unit/          : Unit tests for word chains, division, number theory,
                         radix codec, value types and contracts
"""
