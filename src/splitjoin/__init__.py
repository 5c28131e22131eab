"""
splitjoin
=========

Does: Root package for Perl-style split (char, literal or pattern separator,
      optional field limit, trailing-empty suppression) and join (regular
      separator plus a distinct last separator).
Returns: split, join, the separator variants and InvalidPattern.
Used by: All imports starting from `splitjoin.*`.
"""

from splitjoin.joiner import join
from splitjoin.splitter import default_pattern, split
from splitjoin.types import Char, InvalidPattern, Literal, Pattern, as_separator

__all__: list[str] = [
    "split",
    "join",
    "Char",
    "Literal",
    "Pattern",
    "InvalidPattern",
    "as_separator",
    "default_pattern",
]
__docformat__ = "google"
