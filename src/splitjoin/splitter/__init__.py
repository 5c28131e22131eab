# splitjoin/splitter/__init__.py
"""
splitter
========

Does: Expose the field splitter and its whitespace default.
Exports: split, finder_for, default_pattern
Used by: splitjoin package root, profiles, demo CLI.
"""

from .default_pattern import default_pattern
from .split_core import finder_for, split

__all__ = [
    "split",
    "finder_for",
    "default_pattern",
]
