# splitjoin/joiner/__init__.py
"""
joiner
======

Does: Expose the joiner (regular separator + optional last separator).
Exports: join
"""

from .join_core import join

__all__ = ["join"]
