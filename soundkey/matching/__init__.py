"""
Phonetic name matching.

This module compares and indexes names by their Double Metaphone style keys
so that spelling variants of the same name can be found together.
"""

from .matcher import NameMatcher, STRONG, NORMAL, WEAK
from .index import PhoneticIndex, IndexEntry

__all__ = ['NameMatcher', 'PhoneticIndex', 'IndexEntry', 'STRONG', 'NORMAL', 'WEAK']
