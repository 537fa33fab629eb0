"""
Phonetic encoding core.

The encoder scans a word once and applies per-letter decision lists to build
a primary and a secondary phonetic key.
"""

from .encoder import encode, primary_key, alternate_key, scan, Step
from .keys import PhoneticKeys, KeyBuffer
from .rules import Rule, Emit, RULES, INITIAL_RULES, rules_for
from .window import Window, char_at, is_slavo_germanic

__all__ = [
    'encode',
    'primary_key',
    'alternate_key',
    'scan',
    'Step',
    'PhoneticKeys',
    'KeyBuffer',
    'Rule',
    'Emit',
    'RULES',
    'INITIAL_RULES',
    'rules_for',
    'Window',
    'char_at',
    'is_slavo_germanic',
]
