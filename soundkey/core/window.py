"""
Context window over the word being encoded.

Every rule looks at the word through a ``Window``: characters are addressed
relative to the cursor, and anything outside the word reads as ``None``.
``None`` never equals a letter, never belongs to a letter set and never
starts a substring, so rules near the word edges simply fail to match.
"""

from typing import Optional

VOWELS = frozenset("AEIOU")

# Initial-pass vowels also count Y
INITIAL_VOWELS = frozenset("AEIOUY")


def char_at(word: str, index: int) -> Optional[str]:
    """Return the character at an absolute position, or None outside the word."""
    if 0 <= index < len(word):
        return word[index]
    return None


def is_slavo_germanic(word: str) -> bool:
    """Coarse guess whether an upper-cased word looks Slavic or Germanic."""
    return 'W' in word or 'K' in word or 'CZ' in word or 'WITZ' in word


class Window:
    """Cursor-relative view of an upper-cased word."""

    __slots__ = ('word', 'pos', 'length', 'last', 'slavo_germanic')

    def __init__(self, word: str, pos: int = 0, slavo_germanic: Optional[bool] = None):
        self.word = word
        self.pos = pos
        self.length = len(word)
        self.last = self.length - 1
        if slavo_germanic is None:
            slavo_germanic = is_slavo_germanic(word)
        self.slavo_germanic = slavo_germanic

    def __repr__(self) -> str:
        return f"Window({self.word!r}, pos={self.pos})"

    @property
    def first(self) -> bool:
        """True when the cursor is on the first character."""
        return self.pos == 0

    @property
    def final(self) -> bool:
        """True when the cursor is on the last character."""
        return self.pos == self.last

    def at(self, offset: int = 0) -> Optional[str]:
        return char_at(self.word, self.pos + offset)

    def is_(self, offset: int, letters: str) -> bool:
        """True if the character at ``offset`` is one of ``letters``."""
        ch = self.at(offset)
        return ch is not None and ch in letters

    def is_vowel(self, offset: int = 0) -> bool:
        return self.at(offset) in VOWELS

    def has(self, offset: int, *fragments: str) -> bool:
        """True if one of ``fragments`` starts at ``offset`` from the cursor."""
        return self.has_at(self.pos + offset, *fragments)

    def has_at(self, index: int, *fragments: str) -> bool:
        """True if one of ``fragments`` starts at absolute position ``index``."""
        if index < 0:
            return False
        for fragment in fragments:
            if self.word.startswith(fragment, index):
                return True
        return False

    def starts(self, *prefixes: str) -> bool:
        """True if the whole word starts with one of ``prefixes``."""
        return self.has_at(0, *prefixes)

    def step_over(self, letters: str) -> int:
        """Advance of 2 when the next character is in ``letters``, else 1."""
        return 2 if self.is_(1, letters) else 1

    @property
    def germanic(self) -> bool:
        """Word starts with VAN, VON or SCH."""
        return self.starts('VAN ', 'VON ', 'SCH')
