"""
Name matching on phonetic keys.

Names are normalized (titles and punctuation removed) before encoding, and
two names sound alike when any of their keys coincide.
"""

import re
from typing import List, Optional

from ..config import SoundKeyConfig
from ..core.encoder import encode
from ..core.keys import PhoneticKeys

# Match strength, strongest first
STRONG = 'strong'
NORMAL = 'normal'
WEAK = 'weak'


class NameMatcher:
    """
    Compares names by their phonetic keys.

    Match levels:
    1. strong - primary keys are equal
    2. normal - the primary key of one equals the secondary key of the other
    3. weak - only the secondary keys are equal
    """

    def __init__(self, config: Optional[SoundKeyConfig] = None):
        """
        Initialize the matcher.

        Args:
            config: Matching settings, defaults when omitted
        """
        self.config = config or SoundKeyConfig()
        self.config.validate()

    def normalize_name(self, name: Optional[str]) -> str:
        """
        Normalize a name for encoding.

        Args:
            name: Name to normalize

        Returns:
            Upper-case ASCII letters separated by single spaces
        """
        if not name:
            return ""

        normalized = name.lower().strip()

        # O'Brien -> obrien
        normalized = normalized.replace("'", "")

        for char in ['.', ',', '/', '\\', '(', ')', '[', ']', '-', '_']:
            normalized = normalized.replace(char, ' ')

        normalized = re.sub(r'[^a-z ]', '', normalized)

        parts = [part for part in normalized.split() if part not in self.config.honorifics]
        return ' '.join(parts).upper()

    def _finish(self, keys: PhoneticKeys) -> PhoneticKeys:
        if self.config.strip_placeholder:
            keys = keys.normalized()
        return keys.truncated(self.config.max_length)

    def word_keys(self, word: Optional[str]) -> PhoneticKeys:
        """Phonetic keys of a word as written, titles included."""
        return self._finish(encode(word))

    def keys_for(self, name: Optional[str]) -> PhoneticKeys:
        """Phonetic keys of a normalized name, cut to the configured length."""
        return self._finish(encode(self.normalize_name(name)))

    def match_keys(self, keys: PhoneticKeys) -> List[str]:
        """Keys of a name that take part in matching."""
        if self.config.key_mode == 'primary':
            return [keys.primary] if keys.primary else []
        return keys.distinct()

    def match_level(self, name1: Optional[str], name2: Optional[str]) -> Optional[str]:
        """
        How strongly two names match phonetically.

        Args:
            name1: First name
            name2: Second name

        Returns:
            'strong', 'normal', 'weak' or None when no keys coincide
        """
        keys1 = self.keys_for(name1)
        keys2 = self.keys_for(name2)

        if keys1.primary and keys1.primary == keys2.primary:
            return STRONG

        if self.config.key_mode == 'primary':
            return None

        if (keys1.primary and keys1.primary == keys2.secondary) or \
           (keys2.primary and keys2.primary == keys1.secondary):
            return NORMAL

        if keys1.secondary and keys1.secondary == keys2.secondary:
            return WEAK

        return None

    def sounds_alike(self, name1: Optional[str], name2: Optional[str]) -> bool:
        """True if the two names share at least one phonetic key."""
        return self.match_level(name1, name2) is not None
