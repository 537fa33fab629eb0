"""Phonetic key pair and the buffer used to build it."""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional


class PhoneticKeys(NamedTuple):
    """Primary and secondary (alternate) encodings of a word."""
    primary: str
    secondary: str

    @property
    def is_ambiguous(self) -> bool:
        """True if the word has a distinct alternate pronunciation."""
        return self.primary != self.secondary.rstrip(' ')

    def normalized(self) -> 'PhoneticKeys':
        """Copy with the trailing 'no sound' placeholder removed."""
        return PhoneticKeys(self.primary.rstrip(' '), self.secondary.rstrip(' '))

    def truncated(self, max_length: Optional[int]) -> 'PhoneticKeys':
        """Copy cut to ``max_length`` characters per key (None keeps all)."""
        if max_length is None:
            return self
        return PhoneticKeys(self.primary[:max_length], self.secondary[:max_length])

    def distinct(self) -> List[str]:
        """Non-empty keys without repeats, primary first."""
        keys = []
        for key in self:
            if key and key not in keys:
                keys.append(key)
        return keys


@dataclass(slots=True)
class KeyBuffer:
    """Append-only primary/secondary output for a single encode call."""
    primary: List[str] = field(default_factory=list)
    secondary: List[str] = field(default_factory=list)

    def add(self, primary: str, secondary: Optional[str] = None) -> None:
        """Append to both streams; ``secondary`` defaults to ``primary``."""
        if secondary is None:
            secondary = primary
        if primary:
            self.primary.append(primary)
        if secondary:
            self.secondary.append(secondary)

    def keys(self) -> PhoneticKeys:
        return PhoneticKeys(''.join(self.primary), ''.join(self.secondary))
