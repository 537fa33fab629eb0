"""Configuration for name matching and indexing."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional, Set

KEY_MODES = ('primary', 'both')


@dataclass
class SoundKeyConfig:
    """Settings shared by the matcher, the index, the CLI and the API."""

    # Cut keys to this many characters (classic Double Metaphone uses 4)
    max_length: Optional[int] = None

    # Which keys take part in matching: "primary" or "both"
    key_mode: str = 'both'

    # Drop the trailing "no sound" placeholder before comparing keys
    strip_placeholder: bool = True

    # Titles removed from names before encoding
    honorifics: Set[str] = field(default_factory=lambda: {
        'mr', 'mrs', 'ms', 'miss', 'dr', 'rev', 'sir', 'lady', 'lord', 'dame',
        'herr', 'frau', 'prof', 'don', 'sr', 'sra', 'jr', 'ii', 'iii', 'iv',
        'esq', 'md', 'phd',
    })

    def validate(self) -> None:
        """Raise ValueError on settings that make no sense."""
        if self.max_length is not None and self.max_length < 1:
            raise ValueError(f"max_length must be at least 1, got {self.max_length}")
        if self.key_mode not in KEY_MODES:
            raise ValueError(
                f"Unknown key mode: {self.key_mode} (expected one of {', '.join(KEY_MODES)})"
            )

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'SoundKeyConfig':
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in values.items() if key in known}
        if 'honorifics' in kwargs:
            kwargs['honorifics'] = {h.lower() for h in kwargs['honorifics']}
        config = cls(**kwargs)
        config.validate()
        return config
