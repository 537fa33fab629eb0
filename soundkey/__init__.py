"""SoundKey - Double Metaphone style phonetic keys for names and words."""

__version__ = "0.1.0"

from .core.encoder import encode, primary_key, alternate_key
from .core.keys import PhoneticKeys
from .config import SoundKeyConfig
from .matching import NameMatcher, PhoneticIndex

__all__ = [
    'encode',
    'primary_key',
    'alternate_key',
    'PhoneticKeys',
    'SoundKeyConfig',
    'NameMatcher',
    'PhoneticIndex',
]
