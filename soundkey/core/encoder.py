"""
Double Metaphone style encoder.

The word is upper-cased and scanned once, left to right. At each position
the decision list for the current letter picks a single rule, which appends
to the primary and secondary keys and moves the cursor forward.

Examples:

    >>> encode("Smith")
    PhoneticKeys(primary='SM0', secondary='XMT')
    >>> encode("Schmidt")
    PhoneticKeys(primary='XMT', secondary='SMT')
"""

import logging
from typing import Iterator, NamedTuple, Optional

from .keys import KeyBuffer, PhoneticKeys
from .rules import INITIAL_RULES, Emit, first_match, rules_for
from .window import Window

logger = logging.getLogger(__name__)


class Step(NamedTuple):
    """One fired rule: where it fired, which rule, and what it produced."""
    pos: int
    letter: str
    rule: str
    emit: Emit


def _prepare(word: Optional[str]) -> str:
    if word is None:
        return ''
    if not isinstance(word, str):
        raise TypeError(f"Expected a string to encode, got {type(word).__name__}")
    return word.upper()


def scan(word: Optional[str]) -> Iterator[Step]:
    """
    Yield every rule fired while encoding ``word``.

    The first step may come from the start-of-word rules; each later step
    comes from the decision list of the letter under the cursor.
    """
    text = _prepare(word)
    if not text:
        return

    window = Window(text)

    rule = first_match(INITIAL_RULES, window)
    if rule is not None:
        emit = rule.apply(window)
        yield Step(0, text[0], rule.name, emit)
        window.pos += emit.advance

    while window.pos < window.length:
        letter = text[window.pos]
        rule = first_match(rules_for(letter), window)
        emit = rule.apply(window)
        yield Step(window.pos, letter, rule.name, emit)
        window.pos += emit.advance


def encode(word: Optional[str]) -> PhoneticKeys:
    """
    Encode a word into its primary and secondary phonetic keys.

    Args:
        word: Word or name, ASCII letters and spaces; case is ignored

    Returns:
        PhoneticKeys(primary, secondary); both empty for an empty word
    """
    buffer = KeyBuffer()
    for step in scan(word):
        buffer.add(step.emit.primary, step.emit.secondary)

    keys = buffer.keys()
    logger.debug(f"Encoded {word!r} -> {keys.primary!r}/{keys.secondary!r}")
    return keys


def primary_key(word: Optional[str]) -> str:
    """Most likely phonetic key of ``word``."""
    return encode(word).primary


def alternate_key(word: Optional[str]) -> str:
    """Alternate phonetic key of ``word``; often equal to the primary."""
    return encode(word).secondary
