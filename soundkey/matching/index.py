"""
In-memory phonetic index.

Names are filed under each of their phonetic keys so that lookups and
duplicate grouping only compare names that already sound alike.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..config import SoundKeyConfig
from ..core.keys import PhoneticKeys
from .matcher import NameMatcher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IndexEntry:
    """A name stored in the index."""
    entry_id: int
    name: str
    keys: PhoneticKeys
    ref: Any = None

    def __str__(self) -> str:
        return f"{self.name} [{self.keys.primary}/{self.keys.secondary}]"


class PhoneticIndex:
    """
    Files names under their phonetic keys.

    Not thread-safe; guard shared instances externally.
    """

    def __init__(self, config: Optional[SoundKeyConfig] = None):
        self.matcher = NameMatcher(config)
        self.entries: List[IndexEntry] = []
        self._buckets: Dict[str, List[int]] = defaultdict(list)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in self._buckets

    def add(self, name: str, ref: Any = None) -> IndexEntry:
        """
        Add a name to the index.

        Args:
            name: Name to index
            ref: Optional caller data kept with the entry (e.g. a record ID)

        Returns:
            The new index entry
        """
        keys = self.matcher.keys_for(name)
        entry = IndexEntry(entry_id=len(self.entries), name=name, keys=keys, ref=ref)
        self.entries.append(entry)

        for key in self.matcher.match_keys(keys):
            self._buckets[key].append(entry.entry_id)

        logger.debug(f"Indexed {name!r} under {self.matcher.match_keys(keys)}")
        return entry

    def add_all(self, names: Iterable[str]) -> int:
        """Add several names; returns how many were added."""
        count = 0
        for name in names:
            self.add(name)
            count += 1
        return count

    def lookup(self, name: str) -> List[IndexEntry]:
        """
        Find indexed names that share a phonetic key with ``name``.

        Returns:
            Matching entries in insertion order, each at most once
        """
        keys = self.matcher.keys_for(name)
        ids = set()
        for key in self.matcher.match_keys(keys):
            ids.update(self._buckets.get(key, []))
        return [self.entries[i] for i in sorted(ids)]

    def groups(self) -> Dict[str, List[IndexEntry]]:
        """
        Possible duplicates grouped by primary key.

        Returns:
            Primary key -> entries, only for keys shared by two or more names
        """
        grouped: Dict[str, List[IndexEntry]] = defaultdict(list)
        for entry in self.entries:
            if entry.keys.primary:
                grouped[entry.keys.primary].append(entry)
        return {key: members for key, members in grouped.items() if len(members) > 1}

    def load(self, path: Union[str, Path]) -> int:
        """
        Load names from a text file, one per line.

        Blank lines and lines starting with '#' are skipped.

        Returns:
            Number of names added
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Name list not found: {path}")

        with open(path, encoding='utf-8') as f:
            names = [line.strip() for line in f]

        count = self.add_all(n for n in names if n and not n.startswith('#'))
        logger.info(f"Loaded {count} names from {path}")
        return count
