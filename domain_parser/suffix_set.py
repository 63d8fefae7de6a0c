"""In-memory set of known public suffixes.

Loading happens in two phases. A SuffixSetBuilder collects suffixes under a
lock, then freeze() hands back an immutable SuffixSet that any number of
threads can query without locking.
"""

import threading
from collections.abc import Iterable, Iterator


class SuffixSet:
    """Read-only set of full, dot-joined public suffixes ("com", "co.uk")."""

    __slots__ = ("_suffixes",)

    def __init__(self, suffixes: Iterable[str] = ()) -> None:
        self._suffixes = frozenset(suffixes)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "SuffixSet":
        """Build a frozen set from cache-file lines, skipping blanks and comments."""
        builder = SuffixSetBuilder()
        for line in lines:
            line = line.strip()
            if not line or line.startswith("/"):
                continue
            builder.add(line)
        return builder.freeze()

    def contains(self, suffix: str) -> bool:
        return suffix in self._suffixes

    def __contains__(self, suffix: object) -> bool:
        return suffix in self._suffixes

    def __len__(self) -> int:
        return len(self._suffixes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._suffixes)

    def __repr__(self) -> str:
        return f"SuffixSet({len(self._suffixes)} suffixes)"


class SuffixSetBuilder:
    """Mutable collector used while the suffix list is being loaded."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._suffixes: set[str] = set()

    def add(self, suffix: str) -> None:
        """Insert a suffix. Adding the same suffix twice has no further effect."""
        with self._lock:
            self._suffixes.add(suffix.lower())

    def freeze(self) -> SuffixSet:
        """Return an immutable snapshot of everything added so far."""
        with self._lock:
            return SuffixSet(self._suffixes)

    def __len__(self) -> int:
        with self._lock:
            return len(self._suffixes)
