"""The Domain parser object: a loaded suffix set plus parse and levels."""

from datetime import timedelta
from pathlib import Path

from domain_parser.parser import Record, domain_levels, parse_domain
from domain_parser.suffix_list import ensure_cache, load_suffix_set
from domain_parser.suffix_set import SuffixSet


class Domain:
    """Domain name parser bound to one set of public suffixes.

    Build it with Domain.new() to load the suffixes from a cache file, or pass
    a SuffixSet directly. Instances are safe to share between threads.
    """

    def __init__(self, suffixes: SuffixSet, cache: Path | None = None) -> None:
        self.suffixes = suffixes
        self.cache = cache

    @classmethod
    def new(
        cls,
        cache_path: Path | str,
        *,
        max_age: timedelta | None = None,
        force_refresh: bool = False,
    ) -> "Domain":
        """Load the suffix list from ``cache_path``, downloading it if missing.

        Raises:
            CacheUnavailableError: The cache could not be fetched or read.
        """
        path = ensure_cache(cache_path, max_age=max_age, force_refresh=force_refresh)
        return cls(load_suffix_set(path), cache=path)

    def parse(self, domain: str) -> Record:
        return parse_domain(domain, self.suffixes)

    def levels(self, domain: str) -> list[str]:
        """All levels of ``domain``; empty when it does not parse."""
        return domain_levels(domain, self.suffixes)
