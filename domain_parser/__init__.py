"""Parse domain names into subdomain, registrable name and public suffix.

    >>> d = Domain.new("/tmp/tld.cache")
    >>> d.parse("www.hackerone.com")
    Record(subdomain='www', name='hackerone', tld='com')
    >>> d.levels("long.subdomain.for.example.com")
    ['long.subdomain.for.example.com', 'subdomain.for.example.com', 'for.example.com', 'example.com']
"""

from domain_parser.domain import Domain
from domain_parser.errors import (
    CacheUnavailableError,
    ConsecutiveSeparatorsError,
    DomainError,
    DomainParseError,
    DomainValidationError,
    InvalidCharacterError,
    MissingNameError,
    MissingSeparatorError,
    UnknownSuffixError,
)
from domain_parser.parser import Record, domain_levels, parse_domain
from domain_parser.suffix_set import SuffixSet, SuffixSetBuilder
from domain_parser.validator import validate_domain

__all__ = [
    "CacheUnavailableError",
    "ConsecutiveSeparatorsError",
    "Domain",
    "DomainError",
    "DomainParseError",
    "DomainValidationError",
    "InvalidCharacterError",
    "MissingNameError",
    "MissingSeparatorError",
    "Record",
    "SuffixSet",
    "SuffixSetBuilder",
    "UnknownSuffixError",
    "domain_levels",
    "parse_domain",
    "validate_domain",
]
