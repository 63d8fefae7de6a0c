"""Cheap sanity checks applied to a domain string before it is parsed."""

from domain_parser.errors import (
    ConsecutiveSeparatorsError,
    InvalidCharacterError,
    MissingSeparatorError,
)

BAD_CHARS = (" ", "}", "{", "'", "\\", "/", '"', ";", ":", "@", "!", "#", "$", "%", "^", "&", "(", ")")


def validate_domain(domain: str) -> None:
    """Reject malformed domains.

    The domain is expected to be lowercased already; this only looks at
    characters and separators.

    Raises:
        InvalidCharacterError: A blocklisted character is present.
        MissingSeparatorError: There is no "." at all.
        ConsecutiveSeparatorsError: The domain contains "..".
    """
    for char in BAD_CHARS:
        if char in domain:
            raise InvalidCharacterError(domain, char)
    if "." not in domain:
        raise MissingSeparatorError(domain)
    if ".." in domain:
        raise ConsecutiveSeparatorsError(domain)
