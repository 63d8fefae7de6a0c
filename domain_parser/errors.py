"""Typed failures raised while loading the suffix list or parsing domains."""

from pathlib import Path


class DomainError(Exception):
    """Base class for every error raised by domain_parser."""


class DomainParseError(DomainError):
    """A domain string could not be split into subdomain, name and TLD."""

    def __init__(self, domain: str, reason: str) -> None:
        self.domain = domain
        self.reason = reason
        super().__init__(f'parse "{domain}": {reason}')


class DomainValidationError(DomainParseError):
    """The domain string is malformed and was rejected before parsing."""


class InvalidCharacterError(DomainValidationError):
    def __init__(self, domain: str, char: str) -> None:
        self.char = char
        super().__init__(domain, f'domain name cannot contain "{char}"')


class MissingSeparatorError(DomainValidationError):
    def __init__(self, domain: str) -> None:
        super().__init__(domain, 'domain name must contain at least one "."')


class ConsecutiveSeparatorsError(DomainValidationError):
    def __init__(self, domain: str) -> None:
        super().__init__(domain, 'domain name cannot contain two consecutive ".."')


class UnknownSuffixError(DomainParseError):
    def __init__(self, domain: str) -> None:
        super().__init__(domain, "top level domain does not exist")


class MissingNameError(DomainParseError):
    def __init__(self, domain: str) -> None:
        super().__init__(domain, "missing domain name")


class CacheUnavailableError(DomainError):
    """The suffix list cache could not be read or downloaded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f'suffix cache "{self.path}": {reason}')
