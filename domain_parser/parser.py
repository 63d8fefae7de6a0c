"""Split domain names into subdomain, registrable name and public suffix."""

from dataclasses import dataclass

import structlog

from domain_parser.errors import DomainParseError, MissingNameError, UnknownSuffixError
from domain_parser.suffix_set import SuffixSet
from domain_parser.validator import validate_domain

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Record:
    subdomain: str
    name: str
    tld: str

    @property
    def registrable_domain(self) -> str:
        """The name joined with its public suffix, e.g. "example.co.uk"."""
        return f"{self.name}.{self.tld}"

    def __str__(self) -> str:
        return ".".join(part for part in (self.subdomain, self.name, self.tld) if part).lower()


def parse_domain(domain: str, suffixes: SuffixSet) -> Record:
    """Parse a domain into a Record using the known public suffixes.

    Labels are visited from right to left while a candidate suffix grows by
    one label per step. Every candidate found in ``suffixes`` replaces the
    current TLD and the sweep always runs to the leftmost label. A label that
    is not part of a matching candidate becomes the name if none is set yet,
    otherwise it is prepended to the subdomain.

    Args:
        domain: Domain name in any letter case, e.g. "WwW.eXample.com".
        suffixes: Public suffixes to match against.

    Returns:
        The parsed Record.

    Raises:
        DomainValidationError: The domain failed validation.
        UnknownSuffixError: No trailing labels form a known suffix.
        MissingNameError: Nothing is left over for the registrable name.
    """
    domain = domain.lower()
    validate_domain(domain)

    subdomain = ""
    name = ""
    tld = ""
    candidate = ""
    for label in reversed(domain.split(".")):
        candidate = f"{label}.{candidate}" if candidate else label
        if suffixes.contains(candidate):
            tld = candidate
        elif not name:
            name = label
        elif subdomain:
            subdomain = f"{label}.{subdomain}"
        else:
            subdomain = label

    if not tld:
        raise UnknownSuffixError(domain)
    if not name:
        raise MissingNameError(domain)
    return Record(subdomain=subdomain, name=name, tld=tld)


def domain_levels(domain: str, suffixes: SuffixSet) -> list[str]:
    """Return every level of a domain, from the full name down to name.tld.

    For "a.b.example.com" this is ["a.b.example.com", "b.example.com",
    "example.com"]. A domain that fails to parse yields an empty list rather
    than an error, so callers that need the reason should call parse_domain.
    """
    domain = domain.lower()
    try:
        record = parse_domain(domain, suffixes)
    except DomainParseError as exc:
        logger.debug("levels_parse_failed", domain=domain, error=str(exc))
        return []

    # The prefix keeps the dot before the TLD, so its last label is empty.
    labels = domain[: len(domain) - len(record.tld)].split(".")
    return [".".join(labels[i:]) + record.tld for i in range(len(labels) - 1)]
