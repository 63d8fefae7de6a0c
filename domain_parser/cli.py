"""Domain Parser CLI - split domain names into subdomain, name and TLD."""

import argparse
import sys
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table
from rich.text import Text

from domain_parser.domain import Domain
from domain_parser.errors import CacheUnavailableError, DomainParseError
from domain_parser.logging_config import setup_logging
from domain_parser.parser import Record
from domain_parser.suffix_list import CACHE_FILE, CACHE_MAX_AGE

console = Console()


@dataclass
class ParseOutcome:
    domain: str
    record: Record | None = None
    error: str = ""


def parse_all(parser: Domain, domains: list[str]) -> list[ParseOutcome]:
    """Parse every domain, collecting failures instead of stopping at the first."""
    outcomes = []
    for domain in domains:
        try:
            outcomes.append(ParseOutcome(domain=domain, record=parser.parse(domain)))
        except DomainParseError as exc:
            outcomes.append(ParseOutcome(domain=domain, error=str(exc)))
    return outcomes


def display_records(outcomes: list[ParseOutcome], output_console: Console | None = None) -> None:
    """Display parse outcomes as a rich table.

    Args:
        outcomes: One ParseOutcome per input domain, in input order.
        output_console: Optional Console for output (used in testing).
    """
    out = output_console or console

    table = Table(title="Parsed Domains", show_lines=False)
    table.add_column("Domain", style="bold")
    table.add_column("Subdomain")
    table.add_column("Name", style="bold green")
    table.add_column("TLD", style="cyan")

    for outcome in outcomes:
        if outcome.record is None:
            table.add_row(outcome.domain, Text(outcome.error, style="red"), "", "")
        else:
            r = outcome.record
            table.add_row(outcome.domain, r.subdomain, r.name, r.tld)

    out.print(table)

    failed = sum(1 for o in outcomes if o.record is None)
    summary = Text()
    summary.append(f"Total: {len(outcomes)}", style="bold")
    summary.append(" | ")
    summary.append(f"Parsed: {len(outcomes) - failed}", style="bold green")
    summary.append(" | ")
    summary.append(f"Failed: {failed}", style="red")
    out.print(summary)


def display_levels(parser: Domain, domains: list[str], output_console: Console | None = None) -> None:
    """Display the levels of each domain, most specific first."""
    out = output_console or console

    table = Table(title="Domain Levels", show_lines=True)
    table.add_column("Domain", style="bold")
    table.add_column("Levels")

    for domain in domains:
        levels = parser.levels(domain)
        if levels:
            table.add_row(domain, "\n".join(levels))
        else:
            table.add_row(domain, Text("no levels", style="yellow"))

    out.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Split domain names into subdomain, registrable name and public suffix."
    )
    parser.add_argument("domains", nargs="+", metavar="DOMAIN", help="Domain names to parse")
    parser.add_argument(
        "--levels",
        action="store_true",
        help="Also list every level of each domain (e.g. a.b.example.com, b.example.com, example.com)",
    )
    parser.add_argument(
        "--cache",
        metavar="FILE",
        default=str(CACHE_FILE),
        help=f"Suffix list cache file (default: {CACHE_FILE})",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Re-download the public suffix list even if the cache is fresh",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON lines")
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_json=args.log_json)

    try:
        domain_parser = Domain.new(args.cache, max_age=CACHE_MAX_AGE, force_refresh=args.refresh)
    except CacheUnavailableError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        return 1

    console.print(f"Loaded {len(domain_parser.suffixes):,} public suffixes")

    outcomes = parse_all(domain_parser, args.domains)
    display_records(outcomes)

    if args.levels:
        display_levels(domain_parser, args.domains)

    return 1 if any(o.record is None for o in outcomes) else 0


if __name__ == "__main__":
    sys.exit(main())
