import io

import pytest
from rich.console import Console

from domain_parser.domain import Domain
from domain_parser.suffix_set import SuffixSet

SAMPLE_PSL_TEXT = """\
// This Source Code Form is subject to the terms of the Mozilla Public
// ===BEGIN ICANN DOMAINS===

// com : https://en.wikipedia.org/wiki/.com
com

// uk : https://en.wikipedia.org/wiki/.uk
uk
co.uk
ac.uk

google
net
org
io
// ===BEGIN PRIVATE DOMAINS===
us.com
github.io
"""


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes to a StringIO for test capturing."""
    buf = io.StringIO()
    return Console(file=buf, force_terminal=True, width=160), buf


@pytest.fixture
def suffixes() -> SuffixSet:
    return SuffixSet.from_lines(SAMPLE_PSL_TEXT.splitlines())


@pytest.fixture
def domain(suffixes) -> Domain:
    return Domain(suffixes)


@pytest.fixture
def cache_file(tmp_path):
    path = tmp_path / "tld.cache"
    path.write_text("com\nco.uk\nuk\ngoogle\nus.com\n")
    return path
