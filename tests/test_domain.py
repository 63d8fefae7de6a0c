"""Tests for the Domain parser object."""

import os
import time
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from domain_parser import Domain, Record
from domain_parser.errors import CacheUnavailableError, UnknownSuffixError
from domain_parser.suffix_list import CACHE_MAX_AGE


def test_new_loads_existing_cache(cache_file: Path):
    with patch("domain_parser.suffix_list.httpx.get") as mock_get:
        d = Domain.new(cache_file)
        mock_get.assert_not_called()
    assert d.cache == cache_file
    assert len(d.suffixes) == 5


def test_new_accepts_string_path(cache_file: Path):
    d = Domain.new(str(cache_file))
    assert d.parse("blog.google") == Record("", "blog", "google")


def test_new_raises_when_cache_unavailable(tmp_path: Path):
    with patch(
        "domain_parser.suffix_list.httpx.get",
        side_effect=httpx.ConnectTimeout("timed out"),
    ):
        with pytest.raises(CacheUnavailableError):
            Domain.new(tmp_path / "tld.cache")


def test_parse(domain: Domain):
    assert domain.parse("WwW.eXample.com") == Record("www", "example", "com")


def test_parse_unknown_suffix(domain: Domain):
    with pytest.raises(UnknownSuffixError):
        domain.parse("thistlddoes.nonexist")


def test_levels(domain: Domain):
    assert domain.levels("a.b.example.co.uk") == ["a.b.example.co.uk", "b.example.co.uk", "example.co.uk"]


def test_levels_unknown_suffix_is_empty(domain: Domain):
    assert domain.levels("naan.example") == []


def test_new_raises_on_undecodable_cache(tmp_path: Path):
    cache_file = tmp_path / "tld.cache"
    cache_file.write_bytes(b"com\n\xff\n")
    with pytest.raises(CacheUnavailableError):
        Domain.new(cache_file)


def test_new_uses_stale_cache_when_offline(cache_file: Path):
    old = time.time() - CACHE_MAX_AGE.total_seconds() - 60
    os.utime(cache_file, (old, old))
    with patch(
        "domain_parser.suffix_list.httpx.get",
        side_effect=httpx.ConnectError("connection refused"),
    ):
        d = Domain.new(cache_file, max_age=CACHE_MAX_AGE)
    assert d.parse("www.example.com") == Record("www", "example", "com")
