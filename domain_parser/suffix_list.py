"""Fetch and cache the Public Suffix List."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import httpx
import structlog

from domain_parser.errors import CacheUnavailableError
from domain_parser.suffix_set import SuffixSet

PUBLIC_SUFFIX_LIST_URL = "https://publicsuffix.org/list/public_suffix_list.dat"
CACHE_DIR = Path.home() / ".cache" / "domain-parser"
CACHE_FILE = CACHE_DIR / "tld.cache"
CACHE_MAX_AGE = timedelta(days=7)
FETCH_TIMEOUT = 15.0

logger = structlog.get_logger(__name__)


def parse_suffix_text(text: str) -> list[str]:
    """Parse Public Suffix List text, skipping comments and blank lines.

    Returns lowercase suffix strings in file order.
    """
    suffixes: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("/"):
            continue
        suffixes.append(line.lower())
    return suffixes


def cache_is_fresh(path: Path, max_age: timedelta | None = None) -> bool:
    """Check if the cache file exists and, when max_age is given, is younger than it."""
    if not path.exists():
        return False
    if max_age is None:
        return True
    mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)
    return datetime.now(UTC) - mtime < max_age


def download_suffix_list(path: Path) -> None:
    """Download the suffix list and write one suffix per line to ``path``."""
    logger.info("suffix_list_download", url=PUBLIC_SUFFIX_LIST_URL, path=str(path))
    try:
        response = httpx.get(PUBLIC_SUFFIX_LIST_URL, follow_redirects=True, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise CacheUnavailableError(path, f"could not download suffix list: {exc}") from exc

    suffixes = parse_suffix_text(response.text)
    tmp_path = path.with_name(f"{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text("".join(f"{suffix}\n" for suffix in suffixes), encoding="utf-8")
        tmp_path.replace(path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise CacheUnavailableError(path, f"could not write cache file: {exc}") from exc
    logger.info("suffix_list_cached", path=str(path), suffixes=len(suffixes))


def ensure_cache(
    path: Path | str = CACHE_FILE,
    *,
    max_age: timedelta | None = None,
    force_refresh: bool = False,
) -> Path:
    """Make sure a usable cache file exists, downloading it when needed.

    A stale cache is kept when the refresh fails, so the list stays usable
    offline. A forced refresh or a missing file still raises.

    Args:
        path: Location of the cache file.
        max_age: Re-download when the file is older than this. None keeps
            any existing file regardless of age.
        force_refresh: If True, bypass the cache and re-download.

    Returns:
        The cache path.

    Raises:
        CacheUnavailableError: The list could not be downloaded or written.
    """
    path = Path(path)
    if force_refresh or not cache_is_fresh(path, max_age):
        try:
            download_suffix_list(path)
        except CacheUnavailableError as exc:
            if force_refresh or not path.exists():
                raise
            logger.warning("suffix_list_refresh_failed", path=str(path), error=str(exc))
    return path


def load_suffix_set(path: Path | str) -> SuffixSet:
    """Read a cache file fully into a frozen SuffixSet."""
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            suffixes = SuffixSet.from_lines(f)
    except (OSError, UnicodeDecodeError) as exc:
        raise CacheUnavailableError(path, f"could not read cache file: {exc}") from exc
    logger.info("suffix_set_loaded", path=str(path), suffixes=len(suffixes))
    return suffixes
