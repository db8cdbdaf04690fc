"""Remote document retrieval with proxy fallback."""
import logging
from typing import List, Optional
from urllib.parse import quote, urlparse

import requests

from .config import Config
from .utils.error_handling import FetchError

logger = logging.getLogger(__name__)


def is_valid_url(url: str) -> bool:
    """True for absolute http(s) URLs with a host."""
    try:
        parsed = urlparse((url or "").strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def normalize_source_url(url: str) -> str:
    """Rewrite GitHub file page URLs to their raw content URL."""
    url = url.strip()
    if "github.com" in url and "/blob/" in url:
        url = url.replace("github.com", "raw.githubusercontent.com", 1).replace("/blob/", "/", 1)
    return url


def candidate_urls(url: str, config: Optional[Config] = None) -> List[str]:
    """The direct URL followed by each configured proxy URL, in order."""
    config = config or Config()
    encoded = quote(url, safe="")
    return [url] + [template.format(url=encoded) for template in config.PROXY_URLS]


def fetch_document(url: str, config: Optional[Config] = None) -> str:
    """
    Download a document as text.

    Tries the URL directly, then each proxy in turn. Raises FetchError once
    every source has failed.
    """
    config = config or Config()
    if not is_valid_url(url):
        raise FetchError(f"Not a valid URL: {url!r}")

    url = normalize_source_url(url)
    last_error: Optional[Exception] = None
    for candidate in candidate_urls(url, config):
        try:
            response = requests.get(candidate, timeout=config.REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning(f"Fetch failed for {candidate}: {e}")
            last_error = e
            continue
        logger.info(f"Fetched {len(response.text)} characters from {candidate}")
        return response.text

    raise FetchError(f"Failed to fetch {url} from all sources: {last_error}")
