"""Loading publications from local files and URLs."""
import logging
from pathlib import Path
from typing import Optional, Tuple

from .config import Config
from .fetcher import fetch_document, is_valid_url
from .importers import get_importer_for_file
from .models import Publication
from .utils.error_handling import SourceReadError, file_operation_handler

logger = logging.getLogger(__name__)


@file_operation_handler
def read_text_file(path: str) -> str:
    """Read a text file as UTF-8; returns None (and logs) when it cannot be read."""
    return Path(path).read_text(encoding="utf-8")


def parse_content(content: str, filename: str) -> Tuple[Tuple[Publication, ...], str]:
    """Parse already-retrieved text, choosing the importer from the file name."""
    importer = get_importer_for_file(filename)
    return importer.parse(content), importer.format_name


def load_publications(source: str, config: Optional[Config] = None) -> Tuple[Tuple[Publication, ...], str]:
    """
    Load publications from a URL or a local path.

    Returns (publications, format_name). Raises FetchError or
    SourceReadError when the text cannot be retrieved.
    """
    if is_valid_url(source):
        content = fetch_document(source, config)
    else:
        content = read_text_file(source)
        if content is None:
            raise SourceReadError(f"Failed to read file: {source}")

    publications, format_name = parse_content(content, source)
    logger.info(f"Loaded {len(publications)} publications from {source} ({format_name})")
    return publications, format_name
