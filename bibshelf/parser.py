"""BibTeX parsing pipeline: extract, resolve crossrefs, normalize."""
import logging
from typing import Tuple

from .crossref import resolve_crossrefs
from .models import Publication
from .normalizer import EntryNormalizer
from .scanner import extract_entries

logger = logging.getLogger(__name__)


def parse_bibtex(document: str) -> Tuple[Publication, ...]:
    """
    Parse a BibTeX document into Publications, in document order.

    Never raises on malformed input: bad entries are skipped and an
    unusable document simply yields no publications.
    """
    entries, macros = extract_entries(document)
    resolved = resolve_crossrefs(entries)

    publications = []
    for entry in resolved:
        pub = EntryNormalizer.normalize(entry, macros)
        if pub is not None:
            publications.append(pub)

    logger.debug(
        "Parsed %d publications from %d entries (%d after crossref resolution)",
        len(publications), len(entries), len(resolved),
    )
    return tuple(publications)
