"""Cross-reference inheritance between BibTeX entries."""
import logging
from dataclasses import replace
from typing import Dict, List, Set

from .models import RawEntry

logger = logging.getLogger(__name__)


def resolve_crossrefs(entries: List[RawEntry]) -> List[RawEntry]:
    """
    Merge parent fields into entries that declare a `crossref`.

    Child fields override the parent's on collision. Every parent that was
    referenced is dropped from the result; parents nobody references are
    kept as ordinary entries. A crossref naming an unknown key leaves the
    entry unchanged. The input entries are not modified.
    """
    by_key: Dict[str, RawEntry] = {entry.key: entry for entry in entries}
    consumed: Set[str] = set()
    merged: List[RawEntry] = []

    for entry in entries:
        parent_key = entry.fields.get("crossref")
        parent = by_key.get(parent_key) if parent_key else None
        if parent is None or parent is entry:
            if parent_key and parent is None:
                logger.debug("Entry '%s' references unknown crossref '%s'", entry.key, parent_key)
            merged.append(entry)
            continue

        consumed.add(parent.key)
        merged.append(replace(
            entry,
            fields={**parent.fields, **entry.fields},
            raw=f"{entry.raw}\n\n{parent.raw}",
        ))

    if consumed:
        logger.debug("Dropping crossref parents: %s", ", ".join(sorted(consumed)))
    return [entry for entry in merged if entry.key not in consumed]
