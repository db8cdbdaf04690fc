"""Grouping, search and summary views over normalized publications."""
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple

from .models import Publication, PublicationGroup, TYPE_LABELS, TYPE_ORDER

UNKNOWN_YEAR_LABEL = "Unknown"


def group_by_year(pubs: Iterable[Publication]) -> List[PublicationGroup]:
    """
    Bucket publications by year, newest first.

    Publications without a year (year == 0) go into a trailing "Unknown"
    bucket. Within a bucket the order is by type priority; the sort is
    stable, so ties keep their input order.
    """
    buckets: Dict[int, List[Publication]] = defaultdict(list)
    for pub in pubs:
        buckets[pub.year].append(pub)

    groups = []
    # Known years newest first, year 0 always last
    for year in sorted(buckets, key=lambda y: (y != 0, y), reverse=True):
        members = sorted(buckets[year], key=lambda p: p.type_priority)
        label = str(year) if year else UNKNOWN_YEAR_LABEL
        groups.append(PublicationGroup(label=label, publications=tuple(members)))
    return groups


def group_by_type(pubs: Iterable[Publication]) -> List[PublicationGroup]:
    """Bucket publications by type in a fixed order, newest first within each."""
    buckets: Dict[str, List[Publication]] = defaultdict(list)
    for pub in pubs:
        buckets[pub.type if pub.type in TYPE_LABELS else "misc"].append(pub)

    return [
        PublicationGroup(
            label=TYPE_LABELS[pub_type],
            publications=tuple(sorted(buckets[pub_type], key=lambda p: p.year, reverse=True)),
        )
        for pub_type in TYPE_ORDER
        if buckets.get(pub_type)
    ]


def filter_publications(pubs: Sequence[Publication], query: str) -> Tuple[Publication, ...]:
    """Case-insensitive substring search over title, authors, venue, year and type."""
    query = (query or "").strip().lower()
    if not query:
        return tuple(pubs)

    def haystack(pub: Publication) -> str:
        parts = [pub.title, pub.authors, pub.venue, str(pub.year) if pub.year else "", pub.type]
        return " ".join(p for p in parts if p).lower()

    return tuple(pub for pub in pubs if query in haystack(pub))


def summarize(pubs: Sequence[Publication]) -> Dict[str, int]:
    """Counts shown in the statistics bar."""
    return {
        "total": len(pubs),
        "years": len({p.year for p in pubs if p.year > 0}),
        "venues": len({p.venue for p in pubs if p.venue}),
    }
