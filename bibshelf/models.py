"""Data models for bibshelf."""
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional, Tuple

PUBLICATION_TYPES: Tuple[str, ...] = (
    "conference", "journal", "book", "thesis", "techreport", "preprint", "misc",
)

# Secondary sort key inside a year group, lower first
TYPE_PRIORITY: Dict[str, int] = {
    "book": 0,
    "conference": 1,
    "journal": 2,
    "techreport": 3,
    "thesis": 4,
    "preprint": 5,
    "misc": 6,
}

# Bucket order when grouping by type
TYPE_ORDER: Tuple[str, ...] = tuple(sorted(TYPE_PRIORITY, key=TYPE_PRIORITY.get))

TYPE_LABELS: Dict[str, str] = {
    "book": "Books",
    "conference": "Conference Papers",
    "journal": "Journal Articles",
    "techreport": "Technical Reports",
    "thesis": "Theses",
    "preprint": "Preprints",
    "misc": "Other",
}

# Short names for the badge shown on each card
TYPE_BADGES: Dict[str, str] = {
    "book": "Book",
    "conference": "Conf",
    "journal": "Journal",
    "techreport": "Tech Report",
    "thesis": "Thesis",
    "preprint": "Preprint",
    "misc": "Other",
}


@dataclass
class RawEntry:
    """One BibTeX entry as extracted from a document, before normalization."""
    type: str
    key: str
    fields: Dict[str, str]
    source_order: int
    raw: str = ""


@dataclass(frozen=True)
class Publication:
    """Represents a normalized publication ready for grouping and display."""
    key: str
    type: str
    title: str
    authors: str = ""
    venue: str = ""
    year: int = 0
    pages: str = ""
    publisher: str = ""
    volume: str = ""
    number: str = ""
    doi: Optional[str] = None
    url: Optional[str] = None
    pdf_url: Optional[str] = None
    eprint: Optional[str] = None
    note: Optional[str] = None
    awards: Tuple[str, ...] = field(default_factory=tuple)
    raw: str = ""
    source: str = "bibtex"

    @property
    def type_priority(self) -> int:
        return TYPE_PRIORITY.get(self.type, TYPE_PRIORITY["misc"])

    @property
    def type_label(self) -> str:
        return TYPE_BADGES.get(self.type, TYPE_BADGES["misc"])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary for JSON serialization."""
        data = asdict(self)
        data["awards"] = list(self.awards)
        data["type_priority"] = self.type_priority
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Publication":
        """Create a Publication from a dictionary produced by to_dict()."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        pub_type = str(known.get("type") or "misc").lower()
        known["type"] = pub_type if pub_type in PUBLICATION_TYPES else "misc"
        known["awards"] = tuple(known.get("awards") or ())
        try:
            known["year"] = int(known.get("year") or 0)
        except (TypeError, ValueError):
            known["year"] = 0
        for name in ("title", "authors", "venue", "pages", "publisher", "volume", "number", "raw"):
            if known.get(name) is None:
                known[name] = ""
            else:
                known[name] = str(known[name])
        known["key"] = str(known.get("key") or "")
        return cls(**known)


@dataclass(frozen=True)
class PublicationGroup:
    """A labelled bucket of publications, as produced by the grouping functions."""
    label: str
    publications: Tuple[Publication, ...]

    def __len__(self) -> int:
        return len(self.publications)
