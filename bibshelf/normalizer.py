"""
Entry Normalization Logic.
Maps raw BibTeX entry types and fields onto the canonical Publication schema.
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from .latex import clean_latex
from .models import Publication, RawEntry

logger = logging.getLogger(__name__)

TYPE_MAP: Dict[str, str] = {
    "inproceedings": "conference",
    "conference": "conference",
    "article": "journal",
    "book": "book",
    "booklet": "book",
    "incollection": "book",
    "phdthesis": "thesis",
    "mastersthesis": "thesis",
    "techreport": "techreport",
}

# Bookkeeping entry types that are not citable works on their own
DROPPED_TYPES = {"misc", "unpublished"}

# Fields whose presence turns a dropped entry type into a preprint
PREPRINT_FIELDS = ("eprint", "archiveprefix")

PLACEHOLDER_TITLE = "Untitled"

_AUTHOR_SPLIT_RE = re.compile(r"\s+and\s+", re.IGNORECASE)
_FOOTNOTE_MARK_RE = re.compile(r"\$\^[^$]*\$|<sup>.*?</sup>")
_NOTE_URL_RE = re.compile(r"https?://[^\s{}]+", re.IGNORECASE)
_URL_WRAPPER_RE = re.compile(r"\\url\{([^}]*)\}")
_LEADING_INT_RE = re.compile(r"\s*(\d+)")


def format_authors(value: str) -> str:
    """
    Reformat a BibTeX author list into "First Last, First Last".

    Handles: "Smith, John and Doe, Jane", "John Smith and Jane Doe",
    "Smith, Jr., John", "others" (rendered as "et al.").
    """
    if not value:
        return ""

    formatted: List[str] = []
    for author in _AUTHOR_SPLIT_RE.split(value):
        author = _FOOTNOTE_MARK_RE.sub("", author).strip()
        if not author:
            continue
        if author.lower() == "others":
            formatted.append("et al.")
            continue
        if "," in author:
            parts = [p.strip() for p in author.split(",")]
            if len(parts) >= 3:
                # "Last, Jr, First"
                author = " ".join(p for p in (parts[2], parts[0], parts[1]) if p)
            else:
                author = " ".join(p for p in (parts[1], parts[0]) if p)
        formatted.append(re.sub(r"\s+", " ", author))
    return ", ".join(formatted)


def parse_year(value: Optional[str]) -> int:
    """Leading integer of a year field; 0 when there is none."""
    match = _LEADING_INT_RE.match(value or "")
    return int(match.group(1)) if match else 0


def split_awards(value: Optional[str]) -> Tuple[str, ...]:
    """Split a `note_award` field on semicolons, dropping empty pieces."""
    if not value:
        return ()
    cleaned = (clean_latex(piece) for piece in value.split(";"))
    return tuple(piece for piece in cleaned if piece)


class EntryNormalizer:
    """
    Turns RawEntry records into Publications.
    Stateless: the string macro table is passed in per call.
    """

    @staticmethod
    def classify(entry_type: str, fields: Dict[str, str]) -> Optional[str]:
        """
        Map a raw entry type onto a publication type.
        Returns None for entry types that are dropped.
        """
        raw_type = (entry_type or "").lower()
        if raw_type in DROPPED_TYPES:
            if any(fields.get(name) for name in PREPRINT_FIELDS):
                return "preprint"
            return None
        return TYPE_MAP.get(raw_type, "misc")

    @staticmethod
    def resolve_venue(fields: Dict[str, str], macros: Dict[str, str]) -> str:
        venue = fields.get("booktitle") or fields.get("journal") or ""
        expansion = macros.get(venue.lower())
        if expansion is not None:
            venue = expansion
        return clean_latex(venue)

    @staticmethod
    def resolve_urls(fields: Dict[str, str]) -> Tuple[Optional[str], Optional[str]]:
        """
        Work out the (url, pdf_url) pair.

        A URL found in the note becomes the pdf_url. It is also exposed as
        the main url when there is no url field, or when it points at a PDF.
        """
        final_url = fields.get("url") or None
        if final_url:
            final_url = _URL_WRAPPER_RE.sub(r"\1", final_url)
            final_url = final_url.replace("{", "").replace("}", "").strip() or None

        pdf_url = None
        match = _NOTE_URL_RE.search(fields.get("note") or "")
        if match:
            pdf_url = match.group(0).rstrip(".,;:)]")

        if pdf_url and (not final_url or pdf_url.lower().endswith(".pdf")):
            return pdf_url, pdf_url
        return final_url, pdf_url

    @staticmethod
    def normalize(entry: RawEntry, macros: Optional[Dict[str, str]] = None) -> Optional[Publication]:
        """
        Build a Publication from one raw entry.
        Returns None when the entry type is dropped or the entry has no title.
        """
        fields = entry.fields
        pub_type = EntryNormalizer.classify(entry.type, fields)
        if pub_type is None:
            logger.debug("Dropping '%s': entry type '%s' is not a publication", entry.key, entry.type)
            return None

        title = fields.get("title", "")
        if not title or title == PLACEHOLDER_TITLE:
            logger.debug("Dropping '%s': no title", entry.key)
            return None

        url, pdf_url = EntryNormalizer.resolve_urls(fields)

        return Publication(
            key=entry.key,
            type=pub_type,
            title=title,
            authors=format_authors(fields.get("author", "")),
            venue=EntryNormalizer.resolve_venue(fields, macros or {}),
            year=parse_year(fields.get("year")),
            pages=fields.get("pages", ""),
            publisher=fields.get("publisher", ""),
            volume=fields.get("volume", ""),
            number=fields.get("number", ""),
            doi=fields.get("doi") or None,
            url=url,
            pdf_url=pdf_url,
            eprint=fields.get("eprint") or None,
            note=clean_latex(fields.get("note")) or None,
            awards=split_awards(fields.get("note_award")),
            raw=entry.raw,
            source="bibtex",
        )
