"""
BibTeX document scanning.

Finds `@type{key, ...}` entries and `@string{...}` macro definitions in a
document and splits each entry body into its `name = value` fields. Entry
and value boundaries are found by counting brace depth, since field values
may themselves contain brace pairs.
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from .latex import clean_latex
from .models import RawEntry

logger = logging.getLogger(__name__)

_STRING_RE = re.compile(
    r'@string\s*\{\s*(\w+)\s*=\s*(?:\{([^}]*)\}|"([^"]*)")\s*\}',
    re.IGNORECASE,
)
_HEADER_RE = re.compile(r"@(\w+)\s*\{\s*([^,\s]+)\s*,")
_FIELD_NAME_RE = re.compile(r"(\w+)\s*=\s*")
_BARE_VALUE_RE = re.compile(r"\w+")

SKIPPED_TYPES = {"preamble", "string", "comment"}

# Kept raw at scan time so URLs can still be matched before cleanup
RAW_FIELDS = {"note"}


def find_closing_brace(text: str, start: int, depth: int = 1) -> Optional[int]:
    """
    Return the index of the brace that brings `depth` back to zero.

    Scanning starts at `start`, which is assumed to sit just inside `depth`
    open braces. Returns None when the braces never balance.
    """
    pos = start
    while pos < len(text):
        char = text[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return pos
        pos += 1
    return None


def _find_closing_quote(text: str, start: int) -> Optional[int]:
    """Index of the next double quote that is not inside braces."""
    depth = 0
    for pos in range(start, len(text)):
        char = text[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(depth - 1, 0)
        elif char == '"' and depth == 0:
            return pos
    return None


def _read_value(body: str, pos: int) -> Tuple[Optional[str], int]:
    """
    Read one field value starting at `pos`.

    Returns (value, next_position). value is None when nothing usable
    starts at `pos`.
    """
    if pos >= len(body):
        return None, pos
    char = body[pos]
    if char == "{":
        end = find_closing_brace(body, pos + 1)
        if end is None:
            return None, pos + 1
        return body[pos + 1:end], end + 1
    if char == '"':
        end = _find_closing_quote(body, pos + 1)
        if end is None:
            return None, pos + 1
        return body[pos + 1:end], end + 1
    match = _BARE_VALUE_RE.match(body, pos)
    if match:
        return match.group(0), match.end()
    return None, pos


def scan_fields(body: str) -> Dict[str, str]:
    """
    Extract `name = value` pairs from the body of one entry.

    Field names are lowercased and a repeated field overwrites the earlier
    one. Values are cleaned of LaTeX markup, except `note`, which is only
    trimmed.
    """
    fields: Dict[str, str] = {}
    pos = 0
    while True:
        match = _FIELD_NAME_RE.search(body, pos)
        if not match:
            break
        value, next_pos = _read_value(body, match.end())
        pos = max(next_pos, match.end())
        if value is None:
            continue
        name = match.group(1).lower()
        value = value.strip()
        fields[name] = value if name in RAW_FIELDS else clean_latex(value)
    return fields


def extract_string_macros(document: str) -> Dict[str, str]:
    """Collect `@string{name = {value}}` definitions; later ones win."""
    macros: Dict[str, str] = {}
    for match in _STRING_RE.finditer(document or ""):
        value = match.group(2) if match.group(2) is not None else match.group(3)
        macros[match.group(1).lower()] = value.strip()
    return macros


def extract_entries(document: str) -> Tuple[List[RawEntry], Dict[str, str]]:
    """
    Scan a whole document for entries.

    Returns the entries in document order together with the string macro
    table. Entries whose braces never balance are dropped; scanning resumes
    right after their header so the rest of the document is still read.
    """
    document = document or ""
    macros = extract_string_macros(document)
    entries: List[RawEntry] = []
    pos = 0
    while True:
        match = _HEADER_RE.search(document, pos)
        if not match:
            break
        entry_type = match.group(1).lower()
        key = match.group(2)
        body_start = match.end()

        if entry_type in SKIPPED_TYPES:
            pos = body_start
            continue

        end = find_closing_brace(document, body_start)
        if end is None:
            logger.debug("Dropping unterminated entry '%s'", key)
            pos = body_start
            continue

        entries.append(RawEntry(
            type=entry_type,
            key=key,
            fields=scan_fields(document[body_start:end]),
            source_order=len(entries),
            raw=document[match.start():end + 1],
        ))
        pos = end + 1

    logger.debug("Extracted %d entries and %d string macros", len(entries), len(macros))
    return entries, macros
