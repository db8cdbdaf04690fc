"""CSV Importer for spreadsheet publication lists."""
import csv
import io
import re
from typing import Dict, List, Sequence, Tuple
from ..models import Publication
from .base import PublicationImporter

# Accepted header names per field, first match wins
COLUMN_SYNONYMS: Dict[str, List[str]] = {
    'title': ['title', 'paper', 'paper title'],
    'authors': ['author', 'authors', 'author(s)'],
    'year': ['year', 'date', 'publication year', 'pub year'],
    'venue': ['venue', 'journal', 'conference', 'booktitle', 'publication'],
    'type': ['type', 'publication type', 'entry type'],
    'doi': ['doi'],
    'url': ['url', 'link'],
    'pages': ['pages', 'page'],
    'volume': ['volume', 'vol'],
    'number': ['number', 'issue'],
    'publisher': ['publisher'],
}

class CSVImporter(PublicationImporter):
    """
    Parses CSV exports from spreadsheets and reference managers.
    Columns are located by header name, so column order does not matter.
    """

    format_name = "csv"

    def parse(self, content: str) -> Tuple[Publication, ...]:
        rows = [row for row in csv.reader(io.StringIO((content or "").strip())) if row]
        if len(rows) < 2:
            return ()

        headers = [h.strip().lower() for h in rows[0]]
        column_map = {name: self._find_column(headers, synonyms)
                      for name, synonyms in COLUMN_SYNONYMS.items()}

        publications = []
        for index, row in enumerate(rows[1:], start=1):
            values = [v.strip() for v in row]
            if not any(values):
                continue
            pub = self._row_to_pub(values, column_map, index)
            if pub.title:
                publications.append(pub)
        return tuple(publications)

    @staticmethod
    def _find_column(headers: Sequence[str], names: Sequence[str]) -> int:
        for name in names:
            if name in headers:
                return headers.index(name)
        return -1

    def _row_to_pub(self, values: List[str], column_map: Dict[str, int], index: int) -> Publication:
        """Map one CSV row to the Publication model."""
        def get(name: str) -> str:
            col = column_map[name]
            return values[col] if 0 <= col < len(values) else ''

        year_match = re.search(r'\d{4}', get('year'))

        return Publication(
            key=f"csv_entry_{index}",
            type=self.classify(get('type')),
            title=get('title'),
            authors=self.format_authors(get('authors')),
            venue=get('venue'),
            year=int(year_match.group(0)) if year_match else 0,
            pages=get('pages'),
            publisher=get('publisher'),
            volume=get('volume'),
            number=get('number'),
            doi=get('doi') or None,
            url=get('url') or None,
            source='csv',
        )

    @staticmethod
    def classify(type_value: str) -> str:
        """Guess the publication type from a free-form type column."""
        t = type_value.lower()
        if 'conference' in t or 'inproceedings' in t:
            return 'conference'
        if 'article' in t or 'journal' in t:
            return 'journal'
        if 'preprint' in t or 'arxiv' in t:
            return 'preprint'
        if 'book' in t:
            return 'book'
        if 'thesis' in t:
            return 'thesis'
        if 'report' in t:
            return 'techreport'
        return 'misc'

    @staticmethod
    def format_authors(value: str) -> str:
        """Authors separated by ';' or 'and'; a long plain comma list is split too."""
        if not value:
            return ''
        authors = [a.strip() for a in re.split(r'\s*;\s*|\s+and\s+', value, flags=re.I) if a.strip()]
        if len(authors) == 1 and ',' in authors[0]:
            parts = [p.strip() for p in authors[0].split(',') if p.strip()]
            if len(parts) > 2:
                authors = parts
        return ', '.join(authors)
