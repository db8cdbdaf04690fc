"""Export publications to BibTeX, CSV, JSON and Word."""
import csv
import io
import json
import re
from typing import Dict, Iterable, List, Optional, Sequence

from docx import Document
from docx.shared import Pt

from .grouping import group_by_year
from .models import Publication, PublicationGroup

BIBTEX_TYPES: Dict[str, str] = {
    'journal': 'article',
    'conference': 'inproceedings',
    'book': 'book',
    'thesis': 'phdthesis',
    'techreport': 'techreport',
}

CSV_HEADERS = ['Title', 'Authors', 'Year', 'Type', 'Venue', 'Pages', 'DOI', 'URL']

_TAG_RE = re.compile(r'</?(?:sup|sub|em|strong)>')


def strip_tags(text: str) -> str:
    """Drop the HTML tags introduced by LaTeX cleanup."""
    return _TAG_RE.sub('', text or '')


def to_bibtex(publications: Iterable[Publication]) -> str:
    """Serialize publications as BibTeX entries (not a lossless inverse of parsing)."""
    entries = []
    for pub in publications:
        entry_type = BIBTEX_TYPES.get(pub.type, 'misc')
        venue_field = 'journal' if pub.type == 'journal' else 'booktitle'
        fields = [
            ('title', strip_tags(pub.title)),
            ('author', ' and '.join('others' if a == 'et al.' else a
                                    for a in strip_tags(pub.authors).split(', ') if a)),
            ('year', str(pub.year) if pub.year else ''),
            (venue_field, strip_tags(pub.venue)),
            ('pages', pub.pages),
            ('doi', pub.doi),
            ('url', pub.url),
            ('volume', pub.volume),
            ('number', pub.number),
            ('publisher', pub.publisher),
            ('eprint', pub.eprint),
        ]
        lines = [f"@{entry_type}{{{pub.key},"]
        lines.extend(f"  {name} = {{{value}}}," for name, value in fields if value)
        lines.append("}")
        entries.append("\n".join(lines) + "\n")
    return "\n".join(entries)


def to_csv(publications: Iterable[Publication]) -> str:
    output = io.StringIO()
    writer = csv.writer(output, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for pub in publications:
        writer.writerow([
            strip_tags(pub.title),
            strip_tags(pub.authors),
            pub.year or '',
            pub.type,
            strip_tags(pub.venue),
            pub.pages,
            pub.doi or '',
            pub.url or '',
        ])
    return output.getvalue()


def to_json(publications: Iterable[Publication]) -> str:
    return json.dumps([pub.to_dict() for pub in publications], indent=2, ensure_ascii=False)


def _reference_line(pub: Publication) -> str:
    parts: List[str] = []
    if pub.authors:
        parts.append(strip_tags(pub.authors))
    parts.append(strip_tags(pub.title))
    if pub.venue:
        parts.append(strip_tags(pub.venue))
    if pub.pages:
        parts.append(f"pp. {pub.pages}")
    if pub.year:
        parts.append(str(pub.year))
    line = ", ".join(parts) + "."
    if pub.doi:
        line += f" doi:{pub.doi}"
    return line


def to_docx(publications: Sequence[Publication],
            groups: Optional[Sequence[PublicationGroup]] = None,
            title: str = 'Publications') -> bytes:
    """Word document with one heading per group; groups default to by-year."""
    if groups is None:
        groups = group_by_year(publications)

    doc = Document()
    doc.add_heading(title, 0)
    for group in groups:
        doc.add_heading(group.label, level=1)
        for pub in group.publications:
            p = doc.add_paragraph(_reference_line(pub))
            p.paragraph_format.space_after = Pt(6)

    f = io.BytesIO()
    doc.save(f)
    return f.getvalue()


EXPORT_FORMATS = {
    'bibtex': ('bib', 'text/plain'),
    'csv': ('csv', 'text/csv'),
    'json': ('json', 'application/json'),
    'docx': ('docx', 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'),
}


def export_publications(publications: Sequence[Publication], fmt: str):
    """Dispatch to the exporter for `fmt`. Returns str, or bytes for docx."""
    if fmt == 'bibtex':
        return to_bibtex(publications)
    if fmt == 'csv':
        return to_csv(publications)
    if fmt == 'json':
        return to_json(publications)
    if fmt == 'docx':
        return to_docx(publications)
    raise ValueError(f"Unknown export format: {fmt}")
