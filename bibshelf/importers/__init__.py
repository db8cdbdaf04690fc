from .base import PublicationImporter
from .bibtex_importer import BibTeXImporter
from .csv_importer import CSVImporter
from .json_importer import JSONImporter

def get_importer_for_file(filename: str) -> PublicationImporter:
    """Factory to get appropriate importer based on extension (or URL path)."""
    name = filename.lower().split('?')[0].split('#')[0]
    ext = name.rsplit('.', 1)[-1] if '.' in name else ''
    if ext == 'csv':
        return CSVImporter()
    elif ext == 'json':
        return JSONImporter()
    else:
        # .bib, .bibtex, .txt and extensionless URLs are read as BibTeX
        return BibTeXImporter()

__all__ = [
    "PublicationImporter",
    "BibTeXImporter",
    "CSVImporter",
    "JSONImporter",
    "get_importer_for_file",
]
