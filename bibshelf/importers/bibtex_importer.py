"""BibTeX importer."""
from typing import Tuple
from ..models import Publication
from ..parser import parse_bibtex
from .base import PublicationImporter

class BibTeXImporter(PublicationImporter):
    """Parses .bib / .bibtex documents."""
    
    format_name = "bib"
    
    def parse(self, content: str) -> Tuple[Publication, ...]:
        return parse_bibtex(content)
