"""Bibliography parsing, grouping and HTML rendering."""
from .config import Config
from .grouping import filter_publications, group_by_type, group_by_year, summarize
from .latex import clean_latex
from .models import Publication, PublicationGroup, RawEntry
from .parser import parse_bibtex

__version__ = "1.0.0"
__all__ = [
    "Config",
    "Publication",
    "PublicationGroup",
    "RawEntry",
    "clean_latex",
    "filter_publications",
    "group_by_type",
    "group_by_year",
    "parse_bibtex",
    "summarize",
]
