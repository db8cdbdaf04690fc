"""Application state shared by the web app, the CLI and the renderer."""
from dataclasses import dataclass, field, replace
from typing import Dict, List, Tuple

from .config import Config
from .grouping import filter_publications, group_by_type, group_by_year, summarize
from .models import Publication, PublicationGroup

GROUPINGS = (Config.GROUP_BY_YEAR, Config.GROUP_BY_TYPE)


@dataclass(frozen=True)
class LibraryState:
    """
    The loaded publications plus the current view settings.
    Immutable: use with_query() / with_grouping() to derive a new state.
    """
    publications: Tuple[Publication, ...] = field(default_factory=tuple)
    source_format: str = "bib"
    grouping: str = Config.GROUP_BY_YEAR
    query: str = ""

    def __post_init__(self):
        if self.grouping not in GROUPINGS:
            raise ValueError(f"Unknown grouping: {self.grouping!r}")
        object.__setattr__(self, "publications", tuple(self.publications))

    def visible(self) -> Tuple[Publication, ...]:
        return filter_publications(self.publications, self.query)

    def groups(self) -> List[PublicationGroup]:
        visible = self.visible()
        if self.grouping == Config.GROUP_BY_TYPE:
            return group_by_type(visible)
        return group_by_year(visible)

    def stats(self) -> Dict[str, int]:
        return summarize(self.publications)

    def with_query(self, query: str) -> "LibraryState":
        return replace(self, query=(query or "").strip())

    def with_grouping(self, grouping: str) -> "LibraryState":
        return replace(self, grouping=grouping)
