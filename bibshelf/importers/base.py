"""Base class for publication importers."""
from abc import ABC, abstractmethod
from typing import Tuple
from ..models import Publication

class PublicationImporter(ABC):
    """Abstract base class for importing publications from text."""
    
    #: label used in user-facing messages
    format_name: str = ""
    
    @abstractmethod
    def parse(self, content: str) -> Tuple[Publication, ...]:
        """Parse string content into Publications."""
        pass
