"""JSON Importer for the application's export format."""
import json
import logging
from typing import Any, Dict, Optional, Tuple
from ..models import Publication
from .base import PublicationImporter

logger = logging.getLogger(__name__)

class JSONImporter(PublicationImporter):
    """Parses JSON files exported by this application."""
    
    format_name = "json"
    
    def parse(self, content: str) -> Tuple[Publication, ...]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON document: {e}")
            return ()
        
        # handle wrapper object
        if isinstance(data, dict):
            for key in ('publications', 'items', 'entries'):
                if isinstance(data.get(key), list):
                    data = data[key]
                    break
            else:
                data = [data]
        
        if not isinstance(data, list):
            return ()
        
        publications = []
        for index, item in enumerate(data, start=1):
            if isinstance(item, dict):
                pub = self._dict_to_pub(item, index)
                if pub:
                    publications.append(pub)
        return tuple(publications)
    
    def _dict_to_pub(self, item: Dict[str, Any], index: int) -> Optional[Publication]:
        """Convert a dictionary to a Publication; items without a title are skipped."""
        d = {k.lower(): v for k, v in item.items()}
        if not d.get('title'):
            return None
        if not d.get('key'):
            d['key'] = f"json_entry_{index}"
        d['source'] = 'json'
        return Publication.from_dict(d)
