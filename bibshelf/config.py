"""Configuration settings."""
import os
from dataclasses import dataclass
from typing import Final, Tuple

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

@dataclass
class Config:
    """Configuration settings for bibshelf."""
    
    # Fetching
    REQUEST_TIMEOUT: Final[float] = float(os.getenv("BIBSHELF_REQUEST_TIMEOUT", "10"))
    # Tried in order after a direct request fails; {url} is URL-encoded
    PROXY_URLS: Final[Tuple[str, ...]] = (
        "https://api.allorigins.win/raw?url={url}",
        "https://corsproxy.io/?{url}",
    )
    
    # Logging
    LOG_DIR: Final[str] = os.getenv("BIBSHELF_LOG_DIR", "logs")
    LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO")
    
    # Display
    GROUP_BY_YEAR: Final[str] = "year"
    GROUP_BY_TYPE: Final[str] = "type"
    DEFAULT_GROUPING: Final[str] = os.getenv("BIBSHELF_GROUPING", GROUP_BY_YEAR)
    
    # Export
    EXPORT_BASENAME: Final[str] = os.getenv("BIBSHELF_EXPORT_BASENAME", "publications")
    
    # Web app
    FLASK_SECRET: Final[str] = os.getenv("FLASK_SECRET", "dev-secret-change-me")
    RATELIMIT_DEFAULT: Final[str] = os.getenv("BIBSHELF_RATELIMIT", "200 per day;50 per hour")
