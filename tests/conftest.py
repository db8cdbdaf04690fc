"""Pytest configuration and fixtures."""
import os
import sys
from pathlib import Path
from typing import Generator

import pytest
from unittest.mock import MagicMock, patch

# Add the project root to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bibshelf.models import Publication

SAMPLE_BIBTEX = r"""
@string{icse = {Intl. Conf. on SW Eng.}}

@inproceedings{smith2021fast,
  title = {Fast {BibTeX} Parsing},
  author = {Smith, John and Doe, Jane},
  booktitle = icse,
  year = {2021},
  pages = {1--10},
  doi = {10.1234/fast.2021},
  note_award = {Best Paper Award; Distinguished Artifact},
}

@article{doe2020journal,
  title = {A Study of H$_{2}$O},
  author = {Jane Doe},
  journal = {Journal of Testing},
  year = {2020},
  volume = {12},
  number = {3},
  url = {http://example.org/landing},
  note = {PDF at https://example.org/papers/study.pdf},
}

@book{roe2021book,
  title = {The \textit{Complete} Guide},
  author = {Roe, Richard},
  publisher = {Test Press},
  year = {2021},
}

@misc{notes,
  title = {Lecture notes},
  author = {Smith, John},
}

@misc{arxiv2022,
  title = {An Upcoming Result},
  author = {Smith, John},
  eprint = {2201.00001},
  archiveprefix = {arXiv},
  year = {2022},
}

@techreport{undated,
  title = {Report Without Year},
  author = {Lab Team},
}
"""

@pytest.fixture
def sample_bibtex() -> str:
    """Return a small BibTeX document exercising the main features."""
    return SAMPLE_BIBTEX

@pytest.fixture
def sample_publication() -> Publication:
    """Return a sample publication for testing."""
    return Publication(
        key="smith2023sample",
        type="journal",
        title="A Sample Publication Title",
        authors="John Smith, Jane Doe",
        venue="Journal of Testing",
        year=2023,
        pages="123-145",
        publisher="Test Publisher",
        volume="12",
        number="3",
        doi="10.1234/test.2023.456",
        url="https://example.org/sample",
        raw="@article{smith2023sample,\n  title = {A Sample Publication Title},\n}",
    )

@pytest.fixture
def mock_requests_get() -> Generator[MagicMock, None, None]:
    """Mock for requests.get."""
    with patch('bibshelf.fetcher.requests.get') as mock_get:
        yield mock_get

@pytest.fixture(autouse=True)
def mock_environment_vars(tmp_path) -> None:
    """Set up test environment variables."""
    os.environ.update({
        "LOG_LEVEL": "WARNING",
        "BIBSHELF_LOG_DIR": str(tmp_path / "logs"),
    })
