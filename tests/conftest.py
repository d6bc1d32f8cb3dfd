"""
Root pytest configuration and fixtures for the ecoledirecte client.
"""

from pathlib import Path
import sys

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ecoledirecte._http import HTTPClient  # noqa: E402
from ecoledirecte._session import Session  # noqa: E402

BASE = "https://api.test.ecoledirecte.com"
VERSION = "9.9.9"


@pytest.fixture
def session():
    """Logged-in session for student 1234."""
    s = Session()
    s.login("tok_abc", student={"id": 1234})
    return s


@pytest.fixture
def http(session):
    return HTTPClient(session, base_url=BASE, version=VERSION)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "ECOLEDIRECTE_API_URL",
        "ECOLEDIRECTE_API_VERSION",
        "ECOLEDIRECTE_TOKEN",
        "ECOLEDIRECTE_STUDENT_ID",
    ):
        monkeypatch.delenv(name, raising=False)
