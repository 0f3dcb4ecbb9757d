"""
KB Notes Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── seed_catalog: The built-in catalog
    ├── sample_catalog: Two folders, one of them pointing at a missing key
    ├── empty_catalog: No folders at all
    ├── make_client: Factory for an HTTPX client around an app with a given catalog
    └── test_client: HTTPX AsyncClient around the default app
"""

import os
import tempfile

# Override settings for testing BEFORE any kbnotes imports
_test_dir = tempfile.mkdtemp(prefix="kbnotes_test_")
os.environ["DATABASE_PATH"] = os.path.join(_test_dir, "notes.db")
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("CATALOG_FILE", None)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from kbnotes.schemas.folder import Folder, Note  # noqa: E402
from kbnotes.services.catalog import NoteCatalog  # noqa: E402
from kbnotes.services.seed import default_catalog  # noqa: E402


@pytest.fixture
def seed_catalog():
    return default_catalog()


@pytest.fixture
def sample_catalog():
    """
    Two folders: "Linux" has two notes, "Orphan" points at a key with no
    notes collection.
    """
    return NoteCatalog(
        folders=[
            Folder(id=1, name="Linux", database="linux_kb"),
            Folder(id=2, name="Orphan", database="missing_kb"),
            Folder(id=3, name="Empty", database="empty_kb"),
        ],
        notes={
            "linux_kb": [
                Note.from_markdown(1, "Disks", "df -h\n"),
                Note.from_markdown(7, "Users", "who\n"),
            ],
            "empty_kb": [],
        },
    )


@pytest.fixture
def empty_catalog():
    return NoteCatalog()


@pytest.fixture
def make_client():
    """
    Factory for HTTP test clients bound to an app serving a given catalog.

    Usage:
        async with make_client(empty_catalog) as client:
            response = await client.get("/folders")
    """
    from kbnotes.main import create_app

    def _make(catalog=None):
        app = create_app(catalog=catalog)
        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://test")

    return _make


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient configured to talk to the default app (built-in seed).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from kbnotes.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
