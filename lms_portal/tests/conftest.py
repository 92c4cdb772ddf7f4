"""
Test configuration and fixtures
"""
import os
import tempfile
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Set testing environment before the settings object is built
os.environ["ENVIRONMENT"] = "testing"
os.environ["STORAGE_TYPE"] = "local"
os.environ["STORAGE_BASE_PATH"] = tempfile.mkdtemp(prefix="lms-portal-")
os.environ["PLACEHOLDER_EXTRACTION_DELAY_MS"] = "0"
os.environ["FORM_SUBMIT_DELAY_MS"] = "0"

from portal.main import create_app
from portal.services.library import DocumentLibrary, LocalFileStore


@pytest_asyncio.fixture
async def library(tmp_path) -> DocumentLibrary:
    """A document library backed by a fresh temporary directory"""
    store = LocalFileStore(tmp_path / "storage")
    await store.connect()
    return DocumentLibrary(store, key="tutor_documents")


@pytest.fixture
def app(library: DocumentLibrary):
    """A fresh application whose library lives in the test's temp directory"""
    application = create_app()
    application.state.document_library = library
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the application"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
