from typing import List, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from servicedir.api.deps import get_text_generator
from servicedir.core.category_tags import get_category_tags
from servicedir.core.errors import UpstreamFailure
from servicedir.db.mongo import get_db
from servicedir.main import app
from servicedir.schemas.ai import LinkSummary

from tests.factories import VOCABULARY


class FakeGenerator:
    """Stands in for the hosted model; links containing 'fail' error out."""

    def __init__(self):
        self.calls: List[str] = []

    async def summarize_link(self, url: str, allowed_tags: Optional[List[str]] = None) -> LinkSummary:
        self.calls.append(url)
        if "fail" in url:
            raise UpstreamFailure("openai", "simulated outage")
        suggested = ["Student visas", "Not in vocabulary"]
        if allowed_tags is not None:
            suggested = [t for t in suggested if t in allowed_tags]
        return LinkSummary(
            title=f"Summary of {url}",
            description="A generated description of the linked page.",
            steps=["Open the page", "Follow the instructions"],
            suggested_tags=suggested,
        )

    async def generate_icon(self, url: str) -> str:
        return "data:image/png;base64,AAAA"

@pytest.fixture
def db():
    return AsyncMongoMockClient()["servicedir_test"]

@pytest.fixture
def generator():
    return FakeGenerator()

@pytest.fixture
async def client(db, generator):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_category_tags] = lambda: VOCABULARY
    app.dependency_overrides[get_text_generator] = lambda: generator
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
