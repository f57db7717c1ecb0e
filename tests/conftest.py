"""Shared fixtures: fake Groq clients and an app client with the generator swapped out."""

from __future__ import annotations

import json
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from ai_service import ContentGenerator
from main import app, get_generator_factory

FULL_RESULT = {
    "One liner": "Fresh bread delivered before breakfast",
    "Value Proposition": "Artisan loaves baked overnight and at your door by 7am.",
    "Site Map": ["Home", "Menu", "Subscriptions", "About", "Contact"],
    "Blog Ideas": ["Why sourdough needs 48 hours", "Five breakfasts built on rye"],
    "SEO Terms": ["bread delivery", "artisan bakery", "sourdough subscription"],
}


def make_completion(content: str | None) -> MagicMock:
    """Build an object shaped like a chat-completion response."""
    completion = MagicMock()
    completion.choices[0].message.content = content
    return completion


def make_client(content: str | None = None, *, error: Exception | None = None) -> MagicMock:
    """Fake AsyncGroq client whose ``chat.completions.create`` is an AsyncMock."""
    client = MagicMock()
    if error is not None:
        client.chat.completions.create = AsyncMock(side_effect=error)
    else:
        client.chat.completions.create = AsyncMock(return_value=make_completion(content))
    return client


@pytest.fixture()
def fake_client() -> MagicMock:
    return make_client(json.dumps(FULL_RESULT))


@pytest.fixture()
def client(fake_client: MagicMock) -> Generator[TestClient, None, None]:
    """TestClient whose generators all share ``fake_client``."""
    app.dependency_overrides[get_generator_factory] = lambda: (
        lambda: ContentGenerator(api_key="test-key", client=fake_client)
    )
    app.state.sessions.clear()

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.sessions.clear()
