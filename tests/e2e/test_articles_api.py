"""End-to-end tests for article endpoints."""

import asyncio
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from derecho.config import AuthSettings
from derecho.domain.model import Article
from derecho.domain.repository import ArticleRepository
from derecho.domain.value import ArticleId
from derecho.interface.api.app import create_app
from derecho.util.di.container import setup_di
from derecho.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    return TestClient(app_instance)


@pytest.fixture
def articles(container) -> dict[str, Article]:
    base = datetime(2024, 3, 1, 12, 0, 0)

    async def seed():
        async with container() as request_container:
            repo = await request_container.get(ArticleRepository)
            seeded = {}
            for days, title, published in (
                (0, "Tutela", True),
                (1, "Habeas corpus", True),
                (2, "Borrador", False),
            ):
                seeded[title] = await repo.save(
                    Article(
                        id=ArticleId(uuid4()),
                        title=title,
                        published=published,
                        created_at=base + timedelta(days=days),
                    )
                )
            return seeded

    return asyncio.run(seed())


@pytest.fixture
def auth_token(container) -> str:
    async def issue():
        auth_settings = await container.get(AuthSettings)
        return create_token(str(uuid4()), "ana@ejemplo.com", auth_settings)

    return asyncio.run(issue())


class TestListArticles:
    def test_published_newest_first(self, client, articles):
        response = client.get("/articles")

        assert response.status_code == 200
        data = response.json()
        assert [a["title"] for a in data["articles"]] == ["Habeas corpus", "Tutela"]
        assert data["total"] == 2

    def test_invalid_limit(self, client):
        response = client.get("/articles?limit=0")

        assert response.status_code == 400

    def test_has_liked_after_like(self, client, articles, auth_token):
        client.cookies.set("auth_token", auth_token)
        client.post(f"/articles/{articles['Tutela'].id}/like")

        data = client.get("/articles").json()

        liked = {a["title"]: a["has_liked"] for a in data["articles"]}
        assert liked == {"Habeas corpus": False, "Tutela": True}


class TestGetArticle:
    def test_published_article(self, client, articles):
        response = client.get(f"/articles/{articles['Tutela'].id}")

        assert response.status_code == 200
        assert response.json()["title"] == "Tutela"

    def test_unpublished_article_not_found(self, client, articles):
        response = client.get(f"/articles/{articles['Borrador'].id}")

        assert response.status_code == 404

    def test_missing_article_not_found(self, client):
        response = client.get(f"/articles/{uuid4()}")

        assert response.status_code == 404

    def test_comment_on_unpublished_article(self, client, articles, auth_token):
        client.cookies.set("auth_token", auth_token)

        response = client.post(
            f"/articles/{articles['Borrador'].id}/comments", json={"content": "Hola"}
        )

        assert response.status_code == 404

    def test_like_unpublished_article(self, client, articles, auth_token):
        client.cookies.set("auth_token", auth_token)

        response = client.post(f"/articles/{articles['Borrador'].id}/like")

        assert response.status_code == 404
