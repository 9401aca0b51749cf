"""Unit tests for GetArticleUseCase."""

from uuid import uuid4

import pytest

from derecho.application.usecase.article import GetArticleRequest, GetArticleUseCase
from derecho.domain.model import Article
from derecho.domain.repository import ArticleRepository
from derecho.domain.service import LikeService
from derecho.domain.value import ArticleId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetArticleUseCase:
    @pytest.mark.asyncio
    async def test_published_article(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(
            Article(
                id=ArticleId(uuid4()),
                title="La acción de tutela",
                content="Texto completo",
                category="Constitucional",
                published=True,
            )
        )

        response = await use_case.execute(GetArticleRequest(article_id=str(article.id)))

        assert response is not None
        assert response.title == "La acción de tutela"
        assert response.content == "Texto completo"
        assert response.category == "Constitucional"
        assert response.has_liked is False

    @pytest.mark.asyncio
    async def test_has_liked(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        like_service = await unit_env.get(LikeService)
        article = await article_repo.save(
            Article(id=ArticleId(uuid4()), title="Amparo", published=True)
        )
        user_id = uuid4()
        await like_service.toggle_like(article.id, UserId(user_id))

        response = await use_case.execute(
            GetArticleRequest(article_id=str(article.id), user_id=str(user_id))
        )

        assert response.has_liked is True
        assert response.likes_count == 1

    @pytest.mark.asyncio
    async def test_unpublished_article_is_hidden(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        draft = await article_repo.save(Article(id=ArticleId(uuid4()), title="Borrador"))

        assert await use_case.execute(GetArticleRequest(article_id=str(draft.id))) is None

    @pytest.mark.asyncio
    async def test_missing_article(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)

        assert await use_case.execute(GetArticleRequest(article_id=str(uuid4()))) is None
