"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from derecho.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from derecho.domain.error import NotFoundError
from derecho.domain.model import Article
from derecho.domain.repository import ArticleRepository
from derecho.domain.value import ArticleId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_article(unit_env) -> Article:
    article_repo = await unit_env.get(ArticleRepository)
    return await article_repo.save(
        Article(id=ArticleId(uuid4()), title="El debido proceso", published=True)
    )


class TestCreateCommentUseCase:
    @pytest.mark.asyncio
    async def test_comment_increments_article_counter(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        article = await seed_article(unit_env)

        response = await use_case.execute(
            CreateCommentRequest(
                article_id=str(article.id),
                content="Excelente artículo",
                author_id=str(uuid4()),
            )
        )

        assert response.content == "Excelente artículo"
        assert response.parent_id is None
        assert (await article_repo.find_by_id(article.id)).comments_count == 1

    @pytest.mark.asyncio
    async def test_reply(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        article = await seed_article(unit_env)
        parent = await use_case.execute(
            CreateCommentRequest(
                article_id=str(article.id), content="Pregunta", author_id=str(uuid4())
            )
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                article_id=str(article.id),
                content="Respuesta",
                author_id=str(uuid4()),
                parent_id=parent.comment_id,
            )
        )

        assert reply.parent_id == parent.comment_id

    @pytest.mark.asyncio
    async def test_missing_article(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=str(uuid4()), content="Hola", author_id=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_unpublished_article(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        draft = await article_repo.save(
            Article(id=ArticleId(uuid4()), title="Borrador")
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    article_id=str(draft.id), content="Hola", author_id=str(uuid4())
                )
            )

        assert (await article_repo.find_by_id(draft.id)).comments_count == 0
