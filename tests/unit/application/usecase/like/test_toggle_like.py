"""Unit tests for like use cases."""

from uuid import uuid4

import pytest

from derecho.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from derecho.application.usecase.like.get_like_status import GetLikeStatusRequest
from derecho.application.usecase.like.toggle_like import ToggleLikeRequest
from derecho.domain.model import Article
from derecho.domain.repository import ArticleRepository
from derecho.domain.value import ArticleId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLikeUseCases:
    @pytest.mark.asyncio
    async def test_toggle_and_status(self, unit_env):
        toggle = await unit_env.get(ToggleLikeUseCase)
        get_status = await unit_env.get(GetLikeStatusUseCase)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(
            Article(id=ArticleId(uuid4()), title="Contratos estatales", published=True)
        )
        user_id = str(uuid4())

        liked = await toggle.execute(
            ToggleLikeRequest(article_id=str(article.id), user_id=user_id)
        )
        as_user = await get_status.execute(
            GetLikeStatusRequest(article_id=str(article.id), user_id=user_id)
        )
        anonymous = await get_status.execute(
            GetLikeStatusRequest(article_id=str(article.id))
        )

        assert liked.liked
        assert liked.likes_count == 1
        assert as_user.liked
        assert not anonymous.liked
        assert anonymous.likes_count == 1

        unliked = await toggle.execute(
            ToggleLikeRequest(article_id=str(article.id), user_id=user_id)
        )
        assert not unliked.liked
        assert unliked.likes_count == 0
