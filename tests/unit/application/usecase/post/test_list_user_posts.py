"""Unit tests for ListUserPostsUseCase."""

import pytest
from pydantic import ValidationError

from vidtube.application.usecase.post import ListUserPostsRequest, ListUserPostsUseCase
from vidtube.domain.error import NotFoundError
from vidtube.domain.repository import PostRepository, UserRepository
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListUserPostsUseCase:
    """A user's posts can be listed by ID or by username."""

    @pytest.mark.asyncio
    async def test_lists_posts_by_username(self, unit_env):
        use_case = await unit_env.get(ListUserPostsUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        author = await user_repo.save(make_user("author"))
        other = await user_repo.save(make_user("other"))
        older = await post_repo.save(make_post(author.id, "first", minutes_ago=5))
        newer = await post_repo.save(make_post(author.id, "second"))
        await post_repo.save(make_post(other.id, "not mine"))

        response = await use_case.execute(ListUserPostsRequest(username="author"))

        assert [p.id for p in response.docs] == [str(newer.id), str(older.id)]
        assert response.total_docs == 2

    @pytest.mark.asyncio
    async def test_username_and_id_give_the_same_page(self, unit_env):
        use_case = await unit_env.get(ListUserPostsUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)

        author = await user_repo.save(make_user("author"))
        await post_repo.save(make_post(author.id, "hello"))

        by_name = await use_case.execute(ListUserPostsRequest(username="author"))
        by_id = await use_case.execute(ListUserPostsRequest(user_id=str(author.id)))

        assert by_name == by_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["nobody", "Not A Username!"])
    async def test_unknown_username_raises_not_found(self, unit_env, username):
        use_case = await unit_env.get(ListUserPostsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListUserPostsRequest(username=username))

    def test_request_needs_exactly_one_author_reference(self):
        with pytest.raises(ValidationError):
            ListUserPostsRequest()
        with pytest.raises(ValidationError):
            ListUserPostsRequest(user_id="x", username="author")
