"""Unit tests for DeleteCommentUseCase."""

from uuid import uuid4

import pytest

from colloquy.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetThreadRequest,
    GetThreadUseCase,
)
from colloquy.config import ModerationSettings
from colloquy.domain.error import ForbiddenError, NotFoundError
from colloquy.domain.model import IdentifiedAuthor
from colloquy.domain.repository import CommentRepository
from colloquy.domain.service import (
    AccessControlService,
    CommentService,
    ReplyCountService,
)
from colloquy.domain.value import PostId
from tests.conftest import (
    ANONYMOUS,
    make_admin,
    make_comment,
    make_user,
    record_calls,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_admin_delete_keeps_replies_as_roots(self, unit_env):
        """Approved replies of a deleted comment stay in the thread."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await repo.create(make_comment(post_id))
        reply = await repo.create(make_comment(post_id, parent_id=parent.id))
        nested = await repo.create(make_comment(post_id, parent_id=reply.id))

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(parent.id), caller=make_admin())
        )
        thread = await get_thread.execute(
            GetThreadRequest(post_id=str(post_id), caller=ANONYMOUS)
        )

        # Assert
        assert response.deleted is True
        assert response.orphaned_children == 1
        assert [c.comment_id for c in thread.comments] == [str(reply.id)]
        assert [c.comment_id for c in thread.comments[0].children] == [str(nested.id)]

    @pytest.mark.asyncio
    async def test_delete_reply_refreshes_parent_count(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await repo.create(make_comment(post_id))
        reply = await repo.create(make_comment(post_id, parent_id=parent.id))
        await repo.create(make_comment(post_id, parent_id=parent.id))
        await repo.recompute_reply_count(parent.id)

        await use_case.execute(
            DeleteCommentRequest(comment_id=str(reply.id), caller=make_admin())
        )

        assert (await repo.find_by_id(parent.id)).reply_count == 1

    @pytest.mark.asyncio
    async def test_parent_is_locked_before_reply_is_deleted(
        self, unit_env, monkeypatch
    ):
        use_case = await unit_env.get(DeleteCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await repo.create(make_comment(post_id))
        reply = await repo.create(make_comment(post_id, parent_id=parent.id))
        calls = record_calls(
            monkeypatch, repo, "lock", "delete", "recompute_reply_count"
        )

        await use_case.execute(
            DeleteCommentRequest(comment_id=str(reply.id), caller=make_admin())
        )

        assert calls == ["lock", "delete", "recompute_reply_count"]

    @pytest.mark.asyncio
    async def test_owner_cannot_delete_by_default(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        owner = make_user()
        comment = await repo.create(
            make_comment(
                PostId(uuid4()), author=IdentifiedAuthor(user_id=owner.user_id)
            )
        )

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), caller=owner)
            )

        assert await repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_owner_can_delete_when_enabled(self, unit_env):
        # Arrange
        repo = await unit_env.get(CommentRepository)
        use_case = DeleteCommentUseCase(
            comment_service=await unit_env.get(CommentService),
            access_service=AccessControlService(
                ModerationSettings(owner_can_delete=True)
            ),
            reply_count_service=await unit_env.get(ReplyCountService),
        )
        owner = make_user()
        comment = await repo.create(
            make_comment(
                PostId(uuid4()), author=IdentifiedAuthor(user_id=owner.user_id)
            )
        )

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(comment.id), caller=owner)
        )

        # Assert
        assert response.deleted is True
        assert await repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_anonymous_cannot_delete(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)
        repo = await unit_env.get(CommentRepository)
        comment = await repo.create(make_comment(PostId(uuid4())))

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(comment.id), caller=ANONYMOUS)
            )

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(comment_id=str(uuid4()), caller=make_admin())
            )
