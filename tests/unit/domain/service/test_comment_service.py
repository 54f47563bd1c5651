"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from colloquy.domain.error import NotFoundError
from colloquy.domain.model import IdentifiedAuthor
from colloquy.domain.repository import CommentRepository
from colloquy.domain.service import CommentService
from colloquy.domain.value import CommentId, CommentStatus, PostId, UserId
from tests.conftest import make_anonymous_author, make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_registered_author_is_approved(self, unit_env):
        """Registered users are published immediately."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        author = IdentifiedAuthor(user_id=UserId(uuid4()))

        # Act
        result = await comment_service.create_comment(
            post_id=post_id,
            author=author,
            content="First!",
            ip_address="10.0.0.1",
            user_agent="pytest",
        )

        # Assert
        assert result.status == CommentStatus.APPROVED
        assert result.parent_id is None
        assert result.reply_count == 0
        assert result.like_count == 0
        assert result.ip_address == "10.0.0.1"
        assert result.user_agent == "pytest"
        assert result.created_at == result.updated_at

        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_anonymous_author_is_pending(self, unit_env):
        """Anonymous submissions wait for moderation."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        result = await comment_service.create_comment(
            post_id=PostId(uuid4()),
            author=make_anonymous_author(),
            content="Hello from a guest",
        )

        # Assert
        assert result.status == CommentStatus.PENDING
        assert result.ip_address == "unknown"
        assert result.user_agent == "unknown"

    @pytest.mark.asyncio
    async def test_reply_to_existing_parent(self, unit_env):
        """Replies keep the parent pointer."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await comment_repo.create(make_comment(post_id))

        # Act
        reply = await comment_service.create_comment(
            post_id=post_id,
            author=IdentifiedAuthor(user_id=UserId(uuid4())),
            content="Reply",
            parent_id=parent.id,
        )

        # Assert
        assert reply.parent_id == parent.id
        assert reply.post_id == post_id

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replying to a comment that doesn't exist fails."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment(
                post_id=PostId(uuid4()),
                author=IdentifiedAuthor(user_id=UserId(uuid4())),
                content="Reply",
                parent_id=CommentId(uuid4()),
            )

        assert exc_info.value.resource == "Parent comment"

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises_not_found(self, unit_env):
        """A reply must stay on its parent's post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.create(make_comment(PostId(uuid4())))

        # Act / Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                post_id=PostId(uuid4()),
                author=IdentifiedAuthor(user_id=UserId(uuid4())),
                content="Reply",
                parent_id=parent.id,
            )


class TestUpdates:
    """Tests for update_content and update_status."""

    @pytest.mark.asyncio
    async def test_update_content_keeps_everything_else(self, unit_env):
        """Editing never touches status, author, post or parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await comment_repo.create(make_comment(post_id))
        original = await comment_repo.create(
            make_comment(
                post_id,
                parent_id=parent.id,
                status=CommentStatus.PENDING,
                author=make_anonymous_author(),
            )
        )

        # Act
        updated = await comment_service.update_content(original.id, "Edited")

        # Assert
        assert updated.content == "Edited"
        assert updated.status == original.status
        assert updated.author == original.author
        assert updated.post_id == original.post_id
        assert updated.parent_id == original.parent_id
        assert updated.created_at == original.created_at
        assert updated.updated_at >= original.updated_at

    @pytest.mark.asyncio
    async def test_update_status_keeps_content(self, unit_env):
        """Moderating never touches content."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        original = await comment_repo.create(
            make_comment(PostId(uuid4()), status=CommentStatus.PENDING)
        )

        # Act
        updated = await comment_service.update_status(
            original.id, CommentStatus.SPAM
        )

        # Assert
        assert updated.status == CommentStatus.SPAM
        assert updated.content == original.content

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_content(CommentId(uuid4()), "Edited")
        with pytest.raises(NotFoundError):
            await comment_service.update_status(
                CommentId(uuid4()), CommentStatus.APPROVED
            )


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_leaves_replies_in_place(self, unit_env):
        """Replies survive with a dangling parent pointer."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        parent = await comment_repo.create(make_comment(post_id))
        child_a = await comment_repo.create(make_comment(post_id, parent_id=parent.id))
        child_b = await comment_repo.create(
            make_comment(post_id, parent_id=parent.id, status=CommentStatus.PENDING)
        )

        # Act
        orphaned = await comment_service.delete_comment(parent.id)

        # Assert
        assert orphaned == 2
        assert await comment_repo.find_by_id(parent.id) is None
        assert (await comment_repo.find_by_id(child_a.id)).parent_id == parent.id
        assert (await comment_repo.find_by_id(child_b.id)).parent_id == parent.id

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(CommentId(uuid4()))


class TestGetComments:
    """Tests for lookups."""

    @pytest.mark.asyncio
    async def test_require_comment_raises_for_missing(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.get_comment_by_id(CommentId(uuid4())) is None
        with pytest.raises(NotFoundError):
            await comment_service.require_comment(CommentId(uuid4()))
