"""Domain layer DI providers."""

from dishka import Scope, provide

from colloquy.config import AuthSettings, ModerationSettings
from colloquy.domain.repository import CommentRepository, PostDirectory
from colloquy.domain.service import (
    AccessControlService,
    CommentService,
    IdentityService,
    ModerationService,
    PostService,
    ReplyCountService,
    ThreadService,
)
from colloquy.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Services backed by a repository are REQUEST-scoped to align with the
    session lifecycle. Stateless policy services live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_identity_service(self, auth_settings: AuthSettings) -> IdentityService:
        """Provide identity resolution service."""
        return IdentityService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_moderation_service(self) -> ModerationService:
        """Provide moderation state machine."""
        return ModerationService()

    @provide(scope=Scope.APP)
    def get_access_service(
        self, moderation_settings: ModerationSettings
    ) -> AccessControlService:
        """Provide access control matrix."""
        return AccessControlService(moderation_settings=moderation_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        moderation_service: ModerationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            moderation_service=moderation_service,
        )

    @provide
    def get_reply_count_service(
        self, comment_repository: CommentRepository
    ) -> ReplyCountService:
        """Provide reply count maintenance service."""
        return ReplyCountService(comment_repository=comment_repository)

    @provide
    def get_thread_service(self, comment_repository: CommentRepository) -> ThreadService:
        """Provide thread assembly service."""
        return ThreadService(comment_repository=comment_repository)

    @provide
    def get_post_service(self, post_directory: PostDirectory) -> PostService:
        """Provide post lookup service."""
        return PostService(post_directory=post_directory)
