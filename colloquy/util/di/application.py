"""Application layer DI providers."""

from dishka import Scope, provide

from colloquy.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetThreadUseCase,
    ModerateCommentUseCase,
    UpdateCommentUseCase,
)
from colloquy.domain.service import (
    AccessControlService,
    CommentService,
    ModerationService,
    PostService,
    ReplyCountService,
    ThreadService,
)
from colloquy.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        access_service: AccessControlService,
        reply_count_service: ReplyCountService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            access_service=access_service,
            reply_count_service=reply_count_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            access_service=access_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
        moderation_service: ModerationService,
        reply_count_service: ReplyCountService,
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(
            comment_service=comment_service,
            access_service=access_service,
            moderation_service=moderation_service,
            reply_count_service=reply_count_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
        reply_count_service: ReplyCountService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            access_service=access_service,
            reply_count_service=reply_count_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        thread_service: ThreadService,
        access_service: AccessControlService,
        moderation_service: ModerationService,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service,
            access_service=access_service,
            moderation_service=moderation_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self,
        comment_service: CommentService,
        access_service: AccessControlService,
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service,
            access_service=access_service,
        )
