"""Domain services."""

from .access_service import PUBLIC_STATUSES, AccessControlService
from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityService
from .moderation_service import ModerationService
from .post_service import PostService
from .reply_count_service import ReplyCountService
from .thread_service import CommentNode, ThreadService, build_forest, iter_subtree
from .validation import CommentPayload, validate_comment_payload, validate_content

__all__ = [
    "AccessControlService",
    "CommentNode",
    "CommentPayload",
    "CommentService",
    "IdentityService",
    "ModerationService",
    "PUBLIC_STATUSES",
    "PostService",
    "ReplyCountService",
    "Service",
    "ThreadService",
    "build_forest",
    "iter_subtree",
    "validate_comment_payload",
    "validate_content",
]
