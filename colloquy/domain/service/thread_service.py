"""Thread assembly: flat comments to a nested forest."""

from dataclasses import dataclass, field
from typing import Collection, Iterator

import logfire

from colloquy.domain.model.comment import Comment
from colloquy.domain.repository import CommentRepository
from colloquy.domain.value import CommentId, CommentStatus, PostId

from .base import Service


@dataclass
class CommentNode:
    """Node in a comment thread.

    Holds a comment and its visible replies, oldest first.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)


def build_forest(comments: Collection[Comment]) -> list[CommentNode]:
    """Assemble flat comments into a forest of threads.

    A comment whose parent is absent from ``comments`` (deleted, or hidden
    from the caller) becomes a root, so approved replies are never hidden
    behind an invisible ancestor. Runs in O(n log n) for the sorts and never
    recurses, so thread depth is unbounded.

    Args:
        comments: Every visible comment of one post

    Returns:
        Root nodes ordered by created_at, each with nested children
    """
    nodes: dict[CommentId, CommentNode] = {
        c.id: CommentNode(comment=c) for c in comments
    }
    roots: list[CommentNode] = []

    for node in nodes.values():
        parent_id = node.comment.parent_id
        parent = nodes.get(parent_id) if parent_id else None
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)

    def created(node: CommentNode):
        return node.comment.created_at

    roots.sort(key=created)
    for node in nodes.values():
        node.children.sort(key=created)
    return roots


def iter_subtree(roots: list[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Walk a forest depth-first in display order without recursion.

    Yields:
        (node, depth) pairs, depth 0 for roots
    """
    stack = [(node, 0) for node in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


class ThreadService(Service):
    """Retrieves a post's full comment thread in one query."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def get_thread(
        self,
        post_id: PostId,
        visible_statuses: Collection[CommentStatus] | None = None,
    ) -> list[CommentNode]:
        """Build the comment forest of a post.

        Args:
            post_id: Post ID
            visible_statuses: Statuses the caller may see (None for all)

        Returns:
            Root nodes with their full nested replies
        """
        with logfire.span(
            "thread_service.get_thread",
            post_id=str(post_id),
            statuses=sorted(s.value for s in visible_statuses)
            if visible_statuses is not None
            else None,
        ):
            comments = await self.comment_repository.find_by_post(
                post_id=post_id, statuses=visible_statuses
            )
            logfire.info(
                "Fetched comments for thread", post_id=str(post_id), count=len(comments)
            )

            roots = build_forest(comments)
            logfire.info(
                "Built comment thread", post_id=str(post_id), root_count=len(roots)
            )
            return roots
