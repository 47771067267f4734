"""Sample data for a freshly started board."""

from __future__ import annotations

from bulletin_board.domain.entities.post import Post
from bulletin_board.ports.inbound import PostRepositoryPort


def sample_post_fields(index: int) -> tuple[str, str]:
    """Title and content of the index-th sample post (1-based)."""
    return f"投稿{index}", f"サンプル投稿{index}"


def seed_sample_posts(repository: PostRepositoryPort, count: int) -> list[Post]:
    """Create count sample posts through the normal create path.

    Args:
        repository: Target repository.
        count: Number of posts to create; 0 leaves the board empty.

    Returns:
        The created posts, in creation order.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    return [repository.create(*sample_post_fields(i)) for i in range(1, count + 1)]
