"""Application layer for the bulletin board.

Exports:
    - InstrumentedPostRepository: repository wrapper adding logs, metrics and spans
    - seed_sample_posts: populate a board with sample posts
"""

from bulletin_board.application.instrumented_repository import InstrumentedPostRepository
from bulletin_board.application.seed import sample_post_fields, seed_sample_posts

__all__ = [
    "InstrumentedPostRepository",
    "sample_post_fields",
    "seed_sample_posts",
]
