"""Dependency injection container for the Bulletin Board."""

from dataclasses import dataclass

import structlog
from opentelemetry import trace

from bulletin_board import __version__
from bulletin_board.application.instrumented_repository import InstrumentedPostRepository
from bulletin_board.application.seed import seed_sample_posts
from bulletin_board.domain.services.post_repository import PostRepository
from bulletin_board.infrastructure.config import Config, get_config
from bulletin_board.infrastructure.logging import setup_logging
from bulletin_board.infrastructure.metrics import BulletinBoardMetrics, get_metrics
from bulletin_board.infrastructure.tracing import setup_tracing


@dataclass
class Container:
    """Dependency injection container for bulletin board components."""

    config: Config
    logger: structlog.stdlib.BoundLogger
    tracer: trace.Tracer
    metrics: BulletinBoardMetrics
    repository: InstrumentedPostRepository

    _instance: "Container | None" = None

    @classmethod
    def create(cls) -> "Container":
        """Create and initialize the container with all dependencies."""
        if cls._instance is not None:
            return cls._instance

        config = get_config()
        logger = setup_logging()
        tracer = setup_tracing()
        metrics = get_metrics()

        repository = InstrumentedPostRepository(
            PostRepository(id_policy=config.storage.id_policy),
            metrics=metrics,
            logger=logger.bind(component="post_repository"),
            tracer=tracer,
        )
        seeded = seed_sample_posts(repository, config.storage.seed_sample_posts)
        metrics.system_info.info(
            {
                "version": __version__,
                "id_policy": config.storage.id_policy.value,
                "environment": config.observability.environment,
            }
        )

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            repository=repository,
        )

        logger.info(
            "bulletin_board_container_initialized",
            environment=config.observability.environment,
            id_policy=config.storage.id_policy.value,
            seeded_posts=len(seeded),
        )

        return cls._instance

    @classmethod
    def get(cls) -> "Container":
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
