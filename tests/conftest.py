"""Pytest configuration and shared fixtures for Bulletin Board tests."""

from typing import Generator
from unittest.mock import patch

import pytest
import structlog
from fastapi.testclient import TestClient
from opentelemetry import trace
from prometheus_client import CollectorRegistry

from bulletin_board.adapters.inbound.server import create_app
from bulletin_board.application.instrumented_repository import InstrumentedPostRepository
from bulletin_board.domain.entities.post import Post
from bulletin_board.domain.services.post_repository import PostRepository
from bulletin_board.domain.value_objects.identifiers import PostId
from bulletin_board.infrastructure.config import Config, get_config
from bulletin_board.infrastructure.container import Container
from bulletin_board.infrastructure.metrics import BulletinBoardMetrics


@pytest.fixture(autouse=True)
def reset_container():
    """Reset the DI container before each test."""
    Container.reset()
    get_config.cache_clear()
    yield
    Container.reset()
    get_config.cache_clear()


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config()


@pytest.fixture
def sample_posts() -> list[Post]:
    """Three posts as the REST tests of the original board seeded them."""
    return [
        Post(id=PostId(1), title="投稿1", content="これはサンプル投稿1です"),
        Post(id=PostId(2), title="投稿2", content="これはサンプル投稿2です"),
        Post(id=PostId(3), title="投稿3", content="これはサンプル投稿3です"),
    ]


@pytest.fixture
def repository() -> PostRepository:
    """Provide an empty repository."""
    return PostRepository()


@pytest.fixture
def seeded_repository(sample_posts: list[Post]) -> PostRepository:
    """Provide a repository holding the sample posts."""
    return PostRepository(posts=sample_posts)


@pytest.fixture
def metrics() -> BulletinBoardMetrics:
    """Provide metrics bound to a fresh registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    return BulletinBoardMetrics(registry=CollectorRegistry())


@pytest.fixture
def instrumented_repository(
    seeded_repository: PostRepository, metrics: BulletinBoardMetrics
) -> InstrumentedPostRepository:
    """Provide the sample repository wrapped with observability."""
    return InstrumentedPostRepository(seeded_repository, metrics=metrics)


@pytest.fixture
def client(
    instrumented_repository: InstrumentedPostRepository,
    metrics: BulletinBoardMetrics,
    test_config: Config,
) -> Generator[TestClient, None, None]:
    """Provide a test client for the full application over the sample posts."""
    app = create_app(instrumented_repository, metrics=metrics, config=test_config)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def container(test_config: Config) -> Container:
    """Provide a configured container for testing."""
    with (
        patch("bulletin_board.infrastructure.container.get_config", return_value=test_config),
        patch(
            "bulletin_board.infrastructure.container.setup_logging",
            return_value=structlog.get_logger(),
        ),
        patch(
            "bulletin_board.infrastructure.container.setup_tracing",
            return_value=trace.get_tracer("bulletin_board.tests"),
        ),
        patch(
            "bulletin_board.infrastructure.container.get_metrics",
            return_value=BulletinBoardMetrics(registry=CollectorRegistry()),
        ),
    ):
        return Container.create()


# Pytest markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "concurrency: mark test as multi-threaded test")
