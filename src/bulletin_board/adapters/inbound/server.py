"""HTTP server exposing both protocol front ends over one repository.

Usage:
    from bulletin_board.adapters.inbound.server import create_app

    app = create_app()
    # Run with: uvicorn bulletin_board.adapters.inbound.server:create_app --factory --port 8080
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from pydantic import BaseModel

from bulletin_board import __version__
from bulletin_board.adapters.inbound.graphql_api import create_graphql_router
from bulletin_board.adapters.inbound.rest_api import create_rest_router, register_error_handlers
from bulletin_board.infrastructure.config import Config, get_config
from bulletin_board.infrastructure.metrics import BulletinBoardMetrics
from bulletin_board.ports.inbound import PostRepositoryPort


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = __version__
    posts: int


def create_app(
    repository: Optional[PostRepositoryPort] = None,
    metrics: Optional[BulletinBoardMetrics] = None,
    config: Optional[Config] = None,
) -> FastAPI:
    """Create the FastAPI application with REST and GraphQL endpoints.

    Without arguments every dependency comes from the DI container, which
    builds an instrumented repository from configuration.

    Args:
        repository: Repository shared by both adapters.
        metrics: Metrics collector; a private registry is used when omitted
            together with an explicit repository.
        config: Configuration; defaults to get_config().

    Returns:
        Configured FastAPI application.
    """
    if repository is None:
        from bulletin_board.infrastructure.container import get_container

        container = get_container()
        repository = container.repository
        metrics = metrics or container.metrics
        config = config or container.config

    config = config or get_config()
    metrics = metrics or BulletinBoardMetrics(registry=CollectorRegistry())
    server = config.server

    app = FastAPI(
        title="Bulletin Board API",
        description="Post management over REST and GraphQL",
        version=__version__,
    )

    app.include_router(create_rest_router(repository, prefix=server.rest_prefix))
    app.include_router(
        create_graphql_router(
            repository,
            path=server.graphql_path,
            graphql_ide=server.graphql_ide,
        ),
        tags=["GraphQL"],
    )
    register_error_handlers(app)

    def protocol_of(path: str) -> str:
        if path.startswith(server.rest_prefix):
            return "rest"
        if path.startswith(server.graphql_path):
            return "graphql"
        return "system"

    @app.middleware("http")
    async def count_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        protocol = protocol_of(request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            # Rendered as a 500 by the outermost error middleware
            metrics.requests.labels(protocol=protocol, status="500").inc()
            raise
        metrics.requests.labels(protocol=protocol, status=str(response.status_code)).inc()
        return response

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check() -> HealthResponse:
        """Check service health."""
        return HealthResponse(status="healthy", posts=repository.stats().total_posts)

    @app.get("/metrics", tags=["System"])
    async def prometheus_metrics() -> Response:
        """Prometheus exposition of the service metrics."""
        return Response(content=generate_latest(metrics.registry), media_type=CONTENT_TYPE_LATEST)

    return app


def run_server(config: Optional[Config] = None) -> None:
    """Run the API server with uvicorn.

    Args:
        config: Configuration; defaults to get_config().
    """
    import uvicorn

    config = config or get_config()
    app = create_app(config=config)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


def main() -> None:
    run_server()


if __name__ == "__main__":
    main()
