"""Observability wrapper around a post repository.

Implements PostRepositoryPort by delegation, adding a span, a latency
observation, an outcome counter and a log line per operation. Errors are
re-raised unchanged so adapters see exactly what the repository raised.

References:
    - DESIGN.md (Instrumented repository)
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from bulletin_board.domain.entities.post import Post
from bulletin_board.domain.value_objects.errors import PostError
from bulletin_board.infrastructure.logging import get_logger
from bulletin_board.infrastructure.metrics import BulletinBoardMetrics
from bulletin_board.infrastructure.tracing import get_tracer
from bulletin_board.ports.inbound import PostRepositoryPort, RepositoryStats


class InstrumentedPostRepository:
    """Post repository with logging, metrics and tracing."""

    def __init__(
        self,
        inner: PostRepositoryPort,
        metrics: BulletinBoardMetrics,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
        tracer: Optional[trace.Tracer] = None,
    ) -> None:
        """Initialize the wrapper.

        Args:
            inner: Repository doing the actual work.
            metrics: Metrics collector.
            logger: Structured logger; defaults to the structlog global.
            tracer: Tracer; defaults to the global tracer provider.
        """
        self._inner = inner
        self._metrics = metrics
        self._logger = logger or get_logger("post_repository")
        self._tracer = tracer or get_tracer()
        self._gauge_lock = threading.Lock()
        self._metrics.posts_stored.set(inner.stats().total_posts)

    def list(self, page: int, per_page: int) -> list[Post]:
        with self._operation("list", page=page, per_page=per_page):
            return self._inner.list(page, per_page)

    def get(self, post_id: int) -> Post:
        with self._operation("get", post_id=post_id):
            return self._inner.get(post_id)

    def create(self, title: str, content: str) -> Post:
        with self._operation("create"):
            post = self._inner.create(title, content)
        self._metrics.posts_created.inc()
        self._refresh_gauge()
        self._logger.info("post_created", post_id=post.id)
        return post

    def update(self, post_id: int, title: str, content: str) -> Post:
        with self._operation("update", post_id=post_id):
            post = self._inner.update(post_id, title, content)
        self._logger.info("post_updated", post_id=post.id)
        return post

    def delete(self, post_id: int) -> bool:
        with self._operation("delete", post_id=post_id):
            deleted = self._inner.delete(post_id)
        self._metrics.posts_deleted.inc()
        self._refresh_gauge()
        self._logger.info("post_deleted", post_id=post_id)
        return deleted

    def stats(self) -> RepositoryStats:
        return self._inner.stats()

    def __len__(self) -> int:
        return self._inner.stats().total_posts

    def _refresh_gauge(self) -> None:
        # Read and set under one lock; the gauge never falls back to an older count
        with self._gauge_lock:
            self._metrics.posts_stored.set(self._inner.stats().total_posts)

    @contextmanager
    def _operation(self, name: str, **attributes: Any) -> Iterator[None]:
        """Trace, time and count one repository call."""
        start = time.perf_counter()
        with self._tracer.start_as_current_span(
            f"post_repository.{name}",
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            for key, value in attributes.items():
                span.set_attribute(f"bbs.{key}", str(value))
            try:
                yield
            except PostError as e:
                span.set_status(Status(StatusCode.ERROR, e.message))
                span.set_attribute("bbs.error_kind", e.kind.value)
                self._metrics.operations.labels(operation=name, outcome=e.kind.value).inc()
                self._logger.warning(
                    "post_operation_failed",
                    operation=name,
                    kind=e.kind.value,
                    message=e.message,
                    detail=e.detail,
                    **attributes,
                )
                raise
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                self._metrics.operations.labels(operation=name, outcome="Internal").inc()
                self._logger.exception("post_operation_crashed", operation=name, **attributes)
                raise
            else:
                self._metrics.operations.labels(operation=name, outcome="ok").inc()
            finally:
                self._metrics.operation_latency.labels(operation=name).observe(
                    time.perf_counter() - start
                )
