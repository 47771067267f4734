"""Prometheus metrics for the Bulletin Board."""

from prometheus_client import Counter, Gauge, Histogram, Info, CollectorRegistry, REGISTRY


class BulletinBoardMetrics:
    """Metrics collector for the bulletin board."""

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        self.registry = registry

        # Repository Operations
        self.operations = Counter(
            "bbs_repository_operations_total",
            "Total repository operations",
            ["operation", "outcome"],
            registry=registry,
        )
        self.operation_latency = Histogram(
            "bbs_repository_operation_latency_seconds",
            "Repository operation latency",
            ["operation"],
            buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
            registry=registry,
        )

        # Storage
        self.posts_stored = Gauge(
            "bbs_posts_stored",
            "Number of posts currently stored",
            registry=registry,
        )
        self.posts_created = Counter(
            "bbs_posts_created_total",
            "Total posts created",
            registry=registry,
        )
        self.posts_deleted = Counter(
            "bbs_posts_deleted_total",
            "Total posts deleted",
            registry=registry,
        )

        # Front ends
        self.requests = Counter(
            "bbs_requests_total",
            "Total requests served per front end",
            ["protocol", "status"],
            registry=registry,
        )

        # System Info
        self.system_info = Info(
            "bbs",
            "Bulletin board service information",
            registry=registry,
        )


_metrics: BulletinBoardMetrics | None = None


def get_metrics() -> BulletinBoardMetrics:
    """Get the singleton metrics instance."""
    global _metrics
    if _metrics is None:
        _metrics = BulletinBoardMetrics()
    return _metrics
