"""Infrastructure layer - cross-cutting concerns."""

from bulletin_board.infrastructure.config import Config, get_config
from bulletin_board.infrastructure.logging import setup_logging, get_logger
from bulletin_board.infrastructure.metrics import BulletinBoardMetrics, get_metrics
from bulletin_board.infrastructure.tracing import setup_tracing, get_tracer

__all__ = [
    "Config",
    "get_config",
    "setup_logging",
    "get_logger",
    "BulletinBoardMetrics",
    "get_metrics",
    "setup_tracing",
    "get_tracer",
]
