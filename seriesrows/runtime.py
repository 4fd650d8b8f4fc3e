"""Runtime wiring: logging, self-metrics and configured row ordering."""
import logging
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from seriesrows.config import Config, load_config
from seriesrows.rows import Rows, sort_rows
from seriesrows.self_metrics import SelfMetrics, build_self_metrics
from seriesrows.series import Row, same_series

logger = logging.getLogger(__name__)


def build_formatter(log_format: str = "text") -> logging.Formatter:
    """Formatter for the configured log format."""
    if log_format == "json":
        return JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "time", "levelname": "level", "name": "logger"},
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    return logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def setup_logging(log_level: str, log_format: str = "text", stream=None):
    """Setup logging configuration, replacing any root handlers."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(build_formatter(log_format))

    logging.basicConfig(level=level, handlers=[handler], force=True)


class RowOrdering:
    """Sorts and matches rows according to a Config."""

    def __init__(self, config: Optional[Config] = None, metrics: Optional[SelfMetrics] = None):
        self.config = config or Config()
        self.metrics = metrics

    @classmethod
    def from_config(cls, config: Config, registry=None) -> "RowOrdering":
        """Build with self-metrics registered in registry (if enabled)."""
        return cls(config, build_self_metrics(config, registry=registry))

    def sort(self, rows: Rows) -> Rows:
        """Sort rows in place and return them."""
        sort_rows(rows, stable=self.config.sorting.stable, metrics=self.metrics)
        return rows

    def same_series(self, a: Row, b: Row) -> bool:
        """Series identity test, counted in self-metrics."""
        return same_series(a, b, metrics=self.metrics)


def init(config_path: str, registry=None) -> RowOrdering:
    """Load config, set up logging and return a configured RowOrdering."""
    config = load_config(config_path)
    setup_logging(config.global_.log_level, config.global_.log_format)
    ordering = RowOrdering.from_config(config, registry=registry)
    logger.info(
        f"Row ordering ready (stable={config.sorting.stable}, "
        f"self_metrics={'on' if ordering.metrics else 'off'})"
    )
    return ordering
