"""
Prometheus metrics for the sales statistics pipeline

Counts fetched, normalized and skipped orders and times each view
computation. Metrics live in a private registry so importing this module
never touches the global default registry.
"""
import os
from typing import Optional

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


REGISTRY = CollectorRegistry()


# =======================
# SOURCE METRICS
# =======================

fetches_total = Counter(
    name="stats_order_fetches_total",
    documentation="Order fetches by source and outcome",
    labelnames=["source", "status"],  # status: success, failure
    registry=REGISTRY,
)

# =======================
# NORMALIZATION METRICS
# =======================

orders_normalized_total = Counter(
    name="stats_orders_normalized_total",
    documentation="Raw orders successfully normalized into analytic records",
    registry=REGISTRY,
)

orders_skipped_total = Counter(
    name="stats_orders_skipped_total",
    documentation="Raw orders rejected by the normalizer, by failed rule",
    labelnames=["rule_name"],
    registry=REGISTRY,
)

# =======================
# VIEW METRICS
# =======================

compute_duration_seconds = Histogram(
    name="stats_view_compute_duration_seconds",
    documentation="Time spent computing one statistics view",
    labelnames=["date_mode"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
    registry=REGISTRY,
)

view_records = Gauge(
    name="stats_view_records",
    documentation="Records in the most recently computed chart series",
    registry=REGISTRY,
)


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


def start_metrics_server(port: Optional[int] = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Only needed when the endpoint is enabled
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


def record_fetch(source: str, success: bool) -> None:
    status = "success" if success else "failure"
    fetches_total.labels(source=source, status=status).inc()


def record_normalization(normalized: int, failed_rules: list[str]) -> None:
    """
    Record the outcome of normalizing one batch.

    Args:
        normalized: Number of records that normalized cleanly
        failed_rules: One entry per failed rule across all skipped records
    """
    if normalized > 0:
        orders_normalized_total.inc(normalized)
    for rule_name in failed_rules:
        orders_skipped_total.labels(rule_name=rule_name).inc()


def record_view(date_mode: str, record_count: int, duration_seconds: float) -> None:
    compute_duration_seconds.labels(date_mode=date_mode).observe(duration_seconds)
    view_records.set(record_count)
