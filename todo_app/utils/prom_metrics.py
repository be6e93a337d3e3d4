"""
Prometheus metrics registration and helpers.

Exports:
- observe_request(...): record HTTP request metrics
- observe_mutation(...): service listener counting to-do additions/removals
- metrics_latest(): return text exposition from correct registry (handles multiprocess)
- CONTENT_TYPE_LATEST: correct Prometheus content type
"""

import os
from prometheus_client import Counter, Histogram, CollectorRegistry, generate_latest, CONTENT_TYPE_LATEST
from prometheus_client import multiprocess

__all__ = ['observe_request', 'observe_mutation', 'metrics_latest', 'CONTENT_TYPE_LATEST']


REQUEST_COUNTER = Counter(
    'todo_http_requests_total', 'Total HTTP requests', ['endpoint', 'status']
)

REQUEST_LATENCY = Histogram(
    'todo_http_request_latency_seconds', 'HTTP request latency seconds', ['endpoint']
)

MUTATION_COUNTER = Counter(
    'todo_mutations_total', 'Successful to-do list mutations', ['action']
)

# Pre-create label sets so both series are exported before the first mutation
for _action in ('added', 'removed'):
    MUTATION_COUNTER.labels(action=_action)


def observe_request(endpoint: str, status: int, latency_seconds: float) -> None:
    REQUEST_COUNTER.labels(endpoint=endpoint, status=str(status)).inc()
    REQUEST_LATENCY.labels(endpoint=endpoint).observe(latency_seconds)


def observe_mutation(event: str, payload) -> None:
    """TodoService listener: count a committed mutation."""
    MUTATION_COUNTER.labels(action=event).inc()


def metrics_latest() -> bytes:
    """Return the Prometheus text exposition, multiprocess-aware if configured."""
    prom_mp_dir = os.getenv('PROMETHEUS_MULTIPROC_DIR')
    if prom_mp_dir:
        registry = CollectorRegistry()
        multiprocess.MultiProcessCollector(registry)
        return generate_latest(registry)
    # Default registry
    return generate_latest()
