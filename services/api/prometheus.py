"""Prometheus metrics for the Reverse Words API.

Counters live on their own ``CollectorRegistry`` owned by a ``WordMetrics``
instance, so every application (and every test) gets independent counts.
``prometheus_client`` counters increment under an internal lock and are safe
to share between request threads.
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter

ENDPOINT_RELEASE = "release"
ENDPOINT_HEALTH = "health"
ENDPOINT_REVERSE_WORD = "reverseword"


class WordMetrics:
    """Reversed-word and endpoint-access counters."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else CollectorRegistry()

        self.total_reversed_words = Counter(
            "total_reversed_words",
            "Total number of reversed words",
            registry=self.registry,
        )

        self.endpoints_accessed = Counter(
            "endpoints_accessed",
            "Total number of accessed to a given endpoint",
            ["endpoint"],
            registry=self.registry,
        )

    def record_reversed_word(self) -> None:
        """Update reversed word counter."""
        self.total_reversed_words.inc()

    def record_endpoint_access(self, endpoint: str) -> None:
        """Update endpoint access counter."""
        self.endpoints_accessed.labels(endpoint=endpoint).inc()

    def reversed_words_count(self) -> float:
        """Get the current reversed word count."""
        value = self.registry.get_sample_value("total_reversed_words_total")
        return value or 0.0

    def endpoint_access_count(self, endpoint: str) -> float:
        """Get the current access count for an endpoint."""
        value = self.registry.get_sample_value(
            "endpoints_accessed_total", {"endpoint": endpoint}
        )
        return value or 0.0
