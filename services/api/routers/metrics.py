"""Metrics router.

Endpoints:
- GET /metrics - Prometheus text exposition of the application's counters
"""

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from services.api.deps import get_metrics
from services.api.prometheus import WordMetrics

router = APIRouter(prefix="/metrics", tags=["metrics"])


@router.get("")
def prometheus_metrics(metrics: WordMetrics = Depends(get_metrics)) -> Response:
    """Expose the reversed-word and endpoint-access counters."""
    return Response(
        content=generate_latest(metrics.registry),
        headers={"Content-Type": CONTENT_TYPE_LATEST},
    )
