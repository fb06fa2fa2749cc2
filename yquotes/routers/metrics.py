"""Prometheus scrape endpoint for the exporter's own metrics (`/metrics`)."""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["system"])


@router.get("/metrics", summary="Exporter self-metrics")
async def metrics() -> Response:
    """Expose query counters, fetch duration and process metrics from the default registry."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
