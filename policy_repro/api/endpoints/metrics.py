from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from policy_repro.core.observability.metrics import snapshot_named

router = APIRouter()


@router.get("/metrics")
def prometheus_metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


@router.get("/metrics/snapshot")
def metrics_snapshot():
    return snapshot_named()


@router.get("/api/v1/metrics/snapshot")
def metrics_snapshot_v1():
    return snapshot_named()
