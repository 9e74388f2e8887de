from __future__ import annotations

from fastapi import APIRouter
from starlette.responses import JSONResponse

from policy_repro.core.config import runtime_env
from policy_repro.core.generators.repro_code import TEMPLATES_DIR
from policy_repro.core.observability.metrics import inc_named

router = APIRouter()


# ------------------------------------------------------------
# Unversioned health
# ------------------------------------------------------------
@router.get("/health/live")
async def live():
    inc_named("health_live")
    return {"status": "ok"}


@router.get("/health/ready")
async def ready():
    inc_named("health_ready")
    return {"status": "ready"}


# ------------------------------------------------------------
# Versioned health
# ------------------------------------------------------------
@router.get("/api/v1/health/live")
def liveness():
    inc_named("health_live")
    return {"status": "alive"}


@router.get("/api/v1/health/ready")
def readiness():
    """
    Readiness reflects ability to serve traffic.
    In prod the script template must be present on disk.
    """
    inc_named("health_ready")

    problems: list[str] = []
    if runtime_env() == "prod":
        template = TEMPLATES_DIR / "repro_script.py.j2"
        if not template.exists():
            problems.append(f"missing_template:{template.name}")

    if problems:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "problems": problems},
        )

    return {"status": "ready"}
