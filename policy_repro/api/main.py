from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from policy_repro import __version__
from policy_repro.api.endpoints import health
from policy_repro.api.endpoints import metrics as metrics_ep
from policy_repro.api.endpoints.repro import router as repro_router
from policy_repro.api.middleware.error_shaping import SafeErrorMiddleware
from policy_repro.api.middleware.request_context import RequestContextMiddleware

app = FastAPI(
    title="Policy Reproducibility Code API",
    version=__version__,
)

# ------------------------------------------------------------
# Middleware stack (ORDER MATTERS)
# Starlette reverses add_middleware order: the LAST call is the OUTERMOST wrapper.
#   SafeErrorMiddleware -> CORSMiddleware -> RequestContext -> handler
# ------------------------------------------------------------
app.add_middleware(RequestContextMiddleware)

_cors_origins_raw = os.getenv("REPRO_CORS_ORIGINS", "").strip()
_cors_origins = [o.strip() for o in _cors_origins_raw.split(",") if o.strip()] if _cors_origins_raw else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(SafeErrorMiddleware)


app.include_router(health.router)
app.include_router(metrics_ep.router)

# /api/v1 frozen, /api/v2 evolving
for prefix in ("/api/v1", "/api/v2"):
    app.include_router(repro_router, prefix=prefix)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
