from __future__ import annotations

from typing import List

from fastapi import APIRouter
from starlette.responses import Response

from policy_repro.api.observability.metrics import SCRIPTS_GENERATED_TOTAL
from policy_repro.api.schemas.repro import ReproCodeResponse
from policy_repro.core.config import is_us_region, resolve_year
from policy_repro.core.generators import get_reproducibility_code_block, render_script
from policy_repro.core.models import ReproCodeRequest
from policy_repro.core.observability.metrics import inc_named

router = APIRouter(tags=["reproducibility"])

def _generate_lines(req: ReproCodeRequest) -> List[str]:
    # ReproCodeError propagates; SafeErrorMiddleware turns it into a 422.
    lines = get_reproducibility_code_block(
        req.type,
        req.metadata,
        req.policy,
        req.region,
        req.year,
        req.household_input,
        req.earning_variation,
    )

    SCRIPTS_GENERATED_TOTAL.labels(
        type=req.type.value,
        us_region=str(is_us_region(req.region)).lower(),
    ).inc()
    inc_named(f"scripts_generated_{req.type.value}")
    return lines


@router.post("/reproducibility", response_model=ReproCodeResponse)
def reproducibility_code(req: ReproCodeRequest):
    lines = _generate_lines(req)
    return ReproCodeResponse(
        type=req.type,
        region=req.region,
        year=resolve_year(req.year),
        lines=lines,
        code="\n".join(lines),
    )


@router.post("/reproducibility/script")
def reproducibility_script(req: ReproCodeRequest, header: bool = True):
    lines = _generate_lines(req)
    script = render_script(lines, type=req.type, region=req.region, year=req.year, header=header)
    filename = f"reproduce_{req.type.value}_{req.region}.py"
    return Response(
        content=script,
        media_type="text/x-python",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
