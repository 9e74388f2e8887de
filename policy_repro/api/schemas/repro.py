from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

from policy_repro.core.models import SimulationType


class ReproCodeResponse(BaseModel):
    type: SimulationType
    region: str
    year: Optional[Union[int, str]] = None
    lines: List[str] = Field(default_factory=list)
    code: str
