"""
Request file loader for offline script generation.

Accepts JSON or YAML files holding a ReproCodeRequest:

    type: household
    region: uk
    year: 2024
    metadata: {package: policyengine_uk}
    policy:
      reform:
        data:
          gov.hmrc.income_tax.rates.uk[0].rate:
            "2024-01-01.2100-12-31": 0.25
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from policy_repro.core.errors import RequestFileError
from policy_repro.core.models import ReproCodeRequest

_log = logging.getLogger("repro.loader")


def _parse_text(path: Path, text: str) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(text)
    if suffix in {".yml", ".yaml"}:
        return yaml.safe_load(text) or {}
    raise RequestFileError(f"Unsupported request file extension: {path.suffix} (use .json/.yaml)")


def load_request_file(path: str | Path) -> ReproCodeRequest:
    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise RequestFileError(f"Request file not found: {p}")

    try:
        raw = _parse_text(p, p.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RequestFileError(f"Could not parse {p.name}: {exc}") from exc

    if not isinstance(raw, dict):
        raise RequestFileError(f"{p.name} must contain a mapping at the top level")

    try:
        req = ReproCodeRequest(**raw)
    except ValidationError as exc:
        raise RequestFileError(f"{p.name} is not a valid request: {exc}") from exc

    _log.info("Loaded request file %s (type=%s region=%s)", p.name, req.type.value, req.region)
    return req
