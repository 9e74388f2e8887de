from __future__ import annotations

import os
from typing import FrozenSet

# Regions where population-scale runs switch to reported state tax data.
US_REGIONS: FrozenSet[str] = frozenset({"us", "enhanced_us"})

_FALLBACK_YEAR = 2024


def default_year() -> int:
    """
    Process-wide default simulation year.

    Read at call time so deployments (and tests) can override it through
    REPRO_DEFAULT_YEAR without reloading the package.
    """
    raw = (os.getenv("REPRO_DEFAULT_YEAR") or "").strip()
    if not raw:
        return _FALLBACK_YEAR
    try:
        return int(raw)
    except ValueError:
        return _FALLBACK_YEAR


def resolve_year(year) -> int | str:
    return year if year else default_year()


def is_us_region(region: str | None) -> bool:
    return (region or "") in US_REGIONS


def runtime_env() -> str:
    return (os.getenv("REPRO_ENV") or "dev").strip().lower()
