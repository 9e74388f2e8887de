from __future__ import annotations

import re

from policy_repro.core.errors import InvalidFieldError

# Both values end up verbatim in generated source (docstring, call arguments,
# download filename), so they are restricted to plain tokens.
REGION_PATTERN = re.compile(r"^[a-z_]+$")
YEAR_PATTERN = re.compile(r"^\d{4}$")


def check_region(region: str | None) -> str | None:
    if region is None:
        return None
    if not isinstance(region, str) or not REGION_PATTERN.match(region):
        raise InvalidFieldError("region", region, "lowercase letters and underscores")
    return region


def check_year(year):
    """Falsy years pass through (they fall back to the default year)."""
    if not year:
        return year
    if isinstance(year, bool):
        raise InvalidFieldError("year", year, "a 4-digit year")
    if isinstance(year, int):
        if 1000 <= year <= 9999:
            return year
        raise InvalidFieldError("year", year, "a 4-digit year")
    if isinstance(year, str) and YEAR_PATTERN.match(year):
        return year
    raise InvalidFieldError("year", year, "a 4-digit year")
