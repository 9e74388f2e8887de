from __future__ import annotations

import json
import math
from typing import Any

from policy_repro.core.errors import NonFiniteValueError

# JSON token -> Python token. Applied as a blunt global replace, so a string
# value containing e.g. "null" is rewritten too.
_JSON_TO_PYTHON_TOKENS = (
    ("true", "True"),
    ("false", "False"),
    ("null", "None"),
)


def python_value(value: Any) -> str:
    """Render a reform parameter value as Python source text."""
    if value is True:
        return "True"
    if value is False:
        return "False"
    if isinstance(value, float) and math.isnan(value):
        return 'float("nan")'
    if isinstance(value, float) and math.isinf(value):
        return 'float("inf")' if value > 0 else '-float("inf")'
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def json_to_python_tokens(text: str) -> str:
    for json_token, python_token in _JSON_TO_PYTHON_TOKENS:
        text = text.replace(json_token, python_token)
    return text


def situation_literal(situation: Any) -> str:
    """Pretty-printed (2-space) Python literal for a JSON-like structure."""
    try:
        text = json.dumps(situation, indent=2, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        # NaN/Infinity have no JSON (or bare Python) spelling
        raise NonFiniteValueError(f"Household holds a non-finite number: {exc}") from exc
    return json_to_python_tokens(text)
