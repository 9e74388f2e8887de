from __future__ import annotations


class ReproCodeError(ValueError):
    """Base class for input problems detected while generating a script."""

    code = "repro_code_error"

    def to_detail(self) -> dict:
        return {"code": self.code, "message": str(self)}


class InvalidPeriodKeyError(ReproCodeError):
    code = "invalid_period_key"

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid reform period key {key!r}: {reason}")


class EmptyReformError(ReproCodeError):
    code = "empty_reform"

    def __init__(self):
        super().__init__("Population-wide reproduction needs at least one reform parameter.")


class InvalidFieldError(ReproCodeError):
    code = "invalid_field"

    def __init__(self, field: str, value, expected: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: expected {expected}")


class NonFiniteValueError(ReproCodeError):
    code = "non_finite_value"


class RequestFileError(ReproCodeError):
    code = "invalid_request_file"
