from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from policy_repro.core.validation import check_region, check_year

ReformValue = Union[bool, int, float, str]


class SimulationType(str, Enum):
    HOUSEHOLD = "household"
    POLICY = "policy"

    @classmethod
    def coerce(cls, value: Union["SimulationType", str]) -> "SimulationType":
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown simulation type {value!r} (expected 'household' or 'policy')"
            ) from None


class Reform(BaseModel):
    # parameter name -> "<start>.<end>" -> value; insertion order is emission order
    data: Dict[str, Dict[str, ReformValue]] = Field(default_factory=dict)

    def has_parameters(self) -> bool:
        return len(self.data) > 0


class Policy(BaseModel):
    reform: Reform = Field(default_factory=Reform)

    @classmethod
    def from_reform_data(cls, data: Dict[str, Dict[str, ReformValue]]) -> "Policy":
        return cls(reform=Reform(data=data))


class VariableMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entity: Optional[str] = None
    label: Optional[str] = None
    is_input_variable: bool = Field(default=True, alias="isInputVariable")
    default_value: Any = Field(default=None, alias="defaultValue")
    value_type: Optional[str] = Field(default=None, alias="valueType")


class EntityMetadata(BaseModel):
    plural: str
    label: Optional[str] = None
    is_person: bool = False


class Metadata(BaseModel):
    """Country-model metadata as served by the host application."""

    package: str
    entities: Dict[str, EntityMetadata] = Field(default_factory=dict)
    variables: Dict[str, VariableMetadata] = Field(default_factory=dict)


class ReproCodeRequest(BaseModel):
    """Everything needed to regenerate a simulation as a script."""

    type: SimulationType
    metadata: Metadata
    policy: Policy = Field(default_factory=Policy)
    region: str = "us"
    year: Optional[Union[int, str]] = None
    household_input: Optional[Dict[str, Any]] = None
    earning_variation: bool = False

    @field_validator("region")
    @classmethod
    def _region_is_token(cls, v: str) -> str:
        return check_region(v)

    @field_validator("year")
    @classmethod
    def _year_is_four_digits(cls, v):
        return check_year(v)
