import math
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# ints stay ints (1500 is stored as 1500, not 1500.0)
Number = Union[int, float]


class Message(BaseModel):
    message: str


class ValidationMessage(Message):
    errors: Optional[List[Any]] = None


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, (list, tuple)):
        return any(_has_non_finite(v) for v in value)
    return False


class WireModel(BaseModel):
    """
    Base for records as they travel over the wire and sit in db.json:
    camelCase keys, snake_case attributes, unknown keys kept as sent.
    Infinity/NaN are rejected everywhere, extra keys included: db.json
    is strict JSON and cannot hold them.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        allow_inf_nan=False,
    )

    @model_validator(mode="after")
    def _finite_extras(self):
        for key, value in (self.model_extra or {}).items():
            if _has_non_finite(value):
                raise ValueError(f"{key}: Infinity and NaN are not allowed")
        return self

    def to_record(self, exclude_unset: bool = False) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=exclude_unset)
