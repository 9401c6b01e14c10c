from typing import Any, List, Optional, Union
from pydantic import BaseModel, model_validator

# Values stay raw JSON so the engine, not pydantic, decides INT vs FLOAT
class SequenceIn(BaseModel):
    values: List[Any]

    model_config = {"extra": "forbid"}

# Input schema for /max and /min: either a sequence or a pair of scalars
class ExtremeIn(BaseModel):
    values: Optional[List[Any]] = None
    a: Any = None
    b: Any = None

    @model_validator(mode="after")
    def check_one_form(self):
        has_pair = "a" in self.model_fields_set or "b" in self.model_fields_set
        if self.values is not None and has_pair:
            raise ValueError("give either 'values' or 'a' and 'b', not both")
        if self.values is None and not ({"a", "b"} <= self.model_fields_set):
            raise ValueError("give either 'values' or both 'a' and 'b'")
        return self

    model_config = {"extra": "forbid"}

# Input schema for /maxk and /mink; k is checked by the engine
class SelectIn(BaseModel):
    values: List[Any]
    k: Any

    model_config = {"extra": "forbid"}

Number = Union[int, float]

class ScalarOut(BaseModel):
    operation: str
    result: Number

class SequenceOut(BaseModel):
    operation: str
    result: List[Number]
