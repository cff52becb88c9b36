from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, Optional
from datetime import time
from core.staff import Role


class StaffRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    staffId: str = Field(min_length=1)
    name: str = Field(min_length=1)
    role: Role
    username: str = Field(min_length=1)
    secret: str = Field(min_length=1)
    # doctors only; defaults to the configured start when omitted
    workStart: Optional[time] = None

    @field_validator("role", mode="before")
    @classmethod
    def normalise_role(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().title()
        return value

    @model_validator(mode="after")
    def check_work_start(self) -> "StaffRequest":
        if self.workStart is not None and self.role is not Role.DOCTOR:
            raise ValueError("workStart only applies to doctors.")
        return self
