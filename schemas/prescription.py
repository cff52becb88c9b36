from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List
from datetime import time


class PrescriptionItemRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    medicineId: str = Field(min_length=1)
    dosage: str = Field(min_length=1)
    administrationTimes: List[time] = Field(default_factory=list)
    instructions: str = ""

    @field_validator("administrationTimes")
    @classmethod
    def unique_times(cls, value: List[time]) -> List[time]:
        return sorted(set(value))
