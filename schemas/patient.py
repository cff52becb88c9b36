from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any
from datetime import date
from core.patient import Gender


class AdmissionRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(min_length=1)
    dateOfBirth: date
    gender: Gender
    medicalCondition: str = ""
    requiresIsolation: bool = False

    @model_validator(mode="before")
    @classmethod
    def extract_dateOfBirth(cls, values: Any) -> Any:
        """
        Accept "dob", "birthDate", "Date of birth" and similar keys for the date of birth.

        Intake forms label this column inconsistently, so the first key that mentions
        "birth" or equals "dob" is moved to "dateOfBirth" when that key is absent.
        """
        if isinstance(values, dict) and "dateOfBirth" not in values:
            for key in list(values.keys()):
                lowered = key.lower()
                if "birth" in lowered or lowered == "dob":
                    values["dateOfBirth"] = values.pop(key)
                    break
        return values

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Patient name must not be blank.")
        return value

    @field_validator("gender", mode="before")
    @classmethod
    def normalise_gender(cls, value: Any) -> Any:
        if isinstance(value, str):
            lowered = value.strip().upper()
            return {"M": "MALE", "F": "FEMALE"}.get(lowered, lowered)
        return value
