from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional


class Gender(Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


@dataclass(eq=False)
class Patient:
    """A resident of the care home. Kept as a historical record after discharge."""

    patient_id: str
    name: str
    date_of_birth: date
    gender: Gender
    medical_condition: str = ""
    requires_isolation: bool = False
    admission_date: Optional[date] = None
    discharge_date: Optional[date] = None

    def age_on(self, today: date) -> int:
        """Whole years between birth and `today`."""
        had_birthday = (today.month, today.day) >= (self.date_of_birth.month, self.date_of_birth.day)
        return today.year - self.date_of_birth.year - (0 if had_birthday else 1)

    @property
    def is_discharged(self) -> bool:
        return self.discharge_date is not None

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.patient_id}, {self.gender.value})"
