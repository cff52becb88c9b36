import secrets
from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Optional, Union
from core.roster import DoctorRoster, NurseRoster, Weekday


class Role(Enum):
    DOCTOR = "Doctor"
    NURSE = "Nurse"
    MANAGER = "Manager"


@dataclass(frozen=True)
class Capabilities:
    prescribe: bool
    administer: bool
    manage_staff: bool


# Fixed per role; nothing grants or revokes a capability at runtime.
CAPABILITIES = {
    Role.DOCTOR: Capabilities(prescribe=True, administer=False, manage_staff=False),
    Role.NURSE: Capabilities(prescribe=False, administer=True, manage_staff=False),
    Role.MANAGER: Capabilities(prescribe=False, administer=False, manage_staff=True),
}


@dataclass(eq=False)
class Staff:
    """
    A staff member of the care home, tagged by role.

    Variant roster data lives in `roster`: a NurseRoster for nurses, a
    DoctorRoster for doctors and nothing for managers. Use the `doctor`,
    `nurse` and `manager` constructors rather than building one by hand.
    """

    staff_id: str
    name: str
    username: str
    secret: str = field(repr=False)
    role: Role
    roster: Union[DoctorRoster, NurseRoster, None] = None

    @classmethod
    def doctor(cls, staff_id: str, name: str, username: str, secret: str,
               work_start: Optional[time] = None) -> "Staff":
        roster = DoctorRoster(work_start) if work_start is not None else DoctorRoster()
        return cls(staff_id, name, username, secret, Role.DOCTOR, roster)

    @classmethod
    def nurse(cls, staff_id: str, name: str, username: str, secret: str) -> "Staff":
        return cls(staff_id, name, username, secret, Role.NURSE, NurseRoster())

    @classmethod
    def manager(cls, staff_id: str, name: str, username: str, secret: str) -> "Staff":
        return cls(staff_id, name, username, secret, Role.MANAGER)

    @property
    def capabilities(self) -> Capabilities:
        return CAPABILITIES[self.role]

    def can_prescribe_medication(self) -> bool:
        return self.capabilities.prescribe

    def can_administer_medication(self) -> bool:
        return self.capabilities.administer

    def can_manage_staff(self) -> bool:
        return self.capabilities.manage_staff

    @property
    def is_doctor(self) -> bool:
        return self.role is Role.DOCTOR

    @property
    def is_nurse(self) -> bool:
        return self.role is Role.NURSE

    @property
    def is_manager(self) -> bool:
        return self.role is Role.MANAGER

    def is_on_duty_at(self, day: Weekday, moment: time) -> bool:
        match self.role:
            case Role.MANAGER:
                return True
            case Role.DOCTOR | Role.NURSE:
                return self.roster.is_on_duty(Weekday.of(day), moment)
            case _:
                return False

    def check_secret(self, candidate: str) -> bool:
        return secrets.compare_digest(str(candidate), str(self.secret))

    def set_secret(self, new_secret: str) -> None:
        self.secret = new_secret

    def __str__(self) -> str:
        return f"{self.role.value} - {self.name} (ID: {self.staff_id})"


class SystemActor:
    """The facility itself, acting during bootstrap. Never a member of staff."""

    name = "System"

    def __repr__(self) -> str:
        return "SYSTEM"


SYSTEM = SystemActor()

Actor = Union[Staff, SystemActor, None]
