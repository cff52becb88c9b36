from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterator, List, Optional
from core.staff import Staff


class ActionType(Enum):
    PATIENT_ADMITTED = "PATIENT_ADMITTED"
    PATIENT_DISCHARGED = "PATIENT_DISCHARGED"
    PATIENT_MOVED = "PATIENT_MOVED"
    PRESCRIPTION_ADDED = "PRESCRIPTION_ADDED"
    PRESCRIPTION_DISCONTINUED = "PRESCRIPTION_DISCONTINUED"
    MEDICATION_ADMINISTERED = "MEDICATION_ADMINISTERED"
    MEDICINE_CATALOGED = "MEDICINE_CATALOGED"
    STAFF_ADDED = "STAFF_ADDED"
    STAFF_MODIFIED = "STAFF_MODIFIED"
    SHIFT_ASSIGNED = "SHIFT_ASSIGNED"
    SYSTEM_START = "SYSTEM_START"
    SYSTEM_SHUTDOWN = "SYSTEM_SHUTDOWN"


@dataclass(frozen=True)
class ActionLog:
    """Who did what, when, to which target. `performed_by` is None only for system events."""

    log_id: str
    timestamp: datetime
    performed_by: Optional[Staff]
    action_type: ActionType
    description: str
    target_id: str

    @property
    def performer_name(self) -> str:
        return self.performed_by.name if self.performed_by is not None else "System"

    def __str__(self) -> str:
        return (
            f"[{self.timestamp:%Y-%m-%d %H:%M:%S}] {self.action_type.value} "
            f"by {self.performer_name}: {self.description}"
        )


class AuditLog:
    """Append-only sequence of action records."""

    def __init__(self):
        self._entries: List[ActionLog] = []

    def append(self, entry: ActionLog) -> None:
        self._entries.append(entry)

    @property
    def entries(self) -> List[ActionLog]:
        return list(self._entries)

    def by_type(self, action_type: ActionType) -> List[ActionLog]:
        return [e for e in self._entries if e.action_type is action_type]

    def for_target(self, target_id: str) -> List[ActionLog]:
        return [e for e in self._entries if e.target_id == target_id]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ActionLog]:
        return iter(list(self._entries))
