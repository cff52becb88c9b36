from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Iterable, List, Optional, Tuple
from core.medicine import Medicine
from core.patient import Patient
from core.staff import Staff


@dataclass(frozen=True, eq=False)
class PrescriptionItem:
    """One medicine line of a prescription and the times of day it is due."""

    medicine: Medicine
    dosage: str
    administration_times: Tuple[time, ...] = ()
    instructions: str = ""

    def __str__(self) -> str:
        times = ", ".join(t.strftime("%H:%M") for t in self.administration_times)
        return f"{self.medicine.name} - {self.dosage} at [{times}]"


@dataclass(eq=False)
class Prescription:
    """
    A prescription written by a doctor for the patient in a bed.

    Aggregates one or more PrescriptionItems. Stays active until a doctor
    discontinues it or the patient is discharged.
    """

    prescription_id: str
    patient: Patient
    prescribing_doctor: Staff
    created_at: datetime
    items: List[PrescriptionItem] = field(default_factory=list)
    active: bool = True

    def add_item(self, medicine: Medicine, dosage: str,
                 administration_times: Iterable[time] = (),
                 instructions: str = "") -> PrescriptionItem:
        item = PrescriptionItem(medicine, dosage, tuple(sorted(set(administration_times))), instructions)
        self.items.append(item)
        return item

    def deactivate(self) -> None:
        self.active = False

    def find_item(self, medicine_id: str) -> Optional[PrescriptionItem]:
        for item in self.items:
            if item.medicine.medicine_id == medicine_id:
                return item
        return None

    def __str__(self) -> str:
        return (
            f"Prescription {self.prescription_id} by Dr. {self.prescribing_doctor.name} "
            f"on {self.created_at:%Y-%m-%d %H:%M} ({len(self.items)} medications)"
        )


@dataclass(frozen=True, eq=False)
class MedicationRecord:
    """A successful administration of a prescription item. Refusals are not recorded."""

    record_id: str
    patient: Patient
    prescription_item: PrescriptionItem
    administering_nurse: Staff
    administered_at: datetime
    notes: Optional[str] = None
    administered: bool = True

    def __str__(self) -> str:
        return (
            f"{self.prescription_item.medicine.name} administered by "
            f"{self.administering_nurse.name} on {self.administered_at:%Y-%m-%d %H:%M}"
        )
