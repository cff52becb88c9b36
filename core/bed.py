from typing import List, Optional
from core.patient import Patient
from core.prescription import MedicationRecord, Prescription
from exceptions.custom_errors import BedOccupied


class Bed:
    """
    A bed and everything recorded against it while occupied.

    The bed owns at most one patient reference at a time, plus the ordered
    prescriptions and medication records issued for its occupant.
    """

    def __init__(self, bed_id: str):
        self.bed_id = bed_id
        self._patient: Optional[Patient] = None
        self._prescriptions: List[Prescription] = []
        self._records: List[MedicationRecord] = []

    @property
    def current_patient(self) -> Optional[Patient]:
        return self._patient

    @property
    def is_occupied(self) -> bool:
        return self._patient is not None

    @property
    def prescriptions(self) -> List[Prescription]:
        return list(self._prescriptions)

    @property
    def medication_records(self) -> List[MedicationRecord]:
        return list(self._records)

    def active_prescriptions(self) -> List[Prescription]:
        return [p for p in self._prescriptions if p.active]

    def assign_patient(self, patient: Patient) -> None:
        if self._patient is not None:
            raise BedOccupied(f"Bed {self.bed_id} is already occupied by {self._patient.name}")
        self._patient = patient

    def remove_patient(self) -> Optional[Patient]:
        patient, self._patient = self._patient, None
        return patient

    def add_prescription(self, prescription: Prescription) -> None:
        self._prescriptions.append(prescription)

    def add_medication_record(self, record: MedicationRecord) -> None:
        self._records.append(record)

    def clear_history(self) -> None:
        self._prescriptions.clear()
        self._records.clear()

    def __repr__(self) -> str:
        state = f"Occupied by {self._patient.name}" if self._patient else "Vacant"
        return f"Bed {self.bed_id} ({state})"
