from dataclasses import dataclass, field
from typing import Dict, List
from core.audit import AuditLog
from core.medicine import Medicine
from core.prescription import MedicationRecord, Prescription
from core.staff import Staff
from core.ward import Ward


@dataclass
class DischargeArchive:
    """History a bed carried for a patient at the moment of discharge."""

    prescriptions: List[Prescription] = field(default_factory=list)
    """Prescriptions issued during the stay, all inactive after discharge."""
    medication_records: List[MedicationRecord] = field(default_factory=list)
    """Every administration recorded during the stay."""


@dataclass
class FacilityState:
    """
    A dataclass to hold the entity graph owned by the facility engine.

    Only the engine mutates it; callers get copies of the lists.
    """

    wards: List[Ward] = field(default_factory=list)
    """Wards in creation order, each owning its rooms and beds."""
    all_staff: List[Staff] = field(default_factory=list)
    """Every staff member in the order they were added."""
    doctors: List[Staff] = field(default_factory=list)
    """Role sub-list of `all_staff` holding doctors."""
    nurses: List[Staff] = field(default_factory=list)
    """Role sub-list of `all_staff` holding nurses."""
    managers: List[Staff] = field(default_factory=list)
    """Role sub-list of `all_staff` holding managers."""
    medicines: List[Medicine] = field(default_factory=list)
    """The medicine catalog."""
    audit_log: AuditLog = field(default_factory=AuditLog)
    """Append-only audit trail of successful operations."""
    discharged: Dict[str, DischargeArchive] = field(default_factory=dict)
    """A dictionary mapping discharged patient ids to the history of all their stays."""
