import logging
import threading
from contextlib import contextmanager
from datetime import time
from typing import Iterable, List, Optional, Union

import pandas as pd
from pydantic import ValidationError

import utils.logger  # attaches file and stream handlers to the "carehome" logger
from core.audit import ActionLog, ActionType
from core.bed import Bed
from core.clock import Clock, SystemClock
from core.medicine import Medicine
from core.patient import Patient
from core.prescription import MedicationRecord, Prescription, PrescriptionItem
from core.roster import DoctorRoster, Shift, Weekday
from core.room import Room
from core.staff import SYSTEM, Actor, Role, Staff, SystemActor
from core.state import DischargeArchive, FacilityState
from core.ward import Ward
from carehome import reports
from carehome.bootstrap import build_default_manager, build_medicine_catalog, build_wards
from carehome.ids import IdGenerator
from carehome.rules import (
    build_compliance_manager,
    require_administrator,
    require_manager_or_self,
    require_nurse,
    require_on_duty,
    require_prescriber,
    require_staff,
    require_staff_manager,
)
from exceptions.custom_errors import (
    BedOccupied,
    CareHomeError,
    ComplianceViolation,
    InvalidState,
    Unauthorized,
)
from schemas import AdmissionRequest, PrescriptionItemRequest, StaffRequest

logger = logging.getLogger(__name__)


class FacilityEngine:
    """
    The care home: owner of the entity graph and sole entry point for every state change.

    Each operation validates authorization, roster status and structural
    preconditions before touching anything. It then either mutates state and
    appends exactly one audit record, or raises and leaves state unchanged.
    Operations are serialized on a re-entrant lock.

    Construct one engine per process and pass it to callers; construction
    builds the two wards, the medicine catalog and the default manager.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or SystemClock()
        self.state = FacilityState()
        self.ids = IdGenerator()
        self._lock = threading.RLock()
        self._compliance = build_compliance_manager(self.state)
        self._bootstrap()

    def _bootstrap(self) -> None:
        self.state.wards.extend(build_wards())
        self.state.medicines.extend(build_medicine_catalog())
        self.add_staff(build_default_manager(), SYSTEM)
        logger.info(
            "🏥 Care home initialised: %d wards, %d beds, %d medicines",
            len(self.state.wards),
            sum(w.total_capacity for w in self.state.wards),
            len(self.state.medicines),
        )

    @contextmanager
    def _guard(self, operation: str):
        """Serialize an operation and log its rejection before re-raising."""
        with self._lock:
            try:
                yield
            except CareHomeError as e:
                logger.warning("⛔ %s rejected (%s): %s", operation, type(e).__name__, e)
                raise

    def _log(self, actor: Optional[Staff], action_type: ActionType,
             description: str, target_id: str) -> ActionLog:
        entry = ActionLog(
            self.ids.log_id(), self.clock.now(), actor, action_type, description, target_id
        )
        self.state.audit_log.append(entry)
        logger.info("📝 %s", entry)
        return entry

    # ==================== Staff Management ====================

    def add_staff(self, new_staff: Staff, actor: Actor) -> None:
        """
        Add a staff member. Only managers may add staff.

        The SYSTEM actor bypasses the check and is not logged; it is used to
        seed the default manager at bootstrap.
        """
        with self._guard("add_staff"):
            if not isinstance(actor, SystemActor):
                require_staff_manager(actor, "add staff members")
            if any(s.staff_id == new_staff.staff_id for s in self.state.all_staff):
                raise InvalidState(f"Staff id {new_staff.staff_id} is already in use")
            if self.find_staff_by_username(new_staff.username) is not None:
                raise InvalidState(f"Username {new_staff.username} is already in use")

            self.state.all_staff.append(new_staff)
            match new_staff.role:
                case Role.DOCTOR:
                    self.state.doctors.append(new_staff)
                case Role.NURSE:
                    self.state.nurses.append(new_staff)
                case Role.MANAGER:
                    self.state.managers.append(new_staff)

            if not isinstance(actor, SystemActor):
                self._log(actor, ActionType.STAFF_ADDED,
                          f"Added {new_staff.role.value}: {new_staff.name}",
                          new_staff.staff_id)

    def hire_staff(self, request: Union[StaffRequest, dict], actor: Actor) -> Staff:
        """Validate a staff request, build the matching variant and add it."""
        try:
            request = StaffRequest.model_validate(request) if isinstance(request, dict) else request
        except ValidationError as e:
            raise InvalidState(f"Invalid staff request: {e}") from e

        match request.role:
            case Role.DOCTOR:
                try:
                    staff = Staff.doctor(request.staffId, request.name, request.username,
                                         request.secret, request.workStart)
                except ValueError as e:
                    raise InvalidState(str(e)) from e
            case Role.NURSE:
                staff = Staff.nurse(request.staffId, request.name, request.username, request.secret)
            case _:
                staff = Staff.manager(request.staffId, request.name, request.username, request.secret)
        self.add_staff(staff, actor)
        return staff

    def modify_staff_password(self, staff: Staff, new_secret: str, actor: Actor) -> None:
        """Managers may reset anyone's password; everyone else only their own."""
        with self._guard("modify_staff_password"):
            require_manager_or_self(actor, staff, "modify this staff member's password")
            if not new_secret:
                raise InvalidState("New password must not be empty")
            staff.set_secret(new_secret)
            self._log(actor, ActionType.STAFF_MODIFIED,
                      f"Modified password for {staff.name}", staff.staff_id)

    def assign_nurse_shift(self, nurse: Staff, day: Union[Weekday, str, int],
                           shift: Shift, actor: Actor) -> None:
        """
        Roster a nurse on a shift for a weekday.

        A nurse gets at most one shift per day: any existing assignment on that
        day, whichever shift it is, makes the call fail. Nothing is overwritten.
        """
        with self._guard("assign_nurse_shift"):
            require_staff_manager(actor, "assign shifts")
            if not nurse.is_nurse:
                raise InvalidState(f"{nurse.name} is not a nurse")
            try:
                day = Weekday.of(day)
            except ValueError as e:
                raise InvalidState(str(e)) from e
            if nurse.roster.shift_on(day) is not None:
                raise ComplianceViolation(f"Nurse {nurse.name} already has a shift on {day.name}")

            nurse.roster.assign(day, shift)
            self._log(actor, ActionType.SHIFT_ASSIGNED,
                      f"Assigned {shift.value} shift to {nurse.name} on {day.name}",
                      nurse.staff_id)

    def set_doctor_work_start(self, doctor: Staff, start: time, actor: Actor) -> None:
        with self._guard("set_doctor_work_start"):
            require_staff_manager(actor, "change doctor hours")
            if not doctor.is_doctor:
                raise InvalidState(f"{doctor.name} is not a doctor")
            try:
                roster = DoctorRoster(start, doctor.roster.work_hours)
            except ValueError as e:
                raise InvalidState(str(e)) from e

            doctor.roster = roster
            self._log(actor, ActionType.STAFF_MODIFIED,
                      f"Set daily hours for {doctor.name} to {roster.work_start:%H:%M}-{roster.work_end:%H:%M}",
                      doctor.staff_id)

    def check_compliance(self) -> None:
        """
        Check facility-wide staffing rules:
        - nurses on both the morning (8am-4pm) and afternoon (2pm-10pm) shift every day
        - no nurse rostered for more than 8 hours in a single day
        - at least one doctor in the care home

        Pure validation: nothing is mutated and nothing is written to the audit log.

        Raises:
            ComplianceViolation: carrying every violation found.
        """
        with self._lock:
            violations = self._compliance.apply_all()
            if violations:
                logger.warning("⚠️ Compliance check failed with %d violation(s)", len(violations))
                raise ComplianceViolation("; ".join(violations), violations)
            logger.info("✅ Compliance check passed")

    def authenticate(self, username: str, secret: str) -> Staff:
        """Resolve a login to a staff member. No audit record is written."""
        with self._lock:
            staff = self.find_staff_by_username(username)
            if staff is None or not staff.check_secret(secret):
                raise Unauthorized("Invalid username or password")
            return staff

    # ==================== Patient Management ====================

    def generate_patient_id(self) -> str:
        return self.ids.patient_id()

    def register_patient(self, request: Union[AdmissionRequest, dict]) -> Patient:
        """
        Build a Patient with a fresh id from a validated admission request.

        Registration only creates the record: no actor, no audit entry. The
        patient enters the facility, and the audit log, through admit_patient.
        """
        with self._guard("register_patient"):
            try:
                request = AdmissionRequest.model_validate(request) if isinstance(request, dict) else request
            except ValidationError as e:
                raise InvalidState(f"Invalid admission request: {e}") from e
            if request.dateOfBirth > self.clock.today():
                raise InvalidState(
                    f"Date of birth {request.dateOfBirth} is after today ({self.clock.today()})"
                )

            return Patient(
                patient_id=self.ids.patient_id(),
                name=request.name,
                date_of_birth=request.dateOfBirth,
                gender=request.gender,
                medical_condition=request.medicalCondition,
                requires_isolation=request.requiresIsolation,
                admission_date=self.clock.today(),
            )

    def admit_patient(self, patient: Patient, bed: Bed, actor: Actor) -> None:
        """
        Admit a patient to a vacant bed.

        Any staff member may admit; there is no roster check. The bed's room
        must accept the patient (same gender as current occupants, single-bed
        room when isolation is required).
        """
        with self._guard("admit_patient"):
            require_staff(actor)
            room = self._room_for(bed)
            current = self.find_bed_of_patient(patient)
            if current is not None:
                raise InvalidState(f"Patient {patient.name} is already in bed {current.bed_id}")
            if not bed.is_occupied:
                self._check_placement(room, patient)

            bed.assign_patient(patient)
            patient.admission_date = self.clock.today()
            patient.discharge_date = None
            self._log(actor, ActionType.PATIENT_ADMITTED,
                      f"Admitted patient {patient.name} to bed {bed.bed_id}",
                      patient.patient_id)

    def move_patient(self, from_bed: Bed, to_bed: Bed, actor: Actor) -> None:
        """
        Move a patient to another bed. Only a nurse on duty may do this.

        Prescriptions and medication records follow the patient to the new
        bed, in their original order; the source bed ends with no history.
        """
        with self._guard("move_patient"):
            nurse = require_nurse(actor, "move patients")
            require_on_duty(nurse, self.clock.now())
            if not from_bed.is_occupied:
                raise InvalidState(f"Source bed {from_bed.bed_id} is not occupied")
            if to_bed.is_occupied:
                raise BedOccupied(
                    f"Bed {to_bed.bed_id} is already occupied by {to_bed.current_patient.name}"
                )
            patient = from_bed.current_patient
            self._check_placement(self._room_for(to_bed), patient)

            from_bed.remove_patient()
            to_bed.assign_patient(patient)
            for prescription in from_bed.prescriptions:
                to_bed.add_prescription(prescription)
            for record in from_bed.medication_records:
                to_bed.add_medication_record(record)
            from_bed.clear_history()

            self._log(nurse, ActionType.PATIENT_MOVED,
                      f"Moved patient {patient.name} from {from_bed.bed_id} to {to_bed.bed_id}",
                      patient.patient_id)

    def discharge_patient(self, bed: Bed, actor: Actor) -> Patient:
        """
        Discharge the patient in a bed and return them.

        The stay's prescriptions are deactivated and, together with its
        medication records, moved from the bed to the discharge archive so the
        next occupant starts with a clean bed.
        """
        with self._guard("discharge_patient"):
            require_staff(actor)
            if not bed.is_occupied:
                raise InvalidState(f"Bed {bed.bed_id} is not occupied")

            patient = bed.current_patient
            archive = self.state.discharged.setdefault(patient.patient_id, DischargeArchive())
            for prescription in bed.prescriptions:
                prescription.deactivate()
                archive.prescriptions.append(prescription)
            archive.medication_records.extend(bed.medication_records)
            bed.clear_history()
            patient.discharge_date = self.clock.today()
            bed.remove_patient()

            self._log(actor, ActionType.PATIENT_DISCHARGED,
                      f"Discharged patient {patient.name} from bed {bed.bed_id}",
                      patient.patient_id)
            return patient

    def patient_history(self, patient_id: str) -> Optional[DischargeArchive]:
        """Archived prescriptions and records of a discharged patient, across all stays."""
        with self._lock:
            return self.state.discharged.get(patient_id)

    # ==================== Prescription Management ====================

    def add_prescription(self, bed: Bed, doctor: Actor,
                         items: Optional[Iterable[Union[PrescriptionItemRequest, dict]]] = None) -> Prescription:
        """
        Write a prescription for the patient in a bed. Only a doctor on duty may prescribe.

        `items` are validated and resolved against the medicine catalog before
        the prescription id is drawn.
        """
        with self._guard("add_prescription"):
            prescriber = require_prescriber(doctor)
            now = self.clock.now()
            require_on_duty(prescriber, now)
            if not bed.is_occupied:
                raise InvalidState(f"No patient in bed {bed.bed_id}")
            lines = self._resolve_items(items or [])

            prescription_id = self.ids.prescription_id()
            prescription = Prescription(prescription_id, bed.current_patient, prescriber, now)
            for request, medicine in lines:
                prescription.add_item(medicine, request.dosage,
                                      request.administrationTimes, request.instructions)
            bed.add_prescription(prescription)

            self._log(prescriber, ActionType.PRESCRIPTION_ADDED,
                      f"Added prescription {prescription_id} for patient {bed.current_patient.name}",
                      prescription_id)
            return prescription

    def discontinue_prescription(self, bed: Bed, prescription: Prescription, doctor: Actor) -> None:
        with self._guard("discontinue_prescription"):
            prescriber = require_prescriber(doctor)
            require_on_duty(prescriber, self.clock.now())
            if not any(p is prescription for p in bed.prescriptions):
                raise InvalidState(
                    f"Prescription {prescription.prescription_id} is not attached to bed {bed.bed_id}"
                )
            if not prescription.active:
                raise InvalidState(f"Prescription {prescription.prescription_id} is already inactive")

            prescription.deactivate()
            self._log(prescriber, ActionType.PRESCRIPTION_DISCONTINUED,
                      f"Discontinued prescription {prescription.prescription_id} for patient "
                      f"{prescription.patient.name}",
                      prescription.prescription_id)

    # ==================== Medication Administration ====================

    def administer_medication(self, bed: Bed, item: PrescriptionItem, nurse: Actor,
                              notes: Optional[str] = None) -> MedicationRecord:
        """Record a successful administration. Only a nurse on duty may administer."""
        with self._guard("administer_medication"):
            administrator = require_administrator(nurse)
            now = self.clock.now()
            require_on_duty(administrator, now)
            if not bed.is_occupied:
                raise InvalidState(f"No patient in bed {bed.bed_id}")

            record_id = self.ids.record_id()
            record = MedicationRecord(record_id, bed.current_patient, item, administrator, now, notes)
            bed.add_medication_record(record)

            self._log(administrator, ActionType.MEDICATION_ADMINISTERED,
                      f"Administered {item.medicine.name} to patient {bed.current_patient.name}",
                      record_id)
            return record

    def add_medicine(self, medicine: Medicine, actor: Actor) -> None:
        with self._guard("add_medicine"):
            require_staff_manager(actor, "update the medicine catalog")
            if self.find_medicine(medicine.medicine_id) is not None:
                raise InvalidState(f"Medicine {medicine.medicine_id} is already cataloged")
            self.state.medicines.append(medicine)
            self._log(actor, ActionType.MEDICINE_CATALOGED,
                      f"Cataloged {medicine}", medicine.medicine_id)

    # ==================== System Events ====================

    def record_system_event(self, action_type: ActionType, description: str) -> ActionLog:
        """Log a start or shutdown of the surrounding system. No staff member is attached."""
        with self._guard("record_system_event"):
            if action_type not in (ActionType.SYSTEM_START, ActionType.SYSTEM_SHUTDOWN):
                raise InvalidState(f"{action_type.value} is not a system event")
            return self._log(None, action_type, description, "SYSTEM")

    # ==================== Utility Methods ====================

    def _room_for(self, bed: Bed) -> Room:
        room = self.find_room_for_bed(bed)
        if room is None:
            raise InvalidState(f"Bed {bed.bed_id} does not belong to this care home")
        return room

    def _check_placement(self, room: Room, patient: Patient) -> None:
        if room.can_accommodate(patient):
            return
        if patient.requires_isolation and room.capacity > 1:
            raise ComplianceViolation(
                f"Patient {patient.name} requires isolation but room {room.room_id} "
                f"has {room.capacity} beds"
            )
        gender = room.room_gender()
        if gender is not None and gender != patient.gender:
            raise ComplianceViolation(
                f"Room {room.room_id} hosts {gender.value} patients; "
                f"cannot place {patient.gender.value} patient {patient.name}"
            )
        raise BedOccupied(f"Room {room.room_id} has no vacant bed")

    def _resolve_items(self, items: Iterable[Union[PrescriptionItemRequest, dict]]):
        lines = []
        for raw in items:
            try:
                request = (
                    PrescriptionItemRequest.model_validate(raw) if isinstance(raw, dict) else raw
                )
            except ValidationError as e:
                raise InvalidState(f"Invalid prescription item: {e}") from e
            medicine = self.find_medicine(request.medicineId)
            if medicine is None:
                raise InvalidState(f"Unknown medicine {request.medicineId}")
            lines.append((request, medicine))
        return lines

    # ==================== Lookups ====================

    @property
    def wards(self) -> List[Ward]:
        return list(self.state.wards)

    def get_ward(self, ward_id: str) -> Optional[Ward]:
        for ward in self.state.wards:
            if ward.ward_id == ward_id:
                return ward
        return None

    def find_bed(self, bed_id: str) -> Optional[Bed]:
        for ward in self.state.wards:
            bed = ward.get_bed(bed_id)
            if bed is not None:
                return bed
        return None

    def find_room_for_bed(self, bed: Bed) -> Optional[Room]:
        for ward in self.state.wards:
            room = ward.room_of(bed)
            if room is not None:
                return room
        return None

    def find_bed_of_patient(self, patient: Patient) -> Optional[Bed]:
        for ward in self.state.wards:
            for room in ward.rooms:
                for bed in room.beds:
                    if bed.current_patient is patient:
                        return bed
        return None

    @property
    def all_staff(self) -> List[Staff]:
        return list(self.state.all_staff)

    @property
    def doctors(self) -> List[Staff]:
        return list(self.state.doctors)

    @property
    def nurses(self) -> List[Staff]:
        return list(self.state.nurses)

    @property
    def managers(self) -> List[Staff]:
        return list(self.state.managers)

    @property
    def medicines(self) -> List[Medicine]:
        return list(self.state.medicines)

    def find_medicine(self, medicine_id: str) -> Optional[Medicine]:
        for medicine in self.state.medicines:
            if medicine.medicine_id == medicine_id:
                return medicine
        return None

    def find_staff_by_username(self, username: str) -> Optional[Staff]:
        for staff in self.state.all_staff:
            if staff.username == username:
                return staff
        return None

    @property
    def action_logs(self) -> List[ActionLog]:
        return self.state.audit_log.entries

    # ==================== Reports ====================

    def roster_report(self) -> pd.DataFrame:
        return reports.roster_table(self.state.nurses)

    def coverage_report(self) -> pd.DataFrame:
        return reports.coverage_summary(self.state.nurses)

    def occupancy_report(self) -> pd.DataFrame:
        return reports.occupancy_summary(self.state.wards)

    def audit_report(self) -> pd.DataFrame:
        return reports.audit_frame(self.state.audit_log.entries)
