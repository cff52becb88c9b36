from datetime import date, datetime, time

import pytest

from core.bed import Bed
from core.medicine import Medicine
from core.patient import Gender, Patient
from core.prescription import Prescription
from core.room import Room
from core.staff import Staff
from core.ward import Ward
from exceptions.custom_errors import BedOccupied


def _patient(patient_id="P1", gender=Gender.FEMALE, isolation=False, name="Pat"):
    return Patient(patient_id, name, date(1950, 1, 1), gender, "", isolation)


# ---------- Bed ----------

def test_assigning_occupied_bed_keeps_original_occupant():
    bed = Bed("B1")
    first = _patient("P1", name="Alice")
    bed.assign_patient(first)

    with pytest.raises(BedOccupied, match="already occupied by Alice"):
        bed.assign_patient(_patient("P2"))

    assert bed.current_patient is first


def test_remove_patient_vacates_bed():
    bed = Bed("B1")
    patient = _patient()
    bed.assign_patient(patient)

    assert bed.remove_patient() is patient
    assert not bed.is_occupied
    assert bed.remove_patient() is None


def test_bed_history_lists_are_copies():
    bed = Bed("B1")
    bed.prescriptions.append("not stored")
    assert bed.prescriptions == []


# ---------- Room ----------

def test_room_names_its_beds():
    room = Room("WA-R1", 4)
    assert [b.bed_id for b in room.beds] == ["WA-R1-B1", "WA-R1-B2", "WA-R1-B3", "WA-R1-B4"]
    assert room.get_bed("WA-R1-B3") is room.beds[2]
    assert room.get_bed("WA-R2-B1") is None


def test_room_requires_a_bed():
    with pytest.raises(ValueError):
        Room("R0", 0)


def test_empty_room_accepts_either_gender():
    room = Room("R", 2)
    assert room.room_gender() is None
    assert room.can_accommodate(_patient(gender=Gender.MALE))
    assert room.can_accommodate(_patient(gender=Gender.FEMALE))


def test_room_keeps_single_gender():
    room = Room("R", 2)
    room.beds[0].assign_patient(_patient("P1", Gender.FEMALE))

    assert room.room_gender() is Gender.FEMALE
    assert not room.can_accommodate(_patient("P2", Gender.MALE))
    assert room.can_accommodate(_patient("P3", Gender.FEMALE))


def test_isolation_only_fits_single_bed_room():
    isolated = _patient(isolation=True)
    assert not Room("R", 2).can_accommodate(isolated)
    assert Room("S", 1).can_accommodate(isolated)


def test_full_room_accepts_nobody():
    room = Room("S", 1)
    room.beds[0].assign_patient(_patient("P1", Gender.MALE))

    assert room.occupied_count == 1
    assert room.vacant_count == 0
    assert not room.can_accommodate(_patient("P2", Gender.MALE))


# ---------- Ward ----------

@pytest.fixture
def ward():
    ward = Ward("WX", "Ward X")
    for room_id, capacity in [("WX-R1", 2), ("WX-R2", 1), ("WX-R3", 2)]:
        ward.add_room(Room(room_id, capacity))
    return ward


def test_ward_totals(ward):
    ward.get_bed("WX-R1-B1").assign_patient(_patient())
    assert ward.total_capacity == 5
    assert ward.total_occupied == 1
    assert ward.total_vacant == 4
    assert len(ward.vacant_beds()) == 4


def test_ward_finds_room_of_bed(ward):
    bed = ward.get_bed("WX-R3-B2")
    assert ward.room_of(bed) is ward.get_room("WX-R3")
    assert ward.room_of(Bed("WX-R3-B2")) is None


def test_suitable_rooms_in_insertion_order(ward):
    ward.get_bed("WX-R1-B1").assign_patient(_patient("P1", Gender.MALE))

    female = _patient("P2", Gender.FEMALE)
    isolated = _patient("P3", Gender.FEMALE, isolation=True)

    assert [r.room_id for r in ward.get_suitable_rooms(female)] == ["WX-R2", "WX-R3"]
    assert [r.room_id for r in ward.get_suitable_rooms(isolated)] == ["WX-R2"]


# ---------- Patient / Prescription ----------

def test_patient_age_accounts_for_birthday():
    patient = Patient("P1", "Edith", date(1950, 6, 15), Gender.FEMALE)
    assert patient.age_on(date(2024, 6, 14)) == 73
    assert patient.age_on(date(2024, 6, 15)) == 74


def test_prescription_items_have_sorted_unique_times():
    medicine = Medicine("MED001", "Paracetamol", "Pain relief", "500", "mg")
    doctor = Staff.doctor("D1", "Dr Lee", "lee", "pw")
    prescription = Prescription("RX1", _patient(), doctor, datetime(2024, 1, 1, 10, 30))

    item = prescription.add_item(medicine, "1 tablet", [time(20, 0), time(8, 0), time(8, 0)])

    assert item.administration_times == (time(8, 0), time(20, 0))
    assert prescription.find_item("MED001") is item
    assert prescription.find_item("MED999") is None

    prescription.deactivate()
    assert prescription.active is False
