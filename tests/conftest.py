from __future__ import annotations

from datetime import date, datetime, time

import pytest

from carehome import FacilityEngine
from core.clock import FixedClock
from core.patient import Gender
from core.roster import Shift, Weekday
from core.staff import Staff


@pytest.fixture
def clock() -> FixedClock:
    # 2024-01-01 is a Monday
    return FixedClock(datetime(2024, 1, 1, 9, 0))


@pytest.fixture
def engine(clock: FixedClock) -> FacilityEngine:
    return FacilityEngine(clock=clock)


@pytest.fixture
def manager(engine: FacilityEngine) -> Staff:
    return engine.find_staff_by_username("admin")


@pytest.fixture
def doctor(engine: FacilityEngine, manager: Staff) -> Staff:
    """A doctor working 10:00-11:00 every day."""
    staff = Staff.doctor("D001", "Dr Grey", "grey", "pw", time(10, 0))
    engine.add_staff(staff, manager)
    return staff


@pytest.fixture
def nurse(engine: FacilityEngine, manager: Staff) -> Staff:
    """A nurse rostered on the Monday morning shift only."""
    staff = Staff.nurse("N001", "Nina", "nina", "pw")
    engine.add_staff(staff, manager)
    engine.assign_nurse_shift(staff, Weekday.MONDAY, Shift.MORNING, manager)
    return staff


@pytest.fixture
def make_patient(engine: FacilityEngine):
    def _make(name="Alice", gender=Gender.FEMALE, isolation=False, dob=date(1940, 5, 1)):
        return engine.register_patient({
            "name": name,
            "dateOfBirth": dob,
            "gender": gender,
            "medicalCondition": "Observation",
            "requiresIsolation": isolation,
        })

    return _make


@pytest.fixture
def admitted_bed(engine: FacilityEngine, manager: Staff, make_patient):
    """WA-R5-B1 holding a female patient, admitted by the manager."""
    bed = engine.find_bed("WA-R5-B1")
    engine.admit_patient(make_patient("Alice"), bed, manager)
    return bed
