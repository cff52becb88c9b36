from datetime import date, time

import pytest

from core.roster import DoctorRoster, Shift, Weekday
from core.staff import CAPABILITIES, Role, Staff


@pytest.fixture
def monday_nurse():
    nurse = Staff.nurse("N1", "Nina", "nina", "pw")
    nurse.roster.assign(Weekday.MONDAY, Shift.MORNING)
    return nurse


@pytest.mark.parametrize("moment, expected", [
    (time(7, 59), False),
    (time(8, 0), True),
    (time(12, 0), True),
    (time(16, 0), True),
    (time(16, 1), False),
])
def test_morning_shift_bounds_are_inclusive(monday_nurse, moment, expected):
    assert monday_nurse.is_on_duty_at(Weekday.MONDAY, moment) is expected


def test_nurse_is_off_on_unrostered_day(monday_nurse):
    assert not monday_nurse.is_on_duty_at(Weekday.TUESDAY, time(9, 0))


def test_afternoon_shift_window():
    nurse = Staff.nurse("N2", "Omar", "omar", "pw")
    nurse.roster.assign(Weekday.FRIDAY, Shift.AFTERNOON)

    assert nurse.is_on_duty_at(Weekday.FRIDAY, time(14, 0))
    assert nurse.is_on_duty_at(Weekday.FRIDAY, time(22, 0))
    assert not nurse.is_on_duty_at(Weekday.FRIDAY, time(13, 59))


def test_nurse_weekly_hours(monday_nurse):
    monday_nurse.roster.assign(Weekday.WEDNESDAY, Shift.AFTERNOON)
    assert monday_nurse.roster.weekly_hours() == 16
    assert monday_nurse.roster.hours_on(Weekday.TUESDAY) == 0


@pytest.mark.parametrize("moment, expected", [
    (time(9, 59), False),
    (time(10, 0), True),
    (time(10, 59), True),
    (time(11, 0), False),
])
def test_doctor_window_end_is_exclusive(moment, expected):
    doctor = Staff.doctor("D1", "Dr Lee", "lee", "pw", time(10, 0))
    assert doctor.is_on_duty_at(Weekday.MONDAY, moment) is expected


def test_doctor_window_applies_every_day():
    doctor = Staff.doctor("D1", "Dr Lee", "lee", "pw", time(15, 0))
    assert all(doctor.is_on_duty_at(day, time(15, 30)) for day in Weekday)


def test_doctor_defaults_to_ten_oclock():
    roster = Staff.doctor("D1", "Dr Lee", "lee", "pw").roster
    assert roster.work_start == time(10, 0)
    assert roster.work_end == time(11, 0)


def test_doctor_window_accepts_text_start():
    assert DoctorRoster("14:30").work_end == time(15, 30)


def test_doctor_window_cannot_cross_midnight():
    with pytest.raises(ValueError):
        DoctorRoster(time(23, 30))


def test_manager_is_always_on_duty():
    manager = Staff.manager("M1", "Max", "max", "pw")
    assert manager.is_on_duty_at(Weekday.SUNDAY, time(3, 0))


@pytest.mark.parametrize("value, expected", [
    (date(2024, 1, 1), Weekday.MONDAY),
    ("tue", Weekday.TUESDAY),
    ("Sunday", Weekday.SUNDAY),
    (4, Weekday.FRIDAY),
    (Weekday.SATURDAY, Weekday.SATURDAY),
])
def test_weekday_normalisation(value, expected):
    assert Weekday.of(value) is expected


def test_weekday_rejects_unknown_name():
    with pytest.raises(ValueError):
        Weekday.of("someday")


def test_capabilities_are_fixed_per_role():
    assert CAPABILITIES[Role.DOCTOR].prescribe and not CAPABILITIES[Role.DOCTOR].administer
    assert CAPABILITIES[Role.NURSE].administer and not CAPABILITIES[Role.NURSE].prescribe
    manager = Staff.manager("M1", "Max", "max", "pw")
    assert manager.can_manage_staff()
    assert not manager.can_prescribe_medication()
    assert not manager.can_administer_medication()
