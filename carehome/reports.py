import pandas as pd
from typing import Iterable, List
from core.audit import ActionLog
from core.roster import Shift, Weekday
from core.staff import Staff
from core.ward import Ward


def roster_table(nurses: Iterable[Staff]) -> pd.DataFrame:
    """
    Weekly nurse roster: one row per nurse (indexed by staff id), one column per weekday.

    Weekday columns are labelled 'Mon'..'Sun' and hold the shift name, or an empty string on a day off.
    """
    records = []
    for nurse in nurses:
        row = {"staff_id": nurse.staff_id, "Name": nurse.name}
        for day in Weekday:
            shift = nurse.roster.shift_on(day)
            row[day.label] = shift.value if shift is not None else ""
        records.append(row)
    columns = ["staff_id", "Name"] + [day.label for day in Weekday]
    return pd.DataFrame.from_records(records, columns=columns).set_index("staff_id")


def coverage_summary(nurses: Iterable[Staff]) -> pd.DataFrame:
    """
    Nurses per shift for every weekday.

    Index is the weekday name (MONDAY..SUNDAY), columns are the shift names plus 'MAX_HOURS', the
    longest day any single nurse works on that weekday.
    """
    nurses = list(nurses)
    records = []
    for day in Weekday:
        counts = {shift.value: 0 for shift in Shift}
        max_hours = 0
        for nurse in nurses:
            shift = nurse.roster.shift_on(day)
            if shift is not None:
                counts[shift.value] += 1
            max_hours = max(max_hours, nurse.roster.hours_on(day))
        records.append({"day": day.name, **counts, "MAX_HOURS": max_hours})
    return pd.DataFrame.from_records(records, index="day")


def occupancy_summary(wards: Iterable[Ward]) -> pd.DataFrame:
    """One row per room with capacity, occupancy and the gender currently hosted."""
    records = []
    for ward in wards:
        for room in ward.rooms:
            gender = room.room_gender()
            records.append({
                "ward": ward.ward_id,
                "room": room.room_id,
                "capacity": room.capacity,
                "occupied": room.occupied_count,
                "vacant": room.vacant_count,
                "gender": gender.value if gender else "",
            })
    return pd.DataFrame.from_records(
        records, columns=["ward", "room", "capacity", "occupied", "vacant", "gender"]
    )


def audit_frame(logs: List[ActionLog]) -> pd.DataFrame:
    """Audit trail as a DataFrame indexed by log id, oldest first."""
    records = [
        {
            "log_id": log.log_id,
            "timestamp": log.timestamp,
            "performed_by": log.performer_name,
            "action": log.action_type.value,
            "target": log.target_id,
            "description": log.description,
        }
        for log in logs
    ]
    df = pd.DataFrame.from_records(
        records,
        columns=["log_id", "timestamp", "performed_by", "action", "target", "description"],
    )
    return df.set_index("log_id")
