from datetime import datetime
from core.roster import Weekday
from core.staff import Staff
from exceptions.custom_errors import StaffNotRostered
from utils.shift_utils import format_time


def is_rostered(staff: Staff, moment: datetime) -> bool:
    """Whether the staff member's roster covers `moment`."""
    return staff.is_on_duty_at(Weekday.of(moment.date()), moment.time())


def require_on_duty(staff: Staff, moment: datetime) -> None:
    """Raise StaffNotRostered unless the staff member is on duty at `moment`."""
    if not is_rostered(staff, moment):
        day = Weekday.of(moment.date())
        raise StaffNotRostered(
            f"{staff.name} is not rostered for {day.name} at {format_time(moment.time())}"
        )
