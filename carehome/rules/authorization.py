from core.staff import Actor, Staff, SystemActor
from exceptions.custom_errors import Unauthorized

"""
Role and capability gates. Each check raises Unauthorized or returns the acting staff member.
"""


def require_staff(actor: Actor) -> Staff:
    """A real staff member must perform the action; neither None nor the system actor qualifies."""
    if actor is None or isinstance(actor, SystemActor):
        raise Unauthorized("No staff member specified")
    return actor


def require_staff_manager(actor: Actor, action: str) -> Staff:
    staff = require_staff(actor)
    if not staff.can_manage_staff():
        raise Unauthorized(f"{staff.name} is not authorized to {action}")
    return staff


def require_manager_or_self(actor: Actor, target: Staff, action: str) -> Staff:
    staff = require_staff(actor)
    if not staff.can_manage_staff() and staff.staff_id != target.staff_id:
        raise Unauthorized(f"{staff.name} is not authorized to {action}")
    return staff


def require_nurse(actor: Actor, action: str) -> Staff:
    staff = require_staff(actor)
    if not staff.is_nurse:
        raise Unauthorized(f"Only nurses can {action}")
    return staff


def require_prescriber(actor: Actor) -> Staff:
    staff = require_staff(actor)
    if not staff.can_prescribe_medication():
        raise Unauthorized(f"{staff.name} is not authorized to prescribe medication")
    return staff


def require_administrator(actor: Actor) -> Staff:
    staff = require_staff(actor)
    if not staff.can_administer_medication():
        raise Unauthorized(f"{staff.name} is not authorized to administer medication")
    return staff
