from typing import List
from core.medicine import Medicine
from core.room import Room
from core.staff import Staff
from core.ward import Ward
from utils.constants import WARDS, MEDICINES, DEFAULT_MANAGER


def build_wards(layout: List[dict] = WARDS) -> List[Ward]:
    """
    Build wards from the configured layout.

    Rooms are named `<ward_id>-R<n>` in the order their capacities are listed,
    e.g. WA-R5 is the fifth room of ward WA.
    """
    wards = []
    for entry in layout:
        ward = Ward(entry["id"], entry["name"])
        for i, capacity in enumerate(entry["room_capacities"], start=1):
            ward.add_room(Room(f"{entry['id']}-R{i}", capacity))
        wards.append(ward)
    return wards


def build_medicine_catalog(entries: List[dict] = MEDICINES) -> List[Medicine]:
    return [
        Medicine(e["id"], e["name"], e["description"], e["dosage"], e["unit"])
        for e in entries
    ]


def build_default_manager(account: dict = DEFAULT_MANAGER) -> Staff:
    return Staff.manager(account["id"], account["name"], account["username"], account["secret"])
