from typing import List, Optional
from core.bed import Bed
from core.patient import Gender, Patient


class Room:
    """
    A room of fixed capacity. Beds are created with the room and named `<room_id>-B<n>`.

    Placement policy: every occupied bed of a multi-bed room holds the same
    gender, and patients needing isolation only fit single-bed rooms.
    """

    def __init__(self, room_id: str, capacity: int):
        if capacity < 1:
            raise ValueError(f"Room {room_id} needs at least one bed")
        self.room_id = room_id
        self._capacity = capacity
        self._beds = [Bed(f"{room_id}-B{i}") for i in range(1, capacity + 1)]

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def beds(self) -> List[Bed]:
        return list(self._beds)

    def get_bed(self, bed_id: str) -> Optional[Bed]:
        for bed in self._beds:
            if bed.bed_id == bed_id:
                return bed
        return None

    def contains(self, bed: Bed) -> bool:
        return any(b is bed for b in self._beds)

    @property
    def occupied_count(self) -> int:
        return sum(1 for bed in self._beds if bed.is_occupied)

    @property
    def vacant_count(self) -> int:
        return self._capacity - self.occupied_count

    def has_vacant_bed(self) -> bool:
        return self.vacant_count > 0

    def room_gender(self) -> Optional[Gender]:
        """Gender of the current occupants, None while the room is empty."""
        for bed in self._beds:
            if bed.is_occupied:
                return bed.current_patient.gender
        return None

    def can_accommodate(self, patient: Patient) -> bool:
        if not self.has_vacant_bed():
            return False
        # isolation requires a private room
        if patient.requires_isolation and self._capacity > 1:
            return False
        gender = self.room_gender()
        if gender is not None and gender != patient.gender:
            return False
        return True

    def __repr__(self) -> str:
        return f"Room {self.room_id} ({self.occupied_count}/{self._capacity} occupied)"
