from typing import List, Optional
from core.bed import Bed
from core.patient import Patient
from core.room import Room


class Ward:
    def __init__(self, ward_id: str, name: str):
        self.ward_id = ward_id
        self.name = name
        self._rooms: List[Room] = []

    def add_room(self, room: Room) -> None:
        self._rooms.append(room)

    @property
    def rooms(self) -> List[Room]:
        return list(self._rooms)

    def get_room(self, room_id: str) -> Optional[Room]:
        for room in self._rooms:
            if room.room_id == room_id:
                return room
        return None

    def get_bed(self, bed_id: str) -> Optional[Bed]:
        for room in self._rooms:
            bed = room.get_bed(bed_id)
            if bed is not None:
                return bed
        return None

    def room_of(self, bed: Bed) -> Optional[Room]:
        for room in self._rooms:
            if room.contains(bed):
                return room
        return None

    @property
    def total_capacity(self) -> int:
        return sum(room.capacity for room in self._rooms)

    @property
    def total_occupied(self) -> int:
        return sum(room.occupied_count for room in self._rooms)

    @property
    def total_vacant(self) -> int:
        return sum(room.vacant_count for room in self._rooms)

    def vacant_beds(self) -> List[Bed]:
        return [bed for room in self._rooms for bed in room.beds if not bed.is_occupied]

    def get_suitable_rooms(self, patient: Patient) -> List[Room]:
        """Rooms that can take the patient, in insertion order. No ranking beyond that."""
        return [room for room in self._rooms if room.can_accommodate(patient)]

    def __repr__(self) -> str:
        return f"{self.name} ({self.total_occupied}/{self.total_capacity} beds occupied)"
