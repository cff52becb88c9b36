import itertools
import threading
from typing import Dict
from utils.constants import ID_FORMATS


class IdGenerator:
    """
    Independent monotonic counters, one per id kind, each starting at 1.

    A value is drawn only when the caller is about to construct the entity,
    so failed operations never burn an id. Counters never reset.
    """

    def __init__(self, formats: Dict[str, dict] = ID_FORMATS):
        self._formats = formats
        self._counters = {kind: itertools.count(1) for kind in formats}
        self._lock = threading.Lock()

    def next_id(self, kind: str) -> str:
        fmt = self._formats[kind]
        with self._lock:
            number = next(self._counters[kind])
        return f"{fmt['prefix']}{number:0{fmt['width']}d}"

    def patient_id(self) -> str:
        return self.next_id("patient")

    def prescription_id(self) -> str:
        return self.next_id("prescription")

    def record_id(self) -> str:
        return self.next_id("record")

    def log_id(self) -> str:
        return self.next_id("log")
