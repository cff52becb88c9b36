"""
carehome
--------

The facility engine and the rules it enforces:

- `engine`: FacilityEngine, the single entry point for every state change.
- `rules`: Authorization, roster and compliance checks.
- `ids`: Monotonic id counters (P, RX, MR, LOG).
- `bootstrap`: Wards, medicine catalog and default manager built from constants.json.
- `reports`: pandas views of the roster, shift coverage, occupancy and audit trail.
"""
from .engine import FacilityEngine
