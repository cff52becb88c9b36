"""
carehome.rules
--------------

Exposes the checks gating every engine operation by importing from:

- `authorization`: Role and capability gates (Unauthorized).
- `roster`: On-duty checks against the injected clock (StaffNotRostered).
- `compliance`: Facility-wide staffing rules (ComplianceViolation).
"""
from .authorization import *
from .roster import *
from .compliance import *
