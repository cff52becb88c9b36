"""
schemas
-------

Pydantic request models validated before the engine builds entities from them.
"""
from .patient import AdmissionRequest
from .staff import StaffRequest
from .prescription import PrescriptionItemRequest
