from typing import List, Optional


class CareHomeError(Exception):
    """Base class for every rule failure raised by the facility engine."""

    pass


class Unauthorized(CareHomeError):
    """Raised when the acting staff member's role does not permit the requested operation."""

    pass


class StaffNotRostered(CareHomeError):
    """Raised when the acting staff member is authorized by role but not on duty at the current moment."""

    pass


class BedOccupied(CareHomeError):
    """Raised when a patient is assigned to a bed that already holds a patient."""

    pass


class ComplianceViolation(CareHomeError):
    """
    Raised when a facility-wide staffing or room placement rule would be or is violated.

    Carries every violation message found, so a single compliance check reports all gaps at once.
    """

    def __init__(self, message: str, violations: Optional[List[str]] = None):
        self.violations = list(violations) if violations else [message]
        super().__init__(message)


class InvalidState(CareHomeError):
    """Raised when a structural precondition is unmet, e.g. acting on a vacant bed."""

    pass


# Mapping of custom exceptions to HTTP status codes
CUSTOM_ERRORS = {
    Unauthorized: 403,
    StaffNotRostered: 409,
    BedOccupied: 409,
    ComplianceViolation: 422,
    InvalidState: 400,
}
