"""
core
----

Entity graph and rule plumbing of the care home:

- Patient, Staff (doctor / nurse / manager variants), Medicine, Prescription, MedicationRecord:
  pure data holders with local invariants.

- Bed, Room, Ward:
  the physical layout. Rooms own their beds and decide whether a patient fits.

- NurseRoster, DoctorRoster:
  answer "is this staff member on duty now".

- AuditLog:
  append-only trail of action records.

- FacilityState, ComplianceRule, ComplianceManager:
  the state owned by the engine and the manager its compliance check runs through.
"""
