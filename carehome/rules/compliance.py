from typing import Dict, List, Optional
from core.constraint_manager import ComplianceManager, ComplianceRule
from core.roster import Shift
from core.state import FacilityState
from carehome.reports import coverage_summary
from utils.constants import COMPLIANCE_RULES, MAX_DAILY_HOURS, MIN_NURSES_PER_SHIFT
import logging

"""
Facility-wide staffing rules run by FacilityEngine.check_compliance.
Each rule returns the list of violation messages it found; an empty list means compliant.
"""

logger = logging.getLogger(__name__)


def shift_coverage_rule(state: FacilityState) -> List[str]:
    """Every weekday needs at least MIN_NURSES_PER_SHIFT nurses on each shift."""
    violations = []
    coverage = coverage_summary(state.nurses)
    for day_name, row in coverage.iterrows():
        for shift in Shift:
            if row[shift.value] < MIN_NURSES_PER_SHIFT:
                violations.append(f"No nurse assigned to {shift.value.lower()} shift on {day_name}")
    return violations


def max_daily_hours_rule(state: FacilityState) -> List[str]:
    """No nurse works more than MAX_DAILY_HOURS on a single day."""
    violations = []
    for nurse in state.nurses:
        for day, shift in nurse.roster.schedule.items():
            if shift.duration_hours > MAX_DAILY_HOURS:
                violations.append(
                    f"Nurse {nurse.name} assigned more than {MAX_DAILY_HOURS} hours on {day.name}"
                )
    return violations


def doctor_presence_rule(state: FacilityState) -> List[str]:
    if not state.doctors:
        return ["No doctor assigned to the care home"]
    return []


def define_compliance_rules() -> Dict[str, ComplianceRule]:
    """Named staffing rules, keyed the same way as COMPLIANCE_RULES in constants.json."""
    return {
        "shift_coverage": ComplianceRule(
            shift_coverage_rule,
            "Every day needs nurses on both the morning and the afternoon shift",
        ),
        "max_daily_hours": ComplianceRule(
            max_daily_hours_rule,
            f"No nurse may be rostered for more than {MAX_DAILY_HOURS} hours a day",
        ),
        "doctor_presence": ComplianceRule(
            doctor_presence_rule,
            "At least one doctor must be assigned to the care home",
        ),
    }


def build_compliance_manager(state: FacilityState,
                             enabled: Optional[Dict[str, bool]] = None) -> ComplianceManager:
    """
    Register every defined compliance rule, in definition order.

    `enabled` maps rule names to on/off flags and defaults to COMPLIANCE_RULES;
    a rule missing from the map is on.
    """
    enabled = COMPLIANCE_RULES if enabled is None else enabled
    manager = ComplianceManager(state)
    for name, rule in define_compliance_rules().items():
        logger.debug("Registering compliance rule %r", name)
        manager.add_rule(rule, condition=enabled.get(name, True))
    return manager
