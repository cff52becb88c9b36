import logging
from dataclasses import dataclass
from typing import Callable, List
from core.state import FacilityState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComplianceRule:
    check: Callable[[FacilityState], List[str]]
    message: str


class ComplianceManager:
    def __init__(self, state: FacilityState):
        self.state = state
        self.rules: List[ComplianceRule] = []

    def add_rule(self, rule: ComplianceRule, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule)
        else:
            logger.info("⏭️ Compliance rule disabled: %s", rule.message)

    def apply_all(self) -> List[str]:
        """Apply all registered rules in order and collect their violation messages."""
        violations: List[str] = []
        for rule in self.rules:
            found = rule.check(self.state)
            if found:
                logger.warning("⚠️ %s (%d violation(s))", rule.message, len(found))
            violations.extend(found)
        return violations
