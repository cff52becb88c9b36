import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
MAX_DAILY_HOURS = _constants["MAX_DAILY_HOURS"]
MIN_NURSES_PER_SHIFT = _constants["MIN_NURSES_PER_SHIFT"]
COMPLIANCE_RULES = _constants["COMPLIANCE_RULES"]

DOCTOR_DEFAULT_START = _constants["DOCTOR_DEFAULT_START"]
DOCTOR_WORK_HOURS = _constants["DOCTOR_WORK_HOURS"]
SHIFTS = _constants["SHIFTS"]

ID_FORMATS = _constants["ID_FORMATS"]

WARDS = _constants["WARDS"]
MEDICINES = _constants["MEDICINES"]
DEFAULT_MANAGER = _constants["DEFAULT_MANAGER"]
