import os
from pathlib import Path
from dotenv import load_dotenv

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

load_dotenv(PROJECT_ROOT / ".env")

# === Common directories ===
CONFIG_DIR = PROJECT_ROOT / "config"
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
LOG_DIR = Path(os.getenv("CAREHOME_LOG_DIR", PROJECT_ROOT))
LOG_LEVEL = os.getenv("CAREHOME_LOG_LEVEL", "INFO").upper()

# === Default log file path ===
LOG_PATH = LOG_DIR / "carehome.log"
