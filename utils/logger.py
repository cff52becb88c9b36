# utils/logger.py
import logging
import sys
from pathlib import Path
from typing import Union
from config.paths import LOG_LEVEL, LOG_PATH

"""
The "carehome" logger every module logs through via logging.getLogger(__name__).
CAREHOME_LOG_LEVEL and CAREHOME_LOG_DIR in .env pick the level and the log file location.
"""

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
STREAM_FORMAT = "[%(levelname)s] %(message)s"


def configure_logger(level: Union[int, str] = LOG_LEVEL, log_path: Path = LOG_PATH) -> logging.Logger:
    """
    Set the level of the "carehome" logger and attach its file and stdout handlers.

    Calling again only changes the level: handlers are attached once per process.
    """
    carehome_logger = logging.getLogger("carehome")
    carehome_logger.setLevel(level)

    if carehome_logger.handlers:
        return carehome_logger

    log_path.parent.mkdir(parents=True, exist_ok=True)

    # full records go to the file
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    # short records to stdout
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(STREAM_FORMAT))

    carehome_logger.addHandler(file_handler)
    carehome_logger.addHandler(stream_handler)
    return carehome_logger


logger = configure_logger()
