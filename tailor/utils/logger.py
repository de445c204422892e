"""
Session logging for Tailor scripts.

Every script run gets one log directory under LOGS_PATH with a DEBUG-level
file per context, a colorized INFO console stream, and a provenance header
recording which Tailor build, template directory and catalog produced the
output. Core modules never call this; they log through the [intake],
[target] and [template] wrappers in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from tailor import __version__

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Console colors; INFO keeps loguru's default
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

# Environment overrides worth recording when they are set
CONFIG_VARIABLES = ("TEMPLATE_TYPES_PATH", "TEMPLATE_CATALOG_PATH")

RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[Dict[str, str]] = None,
    level_colors: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Start a logging session for one context.

    Replaces any existing sinks, so calling it twice in one process starts a
    fresh session in the new directory.

    Args:
        context_name: "intake" or "template"; names the log file
        log_dir: Session directory (defaults to LOGS_PATH)
        extra_provenance: Run-specific header fields, e.g. {"Template": "modern"}
        level_colors: Console color overrides, e.g. {"INFO": "<cyan>"}

    Returns:
        Path to the session's log file

    Example:
        log_file = setup_logger(
            "template",
            LOGS_PATH / "process_resume_20251114_123456",
            {"Template": "academic"},
        )
    """
    log_dir = Path(log_dir or LOGS_PATH)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance({"Context": context_name, "Log directory": log_dir, **(extra_provenance or {})})
    return log_file


def log_provenance(extra_context: Optional[Dict[str, object]] = None) -> None:
    """
    Write the provenance header for a session.

    Records the Tailor version, the invoking command and interpreter, any
    template configuration overrides from the environment, then extra_context.
    """
    logger.info(RULE)
    logger.info(f"Tailor {__version__} (Python {sys.version.split()[0]})")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")

    for variable in CONFIG_VARIABLES:
        value = os.getenv(variable)
        if value:
            logger.info(f"{variable}: {value}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(RULE)
