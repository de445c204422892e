"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Path = None, source: str = "text") -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session
        source: What is being ingested, for provenance ("resume", "job", ...)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source},
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_extraction_result(kind: str, counts: dict, confidence: float = None) -> None:
    """
    Log a one-line summary of what an extraction pass found.

    Args:
        kind: "resume" or "job"
        counts: Field name -> number of extracted items
        confidence: Extraction confidence, when the record carries one
    """
    summary = ", ".join(f"{name}={count}" for name, count in counts.items())
    if confidence is not None:
        summary += f", confidence={confidence:.2f}"
    _log_debug(f"Extracted {kind}: {summary}")
