"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from tailor.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path = None, template_id: str = "modern") -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this rendering session
        template_id: Template being rendered, for provenance

    Returns:
        Path to log file

    Example:
        from tailor.contexts.templating.logger import setup_templating_logger, _log_info

        log_file = setup_templating_logger(log_dir, template_id="academic")
        _log_info("Rendering...")
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Template": template_id},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_render_result(template_id: str, output_chars: int, truncated_bullets: int) -> None:
    """Log a one-line summary of a render call, warning when bullets were cut."""
    _log_info(f"Rendered '{template_id}' ({output_chars} chars)")
    if truncated_bullets:
        _log_warning(f"Dropped {truncated_bullets} bullet(s) over the '{template_id}' max_bullets limit")
