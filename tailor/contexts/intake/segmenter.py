"""
Section segmentation for the Intake context.

Splits a raw resume or job posting body into named sections by matching
standalone header lines against a header vocabulary. Text before the first
recognized header is discarded (and logged).
"""

from typing import Callable, Dict, Optional

from tailor.contexts.intake.logger import _log_debug
from tailor.contexts.intake.section_patterns import (
    JOB_MAX_HEADER_LENGTH,
    RESUME_MAX_HEADER_LENGTH,
    is_bullet_line,
    match_job_header,
    match_resume_header,
)
from tailor.utils.text_processing import truncate_display

HeaderMatcher = Callable[[str], Optional[str]]

REPEAT_POLICIES = ("append", "replace")


def segment_sections(
    text: str,
    match_header: HeaderMatcher,
    max_header_length: int,
    on_repeat: str = "append",
) -> Dict[str, str]:
    """
    Split text into named sections.

    A line is a header only if it is shorter than max_header_length, does not
    start with a bullet, and match_header() names a section for it. Content
    under a header runs until the next header. A section is only recorded if
    it holds at least one non-blank line.

    Args:
        text: Normalized body text
        match_header: Maps a line to a section name, or None
        max_header_length: Lines this long or longer are never headers
        on_repeat: "append" joins a repeated section's content to the earlier
            content; "replace" keeps only the last occurrence

    Returns:
        Section name -> section content (insertion order = first appearance).
        Empty dict when no header is found.

    Raises:
        ValueError: If on_repeat is not a known policy
    """
    if on_repeat not in REPEAT_POLICIES:
        raise ValueError(f"Unknown repeat policy '{on_repeat}' (expected one of {REPEAT_POLICIES})")

    sections: Dict[str, str] = {}
    current_section = None
    current_content = []
    preamble = []

    def flush() -> None:
        if current_section is None or not any(line.strip() for line in current_content):
            return
        content = "\n".join(current_content).strip()
        if current_section in sections and on_repeat == "append":
            sections[current_section] = f"{sections[current_section]}\n{content}"
        else:
            sections[current_section] = content

    for line in (text or "").split("\n"):
        stripped = line.strip()

        section = None
        if stripped and len(stripped) < max_header_length and not is_bullet_line(stripped):
            section = match_header(stripped)

        if section is not None:
            flush()
            current_section = section
            current_content = []
        elif current_section is None:
            preamble.append(stripped)
        else:
            current_content.append(line)

    flush()

    preamble_text = " ".join(line for line in preamble if line)
    if preamble_text and sections:
        _log_debug(f"Discarded preamble before first header: '{truncate_display(preamble_text, 80)}'")

    return sections


def segment_resume(text: str, on_repeat: str = "append") -> Dict[str, str]:
    """Segment a resume body using the resume header vocabulary."""
    return segment_sections(text, match_resume_header, RESUME_MAX_HEADER_LENGTH, on_repeat)


def segment_job(text: str, on_repeat: str = "append") -> Dict[str, str]:
    """Segment a job posting using the job header vocabulary."""
    return segment_sections(text, match_job_header, JOB_MAX_HEADER_LENGTH, on_repeat)
