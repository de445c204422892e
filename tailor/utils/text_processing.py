"""Text processing utilities shared by the intake, targeting and templating contexts."""

import difflib
import re
from typing import Iterable, List, Tuple


def dedupe_preserving_order(items: Iterable[str], case_sensitive: bool = True) -> List[str]:
    """
    Drop repeated strings while keeping first-seen order.

    Args:
        items: Strings to deduplicate
        case_sensitive: If False, "Python" and "python" count as the same item
                        (the first spelling wins)

    Returns:
        List of unique strings in original order

    Example:
        >>> dedupe_preserving_order(["Go", "Rust", "Go"])
        ['Go', 'Rust']
        >>> dedupe_preserving_order(["Python", "python"], case_sensitive=False)
        ['Python']
    """
    seen = set()
    unique = []
    for item in items:
        key = item if case_sensitive else item.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and strip the ends."""
    return re.sub(r"\s+", " ", text).strip()


def non_blank_lines(text: str) -> List[str]:
    """Split text into stripped lines, dropping blank ones."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines, 1 for standard
                        normalization (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    if max_consecutive == 0:
        pattern = r"\n\s*\n(\s*\n)*"
    else:
        pattern = r"\n\s*\n(\s*\n)+"

    # max_consecutive=1 means "\n\n" which is 1 blank line
    replacement = "\n" * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)


def unified_text_diff(
    before: str, after: str, from_label: str = "before", to_label: str = "after"
) -> Tuple[List[str], int]:
    """
    Compare two texts line by line, ignoring blank line differences.

    Returns:
        Tuple of (diff_lines, num_differences):
        - diff_lines: List of unified diff output lines (empty when identical)
        - num_differences: Count of changed lines (excluding headers)
    """
    lines1 = set_max_consecutive_blank_lines(before, max_consecutive=0).split("\n")
    lines2 = set_max_consecutive_blank_lines(after, max_consecutive=0).split("\n")

    if lines1 == lines2:
        return [], 0

    diff = list(
        difflib.unified_diff(lines1, lines2, fromfile=from_label, tofile=to_label, lineterm="")
    )

    # Count actual differences (lines starting with + or -, excluding headers)
    num_diffs = sum(1 for line in diff if line.startswith(("+", "-")))
    header_lines = sum(1 for line in diff if line.startswith(("---", "+++")))

    return diff, num_diffs - header_lines
