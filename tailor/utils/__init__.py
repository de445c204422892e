"""
Shared utilities for Tailor.

Common functionality used across contexts:
- Logger setup with provenance tracking
- LaTeX escaping and LaTeX-source to plaintext conversion
- Small text helpers
"""

from tailor.utils.latex_tools import latex_to_text, to_latex
from tailor.utils.text_processing import dedupe_preserving_order

__all__ = ["dedupe_preserving_order", "latex_to_text", "to_latex"]
