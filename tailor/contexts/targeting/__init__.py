"""
Targeting Context

Responsibilities:
- Compares a validated resume against a job record
- Reports matching and missing skills and keyword overlap
- Suggests which experience entries, projects and skills to emphasize
- Defines the extension point for assistant-driven resume revisions

Owns: Relevance heuristics and their thresholds, the assistant protocol
Never: Parses raw text or produces LaTeX output
"""
