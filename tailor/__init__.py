"""
Tailor - Resume extraction, job targeting and LaTeX templating

Turns a resume's plain text plus a free-text job posting into a tailored,
template-rendered LaTeX document.

Architecture:
- Intake Context: Section segmentation, heuristic field extraction, record validation
- Targeting Context: Resume x job relevance analysis and the assistant extension point
- Templating Context: Template registry and LaTeX rendering of validated records
"""

__version__ = "0.1.0"
