"""
jobscan - heuristic job description analysis for resume building

Turns pasted job postings into structured fields (title, company, skills,
responsibilities) using keyword dictionaries, regex patterns and positional
heuristics. No models, no network.

Architecture:
- Intake Context: Job description ingestion and field extraction
"""

__version__ = "0.1.0"
