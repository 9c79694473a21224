"""
Intake Context

Responsibilities:
- Ingests free-form job description text
- Extracts title, company, required/preferred skills and a responsibilities excerpt
- Exposes raw keyword mining for callers that need it

Owns: Heuristic job description analysis
Never: Persists results, renders resumes, or serves HTTP
"""

from jobscan.contexts.intake.analyzer import analyze, analyze_file, extract_all_keywords
from jobscan.contexts.intake.exceptions import AnalyzerConfigError
from jobscan.contexts.intake.job_description import JobDescription
from jobscan.contexts.intake.settings import AnalyzerSettings, load_settings

__all__ = [
    "AnalyzerConfigError",
    "AnalyzerSettings",
    "JobDescription",
    "analyze",
    "analyze_file",
    "extract_all_keywords",
    "load_settings",
]
