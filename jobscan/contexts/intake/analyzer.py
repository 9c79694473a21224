"""
Job description analysis entry points.

analyze() runs every extractor over the same input and assembles a
JobDescription. Extractors are independent of each other and of any
previous call, so analyze() is safe to call concurrently.
"""

from pathlib import Path
from typing import Optional

from jobscan.contexts.intake.extractors import (
    extract_company_name,
    extract_job_title,
    extract_responsibilities,
    extract_skills,
)
from jobscan.contexts.intake.job_description import JobDescription
from jobscan.contexts.intake.keywords import extract_keywords
from jobscan.contexts.intake.logger import (
    log_analysis_result,
    log_analysis_start,
    log_input_truncated,
)
from jobscan.contexts.intake.settings import AnalyzerSettings, get_settings


def analyze(
    text: Optional[str],
    settings: Optional[AnalyzerSettings] = None,
    source: Optional[str] = None,
) -> JobDescription:
    """
    Extract structured fields from job description text.

    Never raises on odd input: empty text yields the fallback title and
    empty fields.

    Args:
        text: Raw job description text (None is treated as "")
        settings: Analyzer limits (defaults to get_settings())
        source: Optional label for log messages (e.g., a file name)

    Returns:
        JobDescription with description set to the verbatim input
    """
    if text is None:
        text = ""
    if settings is None:
        settings = get_settings()

    log_analysis_start(len(text), source)

    # Cap what the extractors scan; description keeps the full input
    scan_text = text
    if settings.max_input_chars and len(text) > settings.max_input_chars:
        log_input_truncated(len(text), settings.max_input_chars)
        scan_text = text[: settings.max_input_chars]

    job = JobDescription.from_fields(
        description=text,
        job_title=extract_job_title(scan_text, settings),
        company_name=extract_company_name(scan_text),
        required_skills=extract_skills(scan_text, required=True, settings=settings),
        preferred_skills=extract_skills(scan_text, required=False, settings=settings),
        responsibilities=extract_responsibilities(scan_text, settings),
    )

    log_analysis_result(job)
    return job


def extract_all_keywords(text: Optional[str]) -> set[str]:
    """
    Mine keywords from the whole text, without section scoping.

    Args:
        text: Arbitrary text (None is treated as "")

    Returns:
        Set of lowercase keyword tokens
    """
    return extract_keywords(text or "")


def analyze_file(file_path: Path, settings: Optional[AnalyzerSettings] = None) -> JobDescription:
    """
    Analyze a job description stored in a text or markdown file.

    Args:
        file_path: Path to a UTF-8 text file
        settings: Analyzer limits (defaults to get_settings())

    Returns:
        JobDescription for the file contents

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(file_path)
    text = file_path.read_text(encoding="utf-8")
    return analyze(text, settings=settings, source=file_path.name)
