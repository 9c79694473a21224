"""
Heuristic field extractors for job description text.

Each extractor scans the full text independently and never fails: when a
heuristic finds nothing it degrades to an empty string, an empty set, or
the fallback title. Matching is plain substring/regex search over fixed
dictionaries, so results are deterministic and explainable, not exact.
"""

from typing import Callable, Optional

from jobscan.contexts.intake.jd_patterns import (
    KNOWN_SKILLS,
    TITLE_KEYWORDS,
    CompanyPatterns,
    SectionKeywords,
    TitlePatterns,
)
from jobscan.contexts.intake.keywords import extract_keywords
from jobscan.contexts.intake.logger import log_strategy_hit
from jobscan.contexts.intake.sections import locate_section
from jobscan.contexts.intake.settings import DEFAULT_SETTINGS, AnalyzerSettings

# =============================================================================
# JOB TITLE
# =============================================================================


def _title_from_leading_lines(text: str, settings: AnalyzerSettings) -> Optional[str]:
    """
    Look for a title keyword in the first few lines.

    Blank lines still count toward settings.title_scan_lines, so at most that
    many non-empty lines are examined.
    """
    lines = text.split("\n")

    for line in lines[: settings.title_scan_lines]:
        line = line.strip()
        if not line:
            continue

        if not settings.min_title_length < len(line) < settings.title_max_length:
            continue

        lower_line = line.lower()
        if any(keyword in lower_line for keyword in TITLE_KEYWORDS):
            cleaned = TitlePatterns.LABEL_PREFIX.sub("", line, count=1).strip()
            if cleaned:
                return cleaned

    return None


def _title_from_labeled_field(text: str, settings: AnalyzerSettings) -> Optional[str]:
    """Use the first "Job Title:", "Position:" or "Role:" field anywhere in the text."""
    match = TitlePatterns.LABELED_FIELD.search(text)
    if match:
        title = match.group(2).strip()
        if title and len(title) < settings.title_max_length:
            return title
    return None


def _title_from_first_short_line(text: str, settings: AnalyzerSettings) -> Optional[str]:
    """Fall back to the first short line that doesn't look like a section header."""
    for line in text.split("\n"):
        line = line.strip()
        if not settings.min_title_length < len(line) < settings.fallback_title_max_length:
            continue
        if not TitlePatterns.HEADER_LIKE.search(line.lower()):
            return line
    return None


# Tried in order; the first non-empty result wins
TITLE_STRATEGIES: tuple[Callable[[str, AnalyzerSettings], Optional[str]], ...] = (
    _title_from_leading_lines,
    _title_from_labeled_field,
    _title_from_first_short_line,
)


def extract_job_title(text: str, settings: AnalyzerSettings = DEFAULT_SETTINGS) -> str:
    """
    Extract the job title using an ordered chain of heuristics.

    Priority:
    1. A line among the first few that contains a title keyword
       (leading "Job Title:"-style label stripped)
    2. The first "Job Title:", "Position:" or "Role:" field anywhere
    3. The first short line that doesn't look like a section header
    4. settings.untitled_position

    Args:
        text: Job description text
        settings: Analyzer limits (defaults to the stock heuristics)

    Returns:
        Non-empty title string
    """
    for strategy in TITLE_STRATEGIES:
        title = strategy(text, settings)
        if title:
            log_strategy_hit(strategy.__name__, title)
            return title

    log_strategy_hit("fallback", settings.untitled_position)
    return settings.untitled_position


# =============================================================================
# COMPANY
# =============================================================================


def extract_company_name(text: str) -> str:
    """
    Extract a company name following "company", "organization" or "at".

    Only the first match is used; no attempt is made to pick between
    several candidates.

    Returns:
        Capitalized name, or "" if nothing matches
    """
    match = CompanyPatterns.COMPANY_NAME.search(text)
    if match:
        return match.group(1).strip()
    return ""


# =============================================================================
# SKILLS
# =============================================================================


def extract_skills(
    text: str, required: bool, settings: AnalyzerSettings = DEFAULT_SETTINGS
) -> set[str]:
    """
    Extract required or preferred skills.

    Combines two sources:
    - Dictionary skills found anywhere in the text (ignores `required`, so the
      same skill can land in both the required and preferred sets)
    - Keywords mined from the required or preferred section excerpt

    Args:
        text: Job description text
        required: True for required skills, False for preferred
        settings: Analyzer limits

    Returns:
        Set of lowercase skill strings
    """
    lower_text = text.lower()
    skills = {skill for skill in KNOWN_SKILLS if skill in lower_text}

    section_keywords = SectionKeywords.REQUIRED if required else SectionKeywords.PREFERRED
    section = locate_section(text, section_keywords, char_cap=settings.section_char_cap)
    skills.update(extract_keywords(section))

    return skills


# =============================================================================
# RESPONSIBILITIES
# =============================================================================


def extract_responsibilities(text: str, settings: AnalyzerSettings = DEFAULT_SETTINGS) -> str:
    """Return the responsibilities excerpt verbatim, or "" if there is none."""
    return locate_section(text, SectionKeywords.RESPONSIBILITIES, char_cap=settings.section_char_cap)
