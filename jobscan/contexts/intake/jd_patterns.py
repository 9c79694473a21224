"""
Keyword dictionaries and regex patterns for job description analysis.

Everything in this module is read-only data shared by the intake extractors.
Collections are tuples or frozensets so they cannot be mutated after import.

Pattern classes follow the package convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Convenience tuples for iteration
"""

import re
from dataclasses import dataclass

# =============================================================================
# STOP WORDS
# =============================================================================

STOP_WORDS = frozenset(
    {
        "a",
        "an",
        "and",
        "are",
        "as",
        "at",
        "be",
        "by",
        "for",
        "from",
        "has",
        "he",
        "in",
        "is",
        "it",
        "its",
        "of",
        "on",
        "that",
        "the",
        "to",
        "was",
        "will",
        "with",
        "this",
        "but",
        "they",
        "have",
    }
)

# Tokens of this length or shorter are never keywords
MIN_KEYWORD_LENGTH = 3

# =============================================================================
# JOB TITLE KEYWORDS
# =============================================================================

# Substring matches, so "lead" also fires on "leadership"
TITLE_KEYWORDS = (
    "engineer",
    "developer",
    "manager",
    "analyst",
    "designer",
    "consultant",
    "architect",
    "specialist",
    "coordinator",
    "lead",
    "director",
    "officer",
    "administrator",
    "technician",
    "scientist",
    "researcher",
    "associate",
    "executive",
    "supervisor",
    "assistant",
    "representative",
    "agent",
    "programmer",
    "tester",
    "qa",
    "devops",
    "sre",
    "scrum master",
    "product owner",
)

# Lines containing any of these look like headers, not titles
HEADER_LIKE_WORDS = ("description", "about", "overview", "summary", "company")

UNTITLED_POSITION = "Untitled Position"

# =============================================================================
# SKILL DICTIONARY
# =============================================================================

KNOWN_SKILLS = (
    "java",
    "python",
    "javascript",
    "react",
    "angular",
    "vue",
    "node.js",
    "spring boot",
    "sql",
    "mysql",
    "postgresql",
    "mongodb",
    "aws",
    "azure",
    "docker",
    "kubernetes",
    "git",
    "jenkins",
    "ci/cd",
    "rest api",
    "microservices",
    "agile",
    "scrum",
    "machine learning",
    "ai",
    "data analysis",
    "html",
    "css",
    "typescript",
    "c++",
    "c#",
    ".net",
    "php",
    "ruby",
    "go",
    "kotlin",
    "swift",
    "redux",
    "graphql",
    "webpack",
    "linux",
    "unix",
    "bash",
)

# Joined skill strings use this delimiter; tokens never contain it
SKILL_DELIMITER = ", "

# =============================================================================
# SECTION KEYWORDS
# =============================================================================


@dataclass(frozen=True)
class SectionKeywords:
    """
    Keywords that open a section, searched in tuple order.

    The first keyword present anywhere in the text wins, regardless of
    where the other keywords occur.
    """

    REQUIRED: tuple = ("required", "qualifications", "must have")
    PREFERRED: tuple = ("preferred", "nice to have", "plus")
    RESPONSIBILITIES: tuple = ("responsibilities", "duties", "you will", "role")

    # Headers that close whatever section is open. Scanned independently,
    # the nearest one wins. "responsibilities" is both an opener and a closer.
    NEXT_SECTION: tuple = (
        "requirements",
        "qualifications",
        "responsibilities",
        "benefits",
        "about us",
        "about the company",
        "equal opportunity",
    )


# Excerpts with no closing header stop after this many characters
SECTION_CHAR_CAP = 1000

# =============================================================================
# REGEX PATTERNS
# =============================================================================


@dataclass(frozen=True)
class TitlePatterns:
    """
    Regex patterns for job title extraction.
    """

    # Leading label on a title line - e.g., "Job Title: Backend Engineer"
    LABEL_PREFIX: re.Pattern = re.compile(r"^(position:|job title:|role:|title:)\s*", re.IGNORECASE)

    # Labeled field anywhere in the text. \s* may cross a line break.
    LABELED_FIELD: re.Pattern = re.compile(r"(job title|position|role):\s*([^\n]+)", re.IGNORECASE)

    # Header-like line (matched against the lowercased line)
    HEADER_LIKE: re.Pattern = re.compile("|".join(HEADER_LIKE_WORDS))


@dataclass(frozen=True)
class CompanyPatterns:
    """
    Regex patterns for company name extraction.

    Only the leading keyword is case-insensitive. The captured name must
    start with an uppercase letter, and "at" also matches inside words
    like "What".
    """

    COMPANY_NAME: re.Pattern = re.compile(r"(?i:company|organization|at)\s+([A-Z][a-zA-Z\s&]+)")


@dataclass(frozen=True)
class TokenPatterns:
    """
    Regex patterns for keyword tokenization.
    """

    # Runs of whitespace and ,;.()[]{}
    DELIMITERS: re.Pattern = re.compile(r"[\s,;.()\[\]{}]+")
