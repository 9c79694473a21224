"""
Job description data structure for the Intake context.

Provides the JobDescription record produced by analyzer.analyze(). It is a
plain immutable value: the analyzer builds it once and callers own any
persistence or serialization.
"""

from dataclasses import asdict, dataclass
from typing import Iterable

from jobscan.contexts.intake.jd_patterns import SKILL_DELIMITER


def join_skills(skills: Iterable[str]) -> str:
    """
    Render a skill set as a delimited string.

    Skills are sorted so the same set always renders the same way.
    """
    return SKILL_DELIMITER.join(sorted(set(skills)))


def split_skills(joined: str) -> frozenset[str]:
    """Parse a delimited skill string back into a set."""
    if not joined:
        return frozenset()
    return frozenset(joined.split(SKILL_DELIMITER))


@dataclass(frozen=True)
class JobDescription:
    """
    Structured fields extracted from free-form job description text.

    Attributes:
        description: Original input text, verbatim
        job_title: Extracted title, never empty
        company_name: Extracted company name, possibly empty
        required_skills: Delimited lowercase skills from dictionary + required section
        preferred_skills: Delimited lowercase skills from dictionary + preferred section
        responsibilities: Responsibilities excerpt in original casing, possibly empty
    """

    description: str
    job_title: str
    company_name: str = ""
    required_skills: str = ""
    preferred_skills: str = ""
    responsibilities: str = ""

    @classmethod
    def from_fields(
        cls,
        description: str,
        job_title: str,
        company_name: str,
        required_skills: Iterable[str],
        preferred_skills: Iterable[str],
        responsibilities: str,
    ) -> "JobDescription":
        """
        Build a JobDescription from extractor outputs.

        Args:
            description: Original input text
            job_title: Title from extract_job_title()
            company_name: Name from extract_company_name()
            required_skills: Skill set from extract_skills(required=True)
            preferred_skills: Skill set from extract_skills(required=False)
            responsibilities: Excerpt from extract_responsibilities()

        Returns:
            JobDescription with skill sets rendered as delimited strings
        """
        return cls(
            description=description,
            job_title=job_title,
            company_name=company_name,
            required_skills=join_skills(required_skills),
            preferred_skills=join_skills(preferred_skills),
            responsibilities=responsibilities,
        )

    def required_skill_set(self) -> frozenset[str]:
        return split_skills(self.required_skills)

    def preferred_skill_set(self) -> frozenset[str]:
        return split_skills(self.preferred_skills)

    def to_dict(self) -> dict[str, str]:
        """Plain dict of all fields, for JSON output or storage by callers."""
        return asdict(self)
