"""Unit tests for keyword-based section location."""

import pytest

from jobscan.contexts.intake.extractors import extract_responsibilities
from jobscan.contexts.intake.jd_patterns import SectionKeywords
from jobscan.contexts.intake.sections import find_next_section_start, locate_section


@pytest.mark.unit
class TestFindNextSectionStart:
    def test_no_header_returns_minus_one(self):
        assert find_next_section_start("nothing to see here", 0) == -1

    def test_nearest_header_wins(self):
        text = "intro. benefits: lunch. requirements: python"
        assert find_next_section_start(text, 0) == text.index("benefits")

    def test_search_starts_at_from_index(self):
        text = "benefits first. then about us"
        assert find_next_section_start(text, 1) == text.index("about us")


@pytest.mark.unit
class TestLocateSection:
    def test_excerpt_stops_at_next_header(self):
        text = "Responsibilities: Build things.\nRequirements: 5 years exp."
        excerpt = locate_section(text, SectionKeywords.RESPONSIBILITIES)
        assert excerpt == "Responsibilities: Build things."
        assert "Requirements" not in excerpt

    def test_missing_keywords_yield_empty(self):
        assert locate_section("Free lunch and a gym", SectionKeywords.RESPONSIBILITIES) == ""
        assert locate_section("", SectionKeywords.REQUIRED) == ""

    def test_keyword_order_beats_text_order(self):
        text = "Duties: file reports.\nResponsibilities: lead the team."
        excerpt = locate_section(text, SectionKeywords.RESPONSIBILITIES)
        assert excerpt == "Responsibilities: lead the team."

    def test_original_casing_is_preserved(self):
        excerpt = locate_section("DUTIES: Ship Code", SectionKeywords.RESPONSIBILITIES)
        assert excerpt == "DUTIES: Ship Code"

    def test_section_bounded_by_own_keyword(self):
        text = "Responsibilities: a\nMore responsibilities: b"
        excerpt = locate_section(text, SectionKeywords.RESPONSIBILITIES)
        assert excerpt == "Responsibilities: a\nMore"

    def test_nearest_of_independent_headers(self):
        text = "Role: x. Benefits: y. Requirements: z"
        assert locate_section(text, SectionKeywords.RESPONSIBILITIES) == "Role: x."

    def test_default_cap_without_closing_header(self):
        text = "duties " + "x" * 2000
        excerpt = locate_section(text, SectionKeywords.RESPONSIBILITIES)
        assert len(excerpt) == 1000
        assert excerpt.startswith("duties")

    def test_custom_cap(self):
        text = "duties " + "x" * 2000
        assert len(locate_section(text, ("duties",), char_cap=50)) == 50

    def test_excerpt_is_trimmed(self):
        text = "Intro\n\nYou will:\n  build pipelines  \n\nBenefits: none"
        assert locate_section(text, SectionKeywords.RESPONSIBILITIES) == "You will:\n  build pipelines"


@pytest.mark.unit
def test_responsibilities_excerpt_unfiltered():
    """Stop words and short tokens stay in the responsibilities excerpt."""
    text = "Responsibilities: Own it and do it well.\nBenefits: snacks"
    assert extract_responsibilities(text) == "Responsibilities: Own it and do it well."


@pytest.mark.unit
def test_responsibilities_absent():
    assert extract_responsibilities("Great pay. Free snacks.") == ""
