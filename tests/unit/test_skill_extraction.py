"""Unit tests for required/preferred skill extraction."""

import pytest

from jobscan.contexts.intake.extractors import extract_skills
from jobscan.contexts.intake.jd_patterns import KNOWN_SKILLS, SKILL_DELIMITER
from jobscan.contexts.intake.settings import AnalyzerSettings


@pytest.mark.unit
class TestDictionaryMatch:
    def test_dictionary_skills_anywhere_in_text(self):
        text = "We need a Java and React developer"
        assert extract_skills(text, required=True) == {"java", "react"}

    def test_dictionary_ignores_required_flag(self):
        """Dictionary skills land in both the required and preferred sets."""
        text = "We need a Java and React developer"
        assert extract_skills(text, required=False) == {"java", "react"}

    def test_case_insensitive(self):
        assert "python" in extract_skills("PYTHON wizard", required=True)

    def test_multi_word_and_symbol_skills(self):
        text = "Experience with Spring Boot, CI/CD pipelines and C++"
        skills = extract_skills(text, required=True)
        assert {"spring boot", "ci/cd", "c++"} <= skills

    def test_dictionary_is_substring_match(self):
        """'sql' matches inside 'PostgreSQL'."""
        skills = extract_skills("PostgreSQL", required=True)
        assert {"postgresql", "sql"} <= skills

    def test_no_skills_in_empty_text(self):
        assert extract_skills("", required=True) == set()
        assert extract_skills("", required=False) == set()

    def test_dictionary_entries_never_contain_delimiter(self):
        assert all(SKILL_DELIMITER not in skill for skill in KNOWN_SKILLS)
        assert all(skill == skill.lower() for skill in KNOWN_SKILLS)


@pytest.mark.unit
class TestSectionMining:
    def test_required_section_keywords(self):
        text = "Qualifications: Terraform, Ansible; Helm"
        skills = extract_skills(text, required=True)
        assert {"terraform", "ansible", "helm"} <= skills

    def test_preferred_section_keywords(self):
        text = "Nice to have: Rust or Elixir"
        preferred = extract_skills(text, required=False)
        assert {"rust", "elixir"} <= preferred
        # "or" is too short
        assert "or" not in preferred

    def test_preferred_section_not_mined_for_required(self):
        text = "Nice to have: Rust or Elixir"
        assert extract_skills(text, required=True) == set()

    def test_must_have_opens_required_section(self):
        text = "Must have Terraform experience"
        assert {"terraform", "experience"} <= extract_skills(text, required=True)

    def test_stop_words_filtered_from_section(self):
        text = "Required: the ability to work with Terraform"
        skills = extract_skills(text, required=True)
        assert "terraform" in skills
        assert "ability" in skills
        assert "the" not in skills
        assert "with" not in skills

    def test_section_cap_applies(self):
        text = "Required: " + "filler " * 100 + "Terraform"
        assert "terraform" in extract_skills(text, required=True)

        settings = AnalyzerSettings(section_char_cap=50)
        assert "terraform" not in extract_skills(text, required=True, settings=settings)

    def test_all_tokens_lowercase(self):
        text = "Required: Terraform, KAFKA, Grafana"
        skills = extract_skills(text, required=True)
        assert all(skill == skill.lower() for skill in skills)
