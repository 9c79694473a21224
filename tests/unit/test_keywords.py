"""Unit tests for keyword tokenization."""

import pytest

from jobscan.contexts.intake.analyzer import extract_all_keywords
from jobscan.contexts.intake.keywords import extract_keywords


@pytest.mark.unit
def test_only_stop_words_and_short_tokens():
    assert extract_all_keywords("The the AND of it is") == set()


@pytest.mark.unit
def test_empty_and_none():
    assert extract_keywords("") == set()
    assert extract_all_keywords(None) == set()


@pytest.mark.unit
def test_splits_on_punctuation_class():
    text = "Python, Docker; (AWS) [k8s] {helm}. Terraform"
    assert extract_keywords(text) == {"python", "docker", "aws", "k8s", "helm", "terraform"}


@pytest.mark.unit
def test_deduplicated_and_lowercased():
    assert extract_keywords("Docker docker\tDOCKER\n docker") == {"docker"}


@pytest.mark.unit
def test_tokens_of_two_chars_or_fewer_dropped():
    assert extract_keywords("go ai ml sql") == {"sql"}


@pytest.mark.unit
def test_other_punctuation_kept_inside_tokens():
    """Only whitespace and ,;.()[]{} split tokens."""
    assert extract_keywords("ci/cd front-end c++ node:") == {"ci/cd", "front-end", "c++", "node:"}


@pytest.mark.unit
def test_stop_word_filter_is_exact():
    """'have' is a stop word but 'haves' is not."""
    assert extract_keywords("have haves") == {"haves"}
