"""
Section location for unstructured job description text.

Job postings pasted from career sites rarely keep their markdown structure,
so sections are found by keyword position rather than by headers: a section
starts at the first occurrence of an opening keyword and runs until the
nearest known section header after it, or a fixed character cap.
"""

from typing import Sequence

from jobscan.contexts.intake.jd_patterns import SECTION_CHAR_CAP, SectionKeywords


def find_next_section_start(lower_text: str, from_index: int) -> int:
    """
    Find the nearest section header at or after from_index.

    Each header in SectionKeywords.NEXT_SECTION is searched independently
    and the smallest index wins.

    Args:
        lower_text: Lowercased text to search
        from_index: Position to start searching from

    Returns:
        Index of the nearest header, or -1 if none follows
    """
    min_index = -1

    for header in SectionKeywords.NEXT_SECTION:
        index = lower_text.find(header, from_index)
        if index != -1 and (min_index == -1 or index < min_index):
            min_index = index

    return min_index


def locate_section(
    text: str, keywords: Sequence[str], char_cap: int = SECTION_CHAR_CAP
) -> str:
    """
    Extract the excerpt that starts at the first matching section keyword.

    Keywords are tried in sequence order, not text order: the first keyword
    that occurs anywhere in the text opens the section. The excerpt runs to
    the next section header found after the keyword, or char_cap characters
    from its start, whichever the text allows.

    A section can be closed by its own keyword recurring further down
    (e.g., a second "responsibilities" ends a responsibilities excerpt).

    Args:
        text: Original job description text
        keywords: Lowercase opening keywords, in priority order
        char_cap: Maximum excerpt length when no closing header is found

    Returns:
        Trimmed excerpt in original casing, or "" if no keyword occurs

    Example:
        >>> locate_section("Duties: ship code.\\nBenefits: lunch", ("duties",))
        'Duties: ship code.'
    """
    lower_text = text.lower()

    for keyword in keywords:
        start_index = lower_text.find(keyword)
        if start_index == -1:
            continue

        end_index = find_next_section_start(lower_text, start_index + len(keyword))
        if end_index == -1:
            end_index = min(start_index + char_cap, len(text))

        return text[start_index:end_index].strip()

    return ""
