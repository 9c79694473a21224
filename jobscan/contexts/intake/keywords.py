"""
Keyword tokenization for job description text.

Splits free text into candidate keyword tokens. Used for section-scoped
skill mining and exposed directly through analyzer.extract_all_keywords().
"""

from jobscan.contexts.intake.jd_patterns import MIN_KEYWORD_LENGTH, STOP_WORDS, TokenPatterns


def extract_keywords(text: str) -> set[str]:
    """
    Split text into lowercase keyword tokens.

    Tokens are separated by runs of whitespace and ,;.()[]{} characters.
    Stop words and tokens shorter than MIN_KEYWORD_LENGTH are dropped.

    Args:
        text: Arbitrary text (may be empty)

    Returns:
        Set of lowercase tokens

    Example:
        >>> sorted(extract_keywords("Strong Python (3.x) and SQL; Docker"))
        ['docker', 'python', 'sql', 'strong']
    """
    keywords = set()

    for token in TokenPatterns.DELIMITERS.split(text.lower()):
        token = token.strip()
        if token and token not in STOP_WORDS and len(token) >= MIN_KEYWORD_LENGTH:
            keywords.add(token)

    return keywords
