import math
from typing import List

DEFAULT_SCORE = 3
MAX_SCORE = 5

DEFAULT_SUGGESTION = "Your answer was satisfactory. Consider providing more specific examples next time."
LOW_SCORE_PREFIX = "Your answer could be improved significantly. Consider addressing these keywords: "
MID_SCORE_PREFIX = "Good answer, but you could strengthen it by mentioning: "
HIGH_SCORE_SUGGESTION = "Excellent answer that covered most key points."


def round_half_up(value: float) -> int:
    """
    Round to nearest integer with .5 going up.
    Python's round() uses banker's rounding, which would move the score
    boundaries at ratios like 0.1 and 0.5.
    """
    return int(math.floor(value + 0.5))


def find_matched_keywords(keywords: List[str], answer_text: str) -> List[str]:
    """Keywords that appear as a substring of the answer, in keyword order."""
    text = (answer_text or "").lower()
    return [keyword for keyword in keywords if keyword.lower() in text]


def calculate_keyword_score(matched_count: int, keyword_count: int) -> int:
    """
    Linear score from the match ratio: 0 matches -> 1, all matches -> 5.
    keyword_count must be positive.
    """
    ratio = matched_count / keyword_count
    return min(round_half_up(ratio * MAX_SCORE) + 1, MAX_SCORE)


def build_suggestions(score: int, unmatched_keywords: List[str]) -> str:
    if score <= 2:
        return LOW_SCORE_PREFIX + ", ".join(unmatched_keywords[:3])
    elif score <= 4:
        return MID_SCORE_PREFIX + ", ".join(unmatched_keywords[:2])
    else:
        return HIGH_SCORE_SUGGESTION
