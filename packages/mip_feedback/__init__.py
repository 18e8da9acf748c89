from .engine import FeedbackScorer, score
from .rules import round_half_up, calculate_keyword_score, build_suggestions

__all__ = [
    "FeedbackScorer",
    "score",
    "round_half_up",
    "calculate_keyword_score",
    "build_suggestions",
]
