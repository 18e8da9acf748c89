from .keywords import DEFAULT_KEYWORDS, build_keyword_dictionary, lookup_keywords
from .generator import QuestionGenerator, generate

__all__ = [
    "DEFAULT_KEYWORDS",
    "build_keyword_dictionary",
    "lookup_keywords",
    "QuestionGenerator",
    "generate",
]
