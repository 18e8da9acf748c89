from .interview import InterviewSetup, Question, Answer, Feedback

__all__ = [
    "InterviewSetup",
    "Question",
    "Answer",
    "Feedback",
]
