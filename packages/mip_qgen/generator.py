from typing import List, Optional

from packages.mip_core.logging import get_logger
from packages.mip_dto.interview import InterviewSetup, Question
from .keywords import DEFAULT_KEYWORDS, KeywordDictionary, lookup_keywords

logger = get_logger("mip.qgen")

MAX_TECH_QUESTIONS = 3

TECH_QUESTION_TEMPLATE = "Explain your experience with {tech} and how you've used it in previous projects."

JOB_QUESTIONS = (
    ("q_job_1", "What makes you a good candidate for this {job_title} position?",
     ["experience", "skills", "projects", "achievements"]),
    ("q_job_2", "Describe a challenging problem you solved as a {job_title}.",
     ["problem solving", "challenges", "solution", "impact"]),
)

FIXED_QUESTIONS = (
    ("q_behavior_1", "Tell me about a time when you had to meet a tight deadline. How did you handle it?",
     ["time management", "prioritization", "stress", "teamwork", "communication"]),
    ("q_general_1", "How do you stay updated with the latest trends and technologies in your field?",
     ["continuous learning", "professional development", "resources", "community"]),
)


class QuestionGenerator:
    """
    Deterministic question generator.

    Produces up to three tech stack questions followed by two job-specific,
    one behavioral and one general question. No validation is performed:
    empty job titles and empty stacks are the caller's concern.

    InterviewSetup strips surrounding whitespace from its strings, so a
    stack entry " React " is templated as "React" and looked up as "react".
    """
    def __init__(self, keyword_dictionary: Optional[KeywordDictionary] = None):
        self.keyword_dictionary = keyword_dictionary if keyword_dictionary is not None else DEFAULT_KEYWORDS

    def generate(self, setup: InterviewSetup) -> List[Question]:
        questions: List[Question] = []

        # 1. Tech stack questions (ids keep the original index)
        for index, tech in enumerate(setup.tech_stack[:MAX_TECH_QUESTIONS]):
            questions.append(Question(
                id=f"q_tech_{index}",
                text=TECH_QUESTION_TEMPLATE.format(tech=tech),
                keywords=lookup_keywords(self.keyword_dictionary, tech),
            ))

        # 2. Job-specific questions
        for question_id, template, keywords in JOB_QUESTIONS:
            questions.append(Question(
                id=question_id,
                text=template.format(job_title=setup.job_title),
                keywords=list(keywords),
            ))

        # 3. Behavioral / general questions
        for question_id, text, keywords in FIXED_QUESTIONS:
            questions.append(Question(id=question_id, text=text, keywords=list(keywords)))

        logger.debug(
            f"Generated {len(questions)} questions for '{setup.job_title}' "
            f"(tech stack size: {len(setup.tech_stack)})"
        )
        return questions


_default_generator = QuestionGenerator()


def generate(setup: InterviewSetup) -> List[Question]:
    """Generate questions with the built-in keyword dictionary."""
    return _default_generator.generate(setup)
