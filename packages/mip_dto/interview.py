from typing import List

from pydantic import ConfigDict, Field

from packages.mip_core.dto import BaseDTO


class InterviewSetup(BaseDTO):
    """
    User supplied parameters used to generate questions.
    Immutable once an interview has been created.
    """
    model_config = ConfigDict(frozen=True)

    job_title: str = Field(default="", description="Target position, e.g. 'Backend Developer'")
    job_description: str = Field(default="", description="Free text description of the role")
    tech_stack: List[str] = Field(default_factory=list, description="Technologies in the order given by the user")
    years_of_experience: int = Field(default=0, ge=0, description="Years of professional experience")


class Question(BaseDTO):
    """A generated interview question. Never mutated after creation."""
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    keywords: List[str] = Field(default_factory=list, description="Terms used to score answers; may be empty")


class Answer(BaseDTO):
    question_id: str
    text: str = ""


class Feedback(BaseDTO):
    model_config = ConfigDict(frozen=True)

    question_id: str
    score: int = Field(..., ge=1, le=5, description="Score 1-5")
    matched_keywords: List[str] = Field(default_factory=list, description="Keywords found in the answer")
    suggestions: str = Field(..., description="Improvement hint shown to the user")
