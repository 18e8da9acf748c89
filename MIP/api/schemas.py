from datetime import datetime
from typing import List, Optional

from pydantic import Field

from packages.mip_core.dto import BaseDTO
from packages.mip_dto.interview import Answer, InterviewSetup

# --- Request Schemas ---

class SignupRequest(BaseDTO):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    name: Optional[str] = None


class LoginRequest(BaseDTO):
    email: str
    password: str


class InterviewCreateRequest(BaseDTO):
    setup: InterviewSetup


class AnswerSubmitRequest(BaseDTO):
    answers: List[Answer]

# --- Response Schemas ---

class UserResponse(BaseDTO):
    id: str
    email: str
    name: Optional[str] = None
    created_at: datetime


class AuthResponse(BaseDTO):
    user: UserResponse
    token: str


class MessageResponse(BaseDTO):
    message: str
