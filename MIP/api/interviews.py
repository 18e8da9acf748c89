from typing import List

from fastapi import APIRouter, Depends, status

from MIP.api.dependencies import get_current_user, get_interview_service
from MIP.api.schemas import AnswerSubmitRequest, InterviewCreateRequest
from packages.mip_auth.dto import User
from packages.mip_service.interview_service import InterviewService
from packages.mip_session.dto import InterviewSession

router = APIRouter(prefix="/interviews", tags=["Interview"])


@router.post("", response_model=InterviewSession, status_code=status.HTTP_201_CREATED)
def create_interview(
    payload: InterviewCreateRequest,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    """
    Create a session and generate its questions.
    """
    return service.create_interview(user.id, payload.setup)


@router.get("", response_model=List[InterviewSession])
def list_interviews(
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    """All sessions of the current user, newest first."""
    return service.list_interviews(user.id)


@router.post("/sample", response_model=InterviewSession, status_code=status.HTTP_201_CREATED)
def create_sample_interview(
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    return service.create_sample(user.id)


@router.get("/{session_id}", response_model=InterviewSession)
def get_interview(
    session_id: str,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    return service.get_interview(user.id, session_id)


@router.post("/{session_id}/answers", response_model=InterviewSession)
def submit_answers(
    session_id: str,
    payload: AnswerSubmitRequest,
    user: User = Depends(get_current_user),
    service: InterviewService = Depends(get_interview_service),
):
    """
    Submit all answers and receive keyword feedback.
    The session becomes 'completed'.
    """
    return service.submit_answers(user.id, session_id, payload.answers)
