from fastapi import APIRouter

from app.dependencies import SettingsDep
from app.models.schemas import (
    AnswerRequest,
    AnswerResult,
    ChallengeRequest,
    ErrorResponse,
    PracticeChallenge,
)
from app.services.practice import generate_challenge, score_answer

router = APIRouter()


@router.post(
    "/challenge",
    response_model=PracticeChallenge,
    responses={
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Generate a practice challenge",
    description="Encrypt a practice message with randomly chosen parameters.",
)
async def create_challenge(
    request: ChallengeRequest,
    settings: SettingsDep,
) -> PracticeChallenge:
    """Generate a challenge from the configured practice messages."""
    return generate_challenge(request.cipher_type, messages=settings.practice_messages)


@router.post(
    "/check",
    response_model=AnswerResult,
    summary="Check a practice answer",
    description="Compare an answer to the plaintext, ignoring case and whitespace.",
)
async def check_challenge_answer(request: AnswerRequest) -> AnswerResult:
    """Score an answer; correct answers earn the cipher's difficulty points."""
    return score_answer(request.cipher_type, request.answer, request.plaintext)
