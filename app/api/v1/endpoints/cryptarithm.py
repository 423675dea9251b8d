from fastapi import APIRouter

from app.models.schemas import CryptarithmRequest, CryptarithmResult
from app.services import catalog

router = APIRouter()


@router.post(
    "/validate",
    response_model=CryptarithmResult,
    summary="Validate a cryptarithm solution",
    description=(
        "Check that a letter-to-digit mapping solves an equation such as "
        "SEND + MORE = MONEY. Failures are reported in the body, not as errors."
    ),
)
async def validate_cryptarithm(request: CryptarithmRequest) -> CryptarithmResult:
    return catalog.validate_cryptarithm(request.equation, request.mapping)
