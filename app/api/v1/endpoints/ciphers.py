from fastapi import APIRouter

from app.models.schemas import CipherDefinition, ErrorResponse
from app.services import catalog

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherDefinition],
    summary="List ciphers",
    description="List every available cipher with its metadata and default parameters.",
)
async def list_ciphers() -> list[CipherDefinition]:
    """List all ciphers in catalog order."""
    return catalog.list_ciphers()


@router.get(
    "/{cipher_id}",
    response_model=CipherDefinition,
    responses={
        404: {"model": ErrorResponse, "description": "Cipher not found"},
    },
    summary="Get cipher",
    description="Get the definition of a single cipher.",
)
async def get_cipher(cipher_id: str) -> CipherDefinition:
    """Get one cipher definition by id."""
    return catalog.get_definition(cipher_id)
