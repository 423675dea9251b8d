import logging

from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import CipherClassroomError
from app.dependencies import SettingsDep, ensure_text_length
from app.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse, Mode
from app.services import catalog

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Encryption failed"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type and parameters.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Missing or malformed parameters fall back to the cipher's defaults.
    """
    ensure_text_length(request.plaintext, settings)

    try:
        ciphertext = catalog.transform(
            request.cipher_type, Mode.ENCRYPT, request.plaintext, request.params
        )
    except CipherClassroomError:
        raise
    except Exception as e:
        logger.exception("encryption failed for %s", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        params=request.params,
    )
