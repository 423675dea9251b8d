import logging

from fastapi import APIRouter, HTTPException, status

from app.core.exceptions import CipherClassroomError
from app.dependencies import SettingsDep, ensure_text_length
from app.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse, Mode
from app.services import catalog

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and parameters.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with the parameters used to encrypt it.

    Lossy ciphers (Baconian, Dancing Men) return their canonical letters;
    an Affine key with no inverse returns an explanatory message.
    """
    ensure_text_length(request.ciphertext, settings)

    try:
        plaintext = catalog.transform(
            request.cipher_type, Mode.DECRYPT, request.ciphertext, request.params
        )
    except CipherClassroomError:
        raise
    except Exception as e:
        logger.exception("decryption failed for %s", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )

    return DecryptResponse(
        plaintext=plaintext,
        cipher_type=request.cipher_type,
        params=request.params,
    )
