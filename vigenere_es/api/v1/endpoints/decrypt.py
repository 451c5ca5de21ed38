from fastapi import APIRouter, HTTPException, status

from vigenere_es.core.exceptions import CiphertextTooLongError, CryptanalysisError
from vigenere_es.dependencies import EngineDep, SettingsDep
from vigenere_es.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext with a known keyword, or recover the keyword when none is given.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext.

    If no key is provided, the engine estimates the key length and
    recovers the key through frequency analysis.
    """
    try:
        if len(request.ciphertext) > settings.max_ciphertext_length:
            raise CiphertextTooLongError(len(request.ciphertext), settings.max_ciphertext_length)

        if request.key is not None:
            result = engine.decrypt_with_key(request.ciphertext, request.key)
        else:
            options = request.options.model_dump(exclude_none=True)
            result = engine.find_key_and_decrypt(request.ciphertext, options)

        return DecryptResponse(
            plaintext=result.plaintext,
            confidence=result.confidence,
            key_used=result.key,
            key_length=result.key_length,
            explanation=result.explanation,
        )

    except CryptanalysisError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
