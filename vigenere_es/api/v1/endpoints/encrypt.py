from fastapi import APIRouter, HTTPException, status

from vigenere_es.core.exceptions import CiphertextTooLongError, CryptanalysisError
from vigenere_es.dependencies import EngineDep, SettingsDep
from vigenere_es.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with the Spanish Vigenère cipher. Educational tool for generating test ciphertexts.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    engine: EngineDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a keyword.

    The plaintext is uppercased; spaces, punctuation and digits are kept.
    A random keyword is generated when none is given.
    """
    try:
        if len(request.plaintext) > settings.max_ciphertext_length:
            raise CiphertextTooLongError(len(request.plaintext), settings.max_ciphertext_length)

        key = request.key
        if key is None:
            key = engine.generate_random_key()
        key = engine.parse_key(key)

        ciphertext = engine.encrypt(request.plaintext, key)

        return EncryptResponse(
            ciphertext=ciphertext,
            key_used=key,
        )

    except CryptanalysisError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )
