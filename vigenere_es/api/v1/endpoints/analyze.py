import hashlib
import logging

from fastapi import APIRouter, HTTPException, status

from vigenere_es.core.exceptions import CiphertextTooLongError, CryptanalysisError
from vigenere_es.dependencies import DbSessionDep, EngineDep, SettingsDep
from vigenere_es.models.database import Analysis
from vigenere_es.models.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Analyze ciphertext",
    description=(
        "Run a ciphertext-only attack: statistical profile, key length "
        "estimation, key recovery and decryption. Results are stored in the history."
    ),
)
async def analyze_ciphertext(
    request: AnalyzeRequest,
    settings: SettingsDep,
    engine: EngineDep,
    db: DbSessionDep,
) -> AnalyzeResponse:
    """
    Analyze ciphertext and attempt to recover the key.

    The analysis pipeline:
    1. Uppercase the ciphertext and profile its letters
    2. Estimate the key length from the Index of Coincidence of columns
    3. Recover each key letter by frequency matching against Spanish
    4. Decrypt and explain the result
    5. Store the analysis
    """
    try:
        if len(request.ciphertext) > settings.max_ciphertext_length:
            raise CiphertextTooLongError(len(request.ciphertext), settings.max_ciphertext_length)

        options = request.options.model_dump(exclude_none=True)
        report = engine.attack(request.ciphertext, options)

        ciphertext_hash = hashlib.sha256(request.ciphertext.encode()).hexdigest()

        analysis = Analysis(
            ciphertext_hash=ciphertext_hash,
            ciphertext=request.ciphertext,
            statistics=report.statistics.model_dump(),
            ic_profile=[score.model_dump() for score in report.ic_profile],
            key_length=report.result.key_length,
            key=report.result.key,
            plaintext=report.result.plaintext,
            confidence=report.confidence,
            parameters_used=report.parameters,
            explanations=report.explanations,
        )
        db.add(analysis)
        await db.commit()
        logger.info("Stored analysis %d (key length %d)", analysis.id, analysis.key_length)

        return AnalyzeResponse(
            id=analysis.id,
            statistics=report.statistics,
            ic_profile=report.ic_profile,
            key_length=report.result.key_length,
            key=report.result.key,
            plaintext=report.result.plaintext,
            confidence=report.confidence,
            explanations=report.explanations,
        )

    except CryptanalysisError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}",
        )
