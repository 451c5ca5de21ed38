from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import func, select

from vigenere_es.dependencies import DbSessionDep, SettingsDep
from vigenere_es.models.database import Analysis
from vigenere_es.models.schemas import (
    AnalysisDetailResponse,
    AnalysisHistoryItem,
    ErrorResponse,
    HistoryResponse,
)
from vigenere_es.services.preprocessing.normalizer import TextNormalizer

router = APIRouter()

_normalizer = TextNormalizer(unicode_form=None)


def _preview(ciphertext: str, length: int) -> str:
    """Single-line ciphertext cut to `length` characters."""
    text = _normalizer.collapse_whitespace(ciphertext)
    return text if len(text) <= length else text[:length] + "..."


@router.get(
    "",
    response_model=HistoryResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Failed to retrieve history"},
    },
    summary="Get analysis history",
    description="Retrieve paginated history of previous analyses.",
)
async def get_history(
    db: DbSessionDep,
    settings: SettingsDep,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Items per page"),
) -> HistoryResponse:
    """
    Get paginated analysis history.

    Results are ordered by creation date, most recent first.
    """
    try:
        count_query = select(func.count()).select_from(Analysis)
        total_result = await db.execute(count_query)
        total = total_result.scalar() or 0

        offset = (page - 1) * page_size
        query = (
            select(Analysis)
            .order_by(Analysis.created_at.desc(), Analysis.id.desc())
            .offset(offset)
            .limit(page_size)
        )
        result = await db.execute(query)
        analyses = result.scalars().all()

        items = [
            AnalysisHistoryItem(
                id=analysis.id,
                ciphertext_hash=analysis.ciphertext_hash,
                ciphertext_preview=_preview(analysis.ciphertext, settings.history_preview_length),
                key=analysis.key,
                key_length=analysis.key_length,
                confidence=analysis.confidence,
                created_at=analysis.created_at,
            )
            for analysis in analyses
        ]

        return HistoryResponse(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
        )

    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve history: {str(e)}",
        )


@router.get(
    "/{analysis_id}",
    response_model=AnalysisDetailResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Analysis not found"},
        500: {"model": ErrorResponse, "description": "Failed to retrieve analysis"},
    },
    summary="Get specific analysis",
    description="Retrieve details of a specific analysis by ID.",
)
async def get_analysis(
    analysis_id: int,
    db: DbSessionDep,
) -> AnalysisDetailResponse:
    """Get a specific analysis by ID."""
    try:
        query = select(Analysis).where(Analysis.id == analysis_id)
        result = await db.execute(query)
        analysis = result.scalar_one_or_none()

        if analysis is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Analysis with ID {analysis_id} not found",
            )

        return AnalysisDetailResponse.model_validate(analysis)

    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to retrieve analysis: {str(e)}",
        )
