from fastapi import APIRouter, HTTPException, Query, status
from sqlalchemy import func, select

from langseg.dependencies import DbSessionDep
from langseg.models.database import Analysis
from langseg.models.schemas import (
    AnalysisDetailResponse,
    AnalysisHistoryItem,
    ErrorResponse,
    HistoryResponse,
    Verdict,
)

router = APIRouter()

PREVIEW_LENGTH = 100


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_LENGTH:
        return text
    return text[:PREVIEW_LENGTH] + "..."


@router.get(
    "",
    response_model=HistoryResponse,
    summary="List stored analyses",
    description="Paginated analyses, newest first, optionally for one dominant language.",
)
async def get_history(
    db: DbSessionDep,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Items per page"),
    language: Verdict | None = Query(None, description="Only this dominant language"),
) -> HistoryResponse:
    """List stored analyses with a short preview of each text."""
    count_query = select(func.count()).select_from(Analysis)
    query = select(Analysis).order_by(Analysis.created_at.desc(), Analysis.id.desc())

    if language is not None:
        count_query = count_query.where(Analysis.dominant_language == language.value)
        query = query.where(Analysis.dominant_language == language.value)

    total = (await db.execute(count_query)).scalar() or 0
    rows = await db.execute(query.offset((page - 1) * page_size).limit(page_size))

    items = [
        AnalysisHistoryItem(
            id=analysis.id,
            text_hash=analysis.text_hash,
            text_preview=_preview(analysis.text),
            dominant_language=analysis.dominant_language,
            english_proportion=analysis.english_proportion,
            french_proportion=analysis.french_proportion,
            created_at=analysis.created_at,
        )
        for analysis in rows.scalars()
    ]

    return HistoryResponse(items=items, total=total, page=page, page_size=page_size)


@router.get(
    "/{analysis_id}",
    response_model=AnalysisDetailResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Analysis not found"},
    },
    summary="Get one analysis",
    description="Full text, report and explanations of a stored analysis.",
)
async def get_analysis(
    analysis_id: int,
    db: DbSessionDep,
) -> AnalysisDetailResponse:
    analysis = await db.get(Analysis, analysis_id)
    if analysis is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Analysis with ID {analysis_id} not found",
        )
    return AnalysisDetailResponse.model_validate(analysis)
