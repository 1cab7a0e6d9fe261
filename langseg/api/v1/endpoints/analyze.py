import hashlib
import logging

from fastapi import APIRouter, HTTPException, status

from langseg.core.config import Settings
from langseg.core.exceptions import TextTooLongError
from langseg.dependencies import DbSessionDep, SegmenterDep, SettingsDep
from langseg.models.database import Analysis
from langseg.models.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    HistogramRequest,
    HistogramResponse,
)
from langseg.services.analysis.frequency import FrequencyData, FrequencyExtractor
from langseg.services.preprocessing.decoder import TextDecoder
from langseg.services.reporting.generator import ReportGenerator
from langseg.services.reporting.histogram import HistogramBuilder

logger = logging.getLogger(__name__)

router = APIRouter()


def _prepare_text(text: str, settings: Settings) -> str:
    if len(text) > settings.max_text_length:
        raise TextTooLongError(len(text), settings.max_text_length)
    return TextDecoder().normalize(text)


def _histograms(data: FrequencyData, top_letters: int) -> HistogramResponse:
    builder = HistogramBuilder()
    return HistogramResponse(
        letters=builder.letters(data, top_letters),
        characters=builder.characters(data),
    )


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Text too short or too long"},
        500: {"model": ErrorResponse, "description": "Analysis failed"},
    },
    summary="Analyze text language",
    description=(
        "Classify overlapping windows of the text as English or French, "
        "report segment proportions and the document-level verdict."
    ),
)
async def analyze_text(
    request: AnalyzeRequest,
    settings: SettingsDep,
    segmenter: SegmenterDep,
    db: DbSessionDep,
) -> AnalyzeResponse:
    """
    Analyze the language composition of a text.

    The text is normalized, segmented window by window, classified as a
    whole, explained, and stored in the history. Input shorter than the
    minimum window is rejected with 400 before anything is stored.
    """
    text = _prepare_text(request.text, settings)
    result = segmenter.run(text)
    report = result.report

    try:
        explanations = ReportGenerator().generate(report)

        analysis = Analysis(
            text_hash=hashlib.sha256(request.text.encode()).hexdigest(),
            text=request.text,
            dominant_language=report.dominant_language.value,
            english_proportion=report.english_proportion,
            french_proportion=report.french_proportion,
            report=report.model_dump(mode="json"),
            explanations=explanations,
        )
        db.add(analysis)
        await db.commit()
    except Exception as e:
        logger.exception("Storing analysis failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Analysis failed: {str(e)}",
        )

    if not request.include_segments:
        report = report.model_copy(update={"segments": []})

    return AnalyzeResponse(
        id=analysis.id,
        report=report,
        explanations=explanations,
        histograms=(
            _histograms(result.document, request.top_letters)
            if request.include_histograms
            else None
        ),
    )


@router.post(
    "/histogram",
    response_model=HistogramResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Text too long"},
    },
    summary="Character histograms",
    description="Letter and full character frequency histograms of a text.",
)
async def text_histogram(
    request: HistogramRequest,
    settings: SettingsDep,
) -> HistogramResponse:
    """Count letters and characters without classifying or storing anything."""
    data = FrequencyExtractor().extract(_prepare_text(request.text, settings))
    return _histograms(data, request.top_letters)
