from content_analyzer.config import settings
from content_analyzer.core.logging import get_logger
from content_analyzer.schemas.analysis import AnalysisResponse
from content_analyzer.services.extraction.base import ExtractionResult, run_extractor
from content_analyzer.services.extraction.factory import ExtractorFactory
from content_analyzer.services.suggestion_service import generate_suggestions
from content_analyzer.services.upload_service import UploadedDocument

logger = get_logger(__name__)


def build_response(
    document: UploadedDocument,
    extraction: ExtractionResult,
    suggestions: list[str],
    preview_chars: int | None = None,
) -> AnalysisResponse:
    if preview_chars is None:
        preview_chars = settings.preview_chars
    text = extraction.text
    return AnalysisResponse(
        filename=document.filename,
        size=document.size,
        source=extraction.source,
        chars=len(text),
        preview=text[:preview_chars],
        full_text=text,
        suggestions=suggestions,
    )


async def analyze_document(document: UploadedDocument) -> AnalysisResponse:
    """Dispatch -> extract -> suggest -> assemble for one stored upload."""
    # Raises UnsupportedTypeError before the stored file is read
    extractor = ExtractorFactory.for_filename(document.filename)

    logger.info(f"Extracting {document.filename} ({document.size} bytes) via {extractor.source}")
    extraction = await run_extractor(
        extractor,
        document.path,
        document.filename,
        timeout=settings.extraction_timeout_seconds,
    )

    suggestions = generate_suggestions(extraction.text)
    response = build_response(document, extraction, suggestions)
    logger.info(
        f"Analyzed {document.filename}: {response.chars} chars, "
        f"{extraction.total_pages} page(s), {len(suggestions)} suggestion(s)"
    )
    return response
