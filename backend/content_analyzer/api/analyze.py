from fastapi import APIRouter, File, UploadFile

from content_analyzer.config import settings
from content_analyzer.core.exceptions import ContentAnalyzerError, ExtractionError
from content_analyzer.core.logging import get_logger
from content_analyzer.schemas.analysis import AnalysisResponse
from content_analyzer.schemas.common import ErrorResponse
from content_analyzer.services.analysis_service import analyze_document
from content_analyzer.services.upload_service import transient_upload

router = APIRouter(tags=["Analysis"])
logger = get_logger(__name__)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        415: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def analyze_upload(file: UploadFile | str | None = File(default=None)):
    try:
        async with transient_upload(
            file,
            max_bytes=settings.max_upload_bytes,
            upload_dir=settings.upload_dir,
        ) as document:
            return await analyze_document(document)
    except ContentAnalyzerError:
        raise
    except Exception as e:
        logger.error(f"Unexpected failure analyzing upload: {e}", exc_info=True)
        raise ExtractionError(str(e) or e.__class__.__name__) from e
