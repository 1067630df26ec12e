"""Tesseract OCR for uploaded raster images."""

import io

import pytesseract
from PIL import Image

from content_analyzer.core.exceptions import ExtractionError
from content_analyzer.core.logging import get_logger
from content_analyzer.services.extraction.base import DocumentExtractor, ExtractionResult, PageResult

logger = get_logger(__name__)


class OcrExtractor(DocumentExtractor):
    source = "ocr"

    def __init__(self, language: str = "eng"):
        self.language = language

    def extract(self, file_data: bytes, filename: str) -> ExtractionResult:
        try:
            with Image.open(io.BytesIO(file_data)) as image:
                text = pytesseract.image_to_string(image, lang=self.language)
        except Exception as e:
            logger.error(f"OCR failed for {filename}: {e}")
            raise ExtractionError(str(e) or e.__class__.__name__) from e

        # Tesseract terminates each page with a form feed
        text = (text or "").rstrip("\f")

        return ExtractionResult(
            source=self.source,
            pages=[PageResult(page_number=1, text=text)],
            metadata={"filename": filename, "extractor": "tesseract", "language": self.language},
        )
