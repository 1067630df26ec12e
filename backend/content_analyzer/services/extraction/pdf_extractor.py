import io

import pdfplumber

from content_analyzer.core.exceptions import ExtractionError
from content_analyzer.core.logging import get_logger
from content_analyzer.services.extraction.base import DocumentExtractor, ExtractionResult, PageResult

logger = get_logger(__name__)


class PdfExtractor(DocumentExtractor):
    source = "pdf"

    def extract(self, file_data: bytes, filename: str) -> ExtractionResult:
        try:
            pages = self._extract_with_pdfplumber(file_data)
        except Exception as e:
            logger.error(f"pdfplumber extraction failed for {filename}: {e}")
            raise ExtractionError(str(e) or e.__class__.__name__) from e

        return ExtractionResult(
            source=self.source,
            pages=pages,
            metadata={"filename": filename, "extractor": "pdfplumber"},
        )

    def _extract_with_pdfplumber(self, file_data: bytes) -> list[PageResult]:
        pages = []
        with pdfplumber.open(io.BytesIO(file_data)) as pdf:
            for i, page in enumerate(pdf.pages):
                words = page.extract_words()
                pages.append(PageResult(
                    page_number=i + 1,
                    text=" ".join(w["text"] for w in words),
                ))

        return pages
