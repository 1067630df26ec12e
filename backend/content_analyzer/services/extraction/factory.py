import os
from enum import Enum

from content_analyzer.config import settings
from content_analyzer.core.exceptions import UnsupportedTypeError
from content_analyzer.services.extraction.base import DocumentExtractor
from content_analyzer.services.extraction.ocr_extractor import OcrExtractor
from content_analyzer.services.extraction.pdf_extractor import PdfExtractor


class DocumentKind(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


PDF_EXTENSIONS = frozenset({".pdf"})
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".tiff", ".webp"})


def file_extension(filename: str) -> str:
    """Lower-cased extension including the dot, or "" when there is none."""
    return os.path.splitext(filename or "")[1].lower()


def classify_extension(filename: str) -> DocumentKind:
    ext = file_extension(filename)
    if ext in PDF_EXTENSIONS:
        return DocumentKind.PDF
    if ext in IMAGE_EXTENSIONS:
        return DocumentKind.IMAGE
    return DocumentKind.UNSUPPORTED


class ExtractorFactory:
    @staticmethod
    def get_extractor(kind: DocumentKind, extension: str = "") -> DocumentExtractor:
        if kind is DocumentKind.PDF:
            return PdfExtractor()
        if kind is DocumentKind.IMAGE:
            return OcrExtractor(language=settings.ocr_language)
        raise UnsupportedTypeError(extension or "unknown")

    @classmethod
    def for_filename(cls, filename: str) -> DocumentExtractor:
        return cls.get_extractor(classify_extension(filename), file_extension(filename))
