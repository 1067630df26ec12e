from unittest.mock import patch

import pytest
import pytesseract

from content_analyzer.core.exceptions import ExtractionError
from content_analyzer.services.extraction.ocr_extractor import OcrExtractor

IMAGE_TO_STRING = "content_analyzer.services.extraction.ocr_extractor.pytesseract.image_to_string"


class TestOcrExtractor:
    def test_recognized_text(self, sample_png_bytes):
        with patch(IMAGE_TO_STRING, return_value="Launch day!\nLearn more\n") as mock_ocr:
            result = OcrExtractor().extract(sample_png_bytes, "post.png")

        assert result.source == "ocr"
        assert result.total_pages == 1
        assert result.text == "Launch day!\nLearn more\n"
        assert mock_ocr.call_args.kwargs["lang"] == "eng"

    def test_page_separator_removed(self, sample_png_bytes):
        with patch(IMAGE_TO_STRING, return_value="Hi\n\f"):
            result = OcrExtractor().extract(sample_png_bytes, "post.png")
        assert result.text == "Hi\n"

    def test_empty_recognition(self, sample_jpeg_bytes):
        with patch(IMAGE_TO_STRING, return_value=""):
            result = OcrExtractor().extract(sample_jpeg_bytes, "blank.jpg")
        assert result.text == ""

    def test_none_becomes_empty_string(self, sample_png_bytes):
        with patch(IMAGE_TO_STRING, return_value=None):
            result = OcrExtractor().extract(sample_png_bytes, "blank.png")
        assert result.text == ""

    def test_language_is_configurable(self, sample_png_bytes):
        with patch(IMAGE_TO_STRING, return_value="") as mock_ocr:
            result = OcrExtractor(language="deu").extract(sample_png_bytes, "post.png")
        assert mock_ocr.call_args.kwargs["lang"] == "deu"
        assert result.metadata["language"] == "deu"

    def test_unreadable_image_raises(self):
        with pytest.raises(ExtractionError):
            OcrExtractor().extract(b"\x00\x01 not an image", "post.png")

    def test_missing_tesseract_raises(self, sample_png_bytes):
        with patch(IMAGE_TO_STRING, side_effect=pytesseract.TesseractNotFoundError()):
            with pytest.raises(ExtractionError) as exc_info:
                OcrExtractor().extract(sample_png_bytes, "post.png")
        assert exc_info.value.details
