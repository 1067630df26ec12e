class ContentAnalyzerError(Exception):
    """Base exception for the application."""

    def __init__(
        self,
        message: str = "An error occurred",
        status_code: int = 500,
        details: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class MissingFileError(ContentAnalyzerError):
    def __init__(self):
        super().__init__("No file uploaded", status_code=400)


class FileTooLargeError(ContentAnalyzerError):
    def __init__(self, max_mb: float):
        super().__init__(f"File too large (max {max_mb:g}MB)", status_code=413)


class UnsupportedTypeError(ContentAnalyzerError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__("Unsupported file type. Upload a PDF or image.", status_code=415)


class ExtractionError(ContentAnalyzerError):
    """The upload passed validation but the PDF or OCR capability failed."""

    def __init__(self, details: str):
        super().__init__("Failed to analyze file", status_code=500, details=details)


class NoFreePortError(ContentAnalyzerError):
    def __init__(self, start_port: int, attempts: int):
        self.start_port = start_port
        self.attempts = attempts
        super().__init__(
            f"No free port found in range {start_port}-{start_port + attempts - 1}",
            status_code=500,
        )
