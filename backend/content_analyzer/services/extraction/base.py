import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from content_analyzer.core.exceptions import ExtractionError


@dataclass
class PageResult:
    page_number: int
    text: str


@dataclass
class ExtractionResult:
    source: str
    pages: list[PageResult] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def text(self) -> str:
        # Empty pages still occupy their own line
        return "\n".join(p.text for p in self.pages)


class DocumentExtractor(ABC):
    source: str

    @abstractmethod
    def extract(self, file_data: bytes, filename: str) -> ExtractionResult:
        """Extract text from a document, raising ExtractionError on failure."""
        ...


def _read_and_extract(
    extractor: DocumentExtractor, file_data: bytes | Path, filename: str
) -> ExtractionResult:
    if isinstance(file_data, Path):
        file_data = file_data.read_bytes()
    return extractor.extract(file_data, filename)


async def run_extractor(
    extractor: DocumentExtractor,
    file_data: bytes | Path,
    filename: str,
    timeout: float | None = None,
) -> ExtractionResult:
    """Run a blocking extractor in the default executor, bounded by ``timeout`` seconds.

    A Path is read inside the worker thread too.
    On timeout the worker thread is left to finish on its own; the caller gets
    an ExtractionError straight away.
    """
    loop = asyncio.get_running_loop()
    call = loop.run_in_executor(None, partial(_read_and_extract, extractor, file_data, filename))
    if not timeout:
        return await call

    try:
        return await asyncio.wait_for(call, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise ExtractionError(
            f"{extractor.source} extraction timed out after {timeout:g}s"
        ) from e
