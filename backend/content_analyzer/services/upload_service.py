"""Transient storage for a single uploaded file.

An upload lives on disk only for the duration of the request that carried it:
``transient_upload`` creates the file, and removes it when the ``async with``
block exits, whatever the outcome.
"""

import os
import tempfile
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as StarletteUploadFile

from content_analyzer.core.exceptions import FileTooLargeError, MissingFileError
from content_analyzer.core.logging import get_logger
from content_analyzer.services.extraction.factory import file_extension

logger = get_logger(__name__)

CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class UploadedDocument:
    filename: str
    size: int
    extension: str
    path: Path


async def _spool(file: UploadFile, fd: int, max_bytes: int) -> int:
    size = 0
    with os.fdopen(fd, "wb") as out:
        while chunk := await file.read(CHUNK_SIZE):
            size += len(chunk)
            if size > max_bytes:
                raise FileTooLargeError(max_bytes / (1024 * 1024))
            await run_in_threadpool(out.write, chunk)
    return size


def release(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Failed to remove transient upload {path}: {e}")


@asynccontextmanager
async def transient_upload(
    file: UploadFile | str | None,
    *,
    max_bytes: int,
    upload_dir: str | None = None,
) -> AsyncIterator[UploadedDocument]:
    # A plain form field named "file" carries no upload
    if not isinstance(file, StarletteUploadFile) or not file.filename:
        raise MissingFileError()

    if upload_dir:
        os.makedirs(upload_dir, exist_ok=True)
    fd, raw_path = tempfile.mkstemp(prefix="upload_", dir=upload_dir)
    path = Path(raw_path)

    try:
        size = await _spool(file, fd, max_bytes)
        yield UploadedDocument(
            filename=file.filename,
            size=size,
            extension=file_extension(file.filename),
            path=path,
        )
    finally:
        release(path)
