import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, BinaryIO

from fastapi import APIRouter, File, Query, UploadFile
from starlette.concurrency import run_in_threadpool

from statsapi import config
from statsapi.api.schemas import ErrorOut, Statistics, UploadOut
from statsapi.errors import UploadTooLargeError
from statsapi.observability.metrics import observe_dataset
from statsapi.services.tabular import describe_file

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

CHUNK_SIZE = 64 * 1024

def copy_to_disk(source: BinaryIO, directory: Path, limit: int) -> Path:
    """
    Copy ``source`` into a new file under ``directory`` and return its path.
    Blocking; raises UploadTooLargeError past ``limit`` bytes, leaving nothing behind.
    """
    directory.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(dir=directory, suffix=".csv")
    path = Path(name)
    try:
        written = 0
        with os.fdopen(fd, "wb") as out:
            while chunk := source.read(CHUNK_SIZE):
                written += len(chunk)
                if written > limit:
                    raise UploadTooLargeError(limit)
                out.write(chunk)
    except Exception:
        path.unlink(missing_ok=True)
        raise
    return path

@asynccontextmanager
async def saved_upload(upload: UploadFile) -> AsyncIterator[Path]:
    """
    Copy an uploaded file into UPLOAD_DIR and yield its path.
    The copy is removed on every exit path, including errors.
    Disk work runs in the threadpool.
    """
    await upload.seek(0)
    path = await run_in_threadpool(
        copy_to_disk, upload.file, Path(config.UPLOAD_DIR), config.MAX_UPLOAD_BYTES
    )
    try:
        yield path
    finally:
        await run_in_threadpool(path.unlink, missing_ok=True)
        logger.debug("Removed uploaded file %s", path)

@router.post(
    "/upload-csv",
    response_model=UploadOut,
    responses={400: {"model": ErrorOut}, 413: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def upload_csv(
    file: UploadFile = File(...),
    delimiter: str = Query(",", min_length=1, max_length=1),
):
    """
    Accepts a delimited file (multipart field 'file') with a header row.
    Returns the column names, the parsed rows and descriptive statistics
    for every column holding numeric values.
    """
    async with saved_upload(file) as path:
        table, stats = await run_in_threadpool(describe_file, path, delimiter)
    for column in stats.values():
        observe_dataset("csv_column", column.count)
    logger.info("Parsed %s: %d rows, %d numeric columns", file.filename, len(table.rows), len(stats))
    return UploadOut(
        columns=table.columns,
        row_count=len(table.rows),
        statistics={name: Statistics(**s.as_dict()) for name, s in stats.items()},
        data=table.rows,
    )
