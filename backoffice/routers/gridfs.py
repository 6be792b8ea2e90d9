"""Endpoints for the GridFS bucket: listing and streaming download."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from backoffice.constants import DEFAULT_CONTENT_TYPE
from backoffice.core.deps import get_file_service
from backoffice.schemas.gridfs import FileList
from backoffice.services.gridfs import FileService

router = APIRouter()
logger = logging.getLogger(__name__)


def content_disposition(filename: str) -> str:
    """``attachment`` disposition with an ASCII fallback and an RFC 5987 name."""
    fallback = (
        filename.encode("ascii", "replace").decode("ascii").replace('"', "'")
        or "download"
    )
    disposition = f'attachment; filename="{fallback}"'
    if fallback != filename:
        disposition += f"; filename*=UTF-8''{quote(filename)}"
    return disposition


@router.get("/gridfs/files", response_model=FileList)
async def list_files(service: FileService = Depends(get_file_service)):
    files = await service.list_files()
    return FileList(files=files, count=len(files))


@router.get("/gridfs/files/{file_id}")
async def download_file(file_id: str, service: FileService = Depends(get_file_service)):
    """Stream a stored file back with its recorded content type."""
    download = await service.open_download(file_id)
    descriptor = download.descriptor

    return StreamingResponse(
        download.chunks,
        media_type=descriptor.contentType or DEFAULT_CONTENT_TYPE,
        headers={
            "Content-Disposition": content_disposition(
                descriptor.filename or descriptor.id
            ),
            "Content-Length": str(descriptor.length),
        },
    )
